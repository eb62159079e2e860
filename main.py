from pnmtext import NetPBMDecoder
from pnmtext.utils import to_data_url

SAMPLE_PPM = """P3
# 2x2 test image: red, green, blue, white
2 2
255
255 0 0    0 255 0
0 0 255    255 255 255
"""

if __name__ == "__main__":
    image = NetPBMDecoder.decode(SAMPLE_PPM)
    print(f"Decoded image: {image.width}x{image.height}")
    print(f"Pixel Data (Hex): {image.pixels.hex()}")
    print(to_data_url(image))
