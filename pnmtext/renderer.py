from .formats import ImageHeader, RasterFormat, RasterImage

OPAQUE = 0xFF


def _scale(sample: int, max_value: int) -> int:
    # floor(sample / max_value * 255), saturating for out-of-range samples
    return min(sample * 0xFF // max_value, 0xFF)


def render(header: ImageHeader, samples: list[int], fmt: RasterFormat) -> RasterImage:
    """
    Map decoded samples onto an RGBA raster.

    :param header: Dimensions and max value of the image.
    :param samples: Exactly header.sample_count(fmt) samples.
    :param fmt: Format the samples were decoded from.
    :return: RasterImage with width * height * 4 bytes of pixel data.
    """
    width, height = header.width, header.height
    channels = fmt.channels
    result = bytearray()

    for y in range(height):
        for x in range(width):
            pos = (y * width + x) * channels

            if fmt is RasterFormat.BITMAP:
                # 1 is ink (black), 0 is paper (white)
                gray = 0xFF - samples[pos] * 0xFF
                r = g = b = gray

            elif fmt is RasterFormat.GRAYSCALE:
                r = g = b = _scale(samples[pos], header.max_value)

            else:
                r = _scale(samples[pos], header.max_value)
                g = _scale(samples[pos + 1], header.max_value)
                b = _scale(samples[pos + 2], header.max_value)

            result.extend((r, g, b, OPAQUE))

    return RasterImage(width, height, bytes(result))
