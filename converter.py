import argparse
import logging
import os
import sys

from pnmtext import DecodeError
from pnmtext.utils import load_netpbm, save_image

logger = logging.getLogger(__name__)

INPUT_IMAGE = "sample.ppm"
OUTPUT_PNG = "sample.png"

NETPBM_EXTENSIONS = (".pbm", ".pgm", ".ppm", ".pnm")


def netpbm_to_png(netpbm_path, png_path):
    image = load_netpbm(netpbm_path)
    save_image(image, png_path, "PNG")
    print(f"Converted {netpbm_path} to {png_path}")


def convert_all(directory, output_dir=None):
    """Convert every NetPBM file in a directory, skipping ones that fail to decode."""
    output_dir = output_dir or directory
    os.makedirs(output_dir, exist_ok=True)

    converted = []
    for name in sorted(os.listdir(directory)):
        stem, ext = os.path.splitext(name)
        if ext.lower() not in NETPBM_EXTENSIONS:
            continue

        png_path = os.path.join(output_dir, stem + ".png")
        try:
            netpbm_to_png(os.path.join(directory, name), png_path)
        except DecodeError as exc:
            logger.warning("Skipping %s: %s", name, exc)
            continue
        converted.append(png_path)

    return converted


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert plain NetPBM images (P1/P2/P3) to PNG."
    )
    parser.add_argument(
        "path", nargs="?", default=INPUT_IMAGE, help="NetPBM file or directory"
    )
    parser.add_argument(
        "-o", "--output", help=f"Output file or directory (default: {OUTPUT_PNG})"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        if os.path.isdir(args.path):
            converted = convert_all(args.path, args.output)
            print(f"Converted {len(converted)} file(s)")
        else:
            netpbm_to_png(args.path, args.output or OUTPUT_PNG)
    except (DecodeError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
