import base64
import io
import logging
from typing import Optional

import numpy as np
from PIL import Image

from .decoder import NetPBMDecoder, detect_format
from .formats import RasterImage

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "PNG"

# Pillow formats that cannot store an alpha channel
NO_ALPHA_FORMATS = ("JPEG", "BMP")


def load_netpbm(filepath: str) -> RasterImage:
    """Load a plain NetPBM file from disk and decode it."""
    # Undecodable bytes (binary P4-P6 data) must not mask the magic check
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        text = f.read()

    # Inline sources are typically indented or padded with blank lines
    text = text.strip()
    image = NetPBMDecoder.decode(text)
    logger.debug(
        "Decoded %s (%s): %dx%d",
        filepath,
        detect_format(text).mimetype,
        image.width,
        image.height,
    )
    return image


def to_array(image: RasterImage) -> np.ndarray:
    """Return the pixels as a (height, width, 4) uint8 array."""
    return np.frombuffer(image.pixels, dtype=np.uint8).reshape(
        image.height, image.width, 4
    )


def to_pil_image(image: RasterImage) -> Image.Image:
    return Image.frombytes("RGBA", (image.width, image.height), image.pixels)


def _prepare(image: RasterImage, fmt: str) -> Image.Image:
    img = to_pil_image(image)
    if fmt.upper() in NO_ALPHA_FORMATS:
        img = img.convert("RGB")
    return img


def to_data_url(image: RasterImage, fmt: str = DEFAULT_FORMAT) -> str:
    """
    Encode the image as a base64 data URL.

    :param image: Decoded image.
    :param fmt: Any Pillow format name that can be written, e.g. "PNG".
    :return: String of the form "data:<mime>;base64,<payload>".
    """
    fmt = fmt.upper()
    buffer = io.BytesIO()
    _prepare(image, fmt).save(buffer, format=fmt)

    mime = Image.MIME.get(fmt, "application/octet-stream")
    payload = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:{mime};base64,{payload}"


def save_image(image: RasterImage, filepath: str, fmt: Optional[str] = None) -> None:
    """Write the image through Pillow, inferring the format from the extension when fmt is None."""
    if fmt is None:
        ext = filepath.lower().split(".")[-1]
        fmt = Image.registered_extensions().get(f".{ext}", DEFAULT_FORMAT)

    _prepare(image, fmt).save(filepath, format=fmt)
