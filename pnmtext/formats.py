from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RasterFormat(Enum):
    """The ASCII NetPBM variants, keyed by their magic identifier."""

    BITMAP = "P1"
    GRAYSCALE = "P2"
    PIXMAP = "P3"

    @property
    def channels(self) -> int:
        """Samples per pixel in the data section."""
        if self is RasterFormat.PIXMAP:
            return 3
        return 1

    @property
    def has_max_value(self) -> bool:
        return self is not RasterFormat.BITMAP

    @property
    def mimetype(self) -> str:
        if self is RasterFormat.BITMAP:
            return "image/x-portable-bitmap"
        if self is RasterFormat.GRAYSCALE:
            return "image/x-portable-graymap"
        return "image/x-portable-pixmap"


# Binary variants share the magic namespace but are not decoded
BINARY_MAGICS = ("P4", "P5", "P6")


@dataclass(frozen=True)
class ImageHeader:
    width: int
    height: int
    max_value: Optional[int] = None

    def sample_count(self, fmt: RasterFormat) -> int:
        return self.width * self.height * fmt.channels


@dataclass(frozen=True)
class RasterImage:
    """
    A decoded image: row-major RGBA, 4 bytes per pixel.

    The buffer is immutable once constructed.
    """

    width: int
    height: int
    pixels: bytes

    def pixel(self, x: int, y: int) -> tuple:
        """Return the (R, G, B, A) tuple at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        offset = (y * self.width + x) * 4
        return tuple(self.pixels[offset : offset + 4])
