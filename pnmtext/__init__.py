from .decoder import NetPBMDecoder, decode, detect_format
from .errors import (
    DecodeError,
    InsufficientDataError,
    MalformedHeaderError,
    MalformedSampleError,
    TokenizationError,
    UnsupportedFormatError,
)
from .formats import ImageHeader, RasterFormat, RasterImage

__all__ = [
    "NetPBMDecoder",
    "decode",
    "detect_format",
    "RasterFormat",
    "ImageHeader",
    "RasterImage",
    "DecodeError",
    "UnsupportedFormatError",
    "TokenizationError",
    "MalformedHeaderError",
    "MalformedSampleError",
    "InsufficientDataError",
]
