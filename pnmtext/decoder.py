from .errors import UnsupportedFormatError
from .formats import BINARY_MAGICS, RasterFormat, RasterImage
from .header import parse_header
from .renderer import render
from .samples import decode_samples
from .tokenizer import tokenize


def detect_format(text: str) -> RasterFormat:
    """Select the format from the 2-character magic identifier."""
    magic = text[:2]
    if magic in BINARY_MAGICS:
        raise UnsupportedFormatError(magic, "Binary NetPBM formats are not supported")
    try:
        return RasterFormat(magic)
    except ValueError:
        raise UnsupportedFormatError(magic) from None


class NetPBMDecoder:
    """
    A class to decode plain (ASCII) NetPBM documents into RGBA pixel data.
    """

    @staticmethod
    def decode(text: str) -> RasterImage:
        """
        Decode a P1, P2 or P3 document given as a string.

        :param text: The document, starting with its magic identifier.
        :return: RasterImage holding row-major RGBA bytes.
        :raises DecodeError: On the first problem found in the input.
        """
        fmt = detect_format(text)

        # --- Header Parsing ---
        tokens = tokenize(text)
        header, remaining = parse_header(tokens, fmt)

        # --- Sample Decoding ---
        samples = decode_samples(remaining, header, fmt)

        # --- Rendering ---
        return render(header, samples, fmt)


def decode(text: str) -> RasterImage:
    return NetPBMDecoder.decode(text)
