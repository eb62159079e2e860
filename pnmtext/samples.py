from .errors import InsufficientDataError, MalformedSampleError
from .formats import ImageHeader, RasterFormat
from .tokenizer import parse_unsigned

BITMAP_DIGITS = "01"


def decode_samples(
    tokens: list[str], header: ImageHeader, fmt: RasterFormat
) -> list[int]:
    """
    Turn the data section into a flat list of integer samples.

    Bitmaps are read one character at a time, since whitespace between
    their digits is optional. Graymaps and pixmaps are read one token per
    sample. Only the first width * height * channels samples are looked at;
    anything after them is ignored.

    :param tokens: Tokens remaining after the header.
    :param header: The parsed header.
    :param fmt: Format selected by the magic identifier.
    :return: Exactly header.sample_count(fmt) samples.
    """
    required = header.sample_count(fmt)

    if fmt is RasterFormat.BITMAP:
        source = "".join(tokens)
    else:
        source = tokens

    samples = []
    for index, token in enumerate(source[:required]):
        if fmt is RasterFormat.BITMAP:
            if token not in BITMAP_DIGITS:
                raise MalformedSampleError(token, index)
            samples.append(int(token))
        else:
            value = parse_unsigned(token)
            if value is None:
                raise MalformedSampleError(token, index)
            samples.append(value)

    if len(samples) < required:
        raise InsufficientDataError(required, len(samples))

    return samples
