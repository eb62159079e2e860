from .errors import MalformedHeaderError
from .formats import ImageHeader, RasterFormat
from .tokenizer import parse_unsigned


def _positive(tokens: list[str], position: int, role: str) -> int:
    if position >= len(tokens):
        raise MalformedHeaderError(None, role)
    token = tokens[position]
    value = parse_unsigned(token)
    if value is None or value <= 0:
        raise MalformedHeaderError(token, role)
    return value


def parse_header(
    tokens: list[str], fmt: RasterFormat
) -> tuple[ImageHeader, list[str]]:
    """
    Read width, height and (except for bitmaps) the max value.

    :return: The header and the tokens left over for the sample section.
    """
    width = _positive(tokens, 0, "width")
    height = _positive(tokens, 1, "height")

    if not fmt.has_max_value:
        return ImageHeader(width, height), tokens[2:]

    max_value = _positive(tokens, 2, "max value")
    return ImageHeader(width, height, max_value), tokens[3:]
