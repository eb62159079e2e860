import re
from typing import Optional

from .errors import TokenizationError

COMMENT = "#"

# Comments end at CR, LF or CRLF only; other whitespace stays inside them
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def tokenize(text: str) -> list[str]:
    """
    Split a plain NetPBM document into whitespace-delimited tokens.

    :param text: The full document, magic identifier included.
    :return: Tokens in document order, comments removed.
    """
    # Skip the 2-character magic ("P1", "P2", ...)
    body = text[2:]

    # Comments run from '#' to the end of their own line only
    lines = [line.split(COMMENT, 1)[0] for line in LINE_BREAK.split(body)]

    tokens = " ".join(lines).split()
    if not tokens:
        raise TokenizationError()
    return tokens


def parse_unsigned(token: str) -> Optional[int]:
    """Parse a plain decimal integer, returning None for anything else."""
    if token.isascii() and token.isdigit():
        return int(token)
    return None
