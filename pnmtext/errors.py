class DecodeError(ValueError):
    """Base class for everything NetPBMDecoder.decode raises on bad input."""

    def __init__(self, message: str):
        super().__init__(f"NetPBM.decode: {message}")


class UnsupportedFormatError(DecodeError):
    def __init__(self, magic: str, reason: str = "Unsupported NetPBM format"):
        self.magic = magic
        super().__init__(f"{reason}: {magic!r}")


class TokenizationError(DecodeError):
    def __init__(self):
        super().__init__("No tokens found after the magic identifier")


class MalformedHeaderError(DecodeError):
    def __init__(self, token, role: str):
        self.token = token
        self.role = role
        if token is None:
            super().__init__(f"Missing {role} in header")
        else:
            super().__init__(f"Invalid {role} in header: {token!r}")


class MalformedSampleError(DecodeError):
    def __init__(self, token: str, index: int):
        self.token = token
        self.index = index
        super().__init__(f"Invalid sample {token!r} at position {index}")


class InsufficientDataError(DecodeError):
    def __init__(self, expected: int, available: int):
        self.expected = expected
        self.available = available
        super().__init__(
            f"Incomplete image, expected {expected} samples but found {available}"
        )
