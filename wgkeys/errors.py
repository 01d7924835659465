"""Error types raised when decoding key material."""


class ParseError(ValueError):
    """Base class for all key parsing failures."""


class LengthError(ParseError):
    """Input or decoded payload does not have the expected length."""

    def __init__(self, expected: int | tuple[int, ...], actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"length mismatch: expected {expected}, got {actual}")


class CodecError(ParseError):
    """The underlying text codec rejected the input."""

    def __init__(self, codec: str, detail: str):
        self.codec = codec
        self.detail = detail
        super().__init__(f"{codec} decoding error: {detail}")
