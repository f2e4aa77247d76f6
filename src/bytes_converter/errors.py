"""Exception hierarchy for byte/text conversion failures."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for conversion failures surfaced to callers."""

    exit_code = 1


class DecodeError(ConversionError):
    """Input could not be decoded into a byte buffer."""


class InvalidCharacterError(DecodeError):
    """Input contains a character outside the permitted alphabet."""

    def __init__(self, message: str, *, character: str, position: int) -> None:
        super().__init__(message)
        self.character = character
        self.position = position


class OddLengthError(DecodeError):
    """Hex input has an odd number of digits after whitespace removal."""


class MisplacedPaddingError(DecodeError):
    """Base64 padding is followed by a non-padding character."""


class InvalidUtf8Error(DecodeError):
    """Byte buffer is not a valid UTF-8 sequence."""

    def __init__(self, message: str, *, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidEncodingError(DecodeError):
    """Percent-encoded input is malformed or does not decode to UTF-8."""
