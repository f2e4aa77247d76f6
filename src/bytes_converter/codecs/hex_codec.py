"""Hexadecimal string <-> byte buffer conversion.

Whitespace between digits is ignored: everything the regex ``\\s`` class
matches (including the ASCII separators U+001C-U+001F) plus U+FEFF, so hex
pasted with a leading byte-order mark still parses.
"""

from __future__ import annotations

import re

from bytes_converter.errors import InvalidCharacterError, OddLengthError
from bytes_converter.types import ByteBuffer

_WHITESPACE = re.compile(r"[\s\ufeff]")
_NON_HEX = re.compile(r"[^0-9A-Fa-f]")


def decode(text: str) -> ByteBuffer:
    """Parse a hex string into bytes.

    Parameters
    ----------
    text : str
        Hex digits, optionally separated by any amount of whitespace.

    Returns
    -------
    ByteBuffer
        One byte per pair of digits, most significant nibble first.

    Raises
    ------
    InvalidCharacterError
        If a non-whitespace character is not an ASCII hex digit.
    OddLengthError
        If the number of hex digits is odd.
    """
    trimmed = _WHITESPACE.sub("", text)
    bad = _NON_HEX.search(trimmed)
    if bad is not None:
        raise InvalidCharacterError(
            "Hex string can only contain 0-9 A-F",
            character=bad.group(),
            position=bad.start(),
        )
    if len(trimmed) % 2 != 0:
        raise OddLengthError("Hex string length without spaces must be multiple of 2")
    return bytes.fromhex(trimmed)


def encode(data: ByteBuffer) -> str:
    """Render bytes as space-separated uppercase hex pairs."""
    return data.hex(" ").upper()
