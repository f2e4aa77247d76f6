"""Base64 (RFC 4648 standard alphabet) <-> byte buffer conversion.

Decoding is strict about the alphabet and padding placement but tolerant of
whitespace (including U+FEFF), so the MIME-style line breaks emitted by
:func:`encode` decode cleanly. A trailing partial group is decoded into as
many whole bytes as its bits allow instead of being rejected.
"""

from __future__ import annotations

import re

from bytes_converter.errors import InvalidCharacterError, MisplacedPaddingError
from bytes_converter.types import ByteBuffer

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
LINE_LENGTH = 76
LINE_BREAK = "\r\n"

_SEXTETS = {char: value for value, char in enumerate(ALPHABET)}
_WHITESPACE = re.compile(r"[\s\ufeff]")
_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/=]")
_MISPLACED_PADDING = re.compile(r"=[^=]")


def decode(text: str, block_size: int = 1) -> ByteBuffer:
    """Decode a Base64 string into bytes.

    Parameters
    ----------
    text : str
        Base64 text. Whitespace anywhere in the string is ignored.
    block_size : int, default=1
        Output length is zero-padded up to a multiple of this value.

    Returns
    -------
    ByteBuffer
        Decoded payload, aligned to ``block_size``.

    Raises
    ------
    InvalidCharacterError
        If a character outside ``[A-Za-z0-9+/=]`` is present.
    MisplacedPaddingError
        If ``=`` is followed by any other character.
    ValueError
        If ``block_size`` is smaller than one.
    """
    if block_size < 1:
        raise ValueError("block_size must be a positive integer.")

    cleaned = _WHITESPACE.sub("", text)
    bad = _NON_BASE64.search(cleaned)
    if bad is not None:
        raise InvalidCharacterError(
            "base64-string contains invalid characters",
            character=bad.group(),
            position=bad.start(),
        )
    if _MISPLACED_PADDING.search(cleaned):
        raise MisplacedPaddingError("base64-string can only have = at end of string")

    digits = cleaned.replace("=", "")
    out_len = (len(digits) * 3 + 1) >> 2

    out = bytearray()
    for start in range(0, len(digits), 4):
        accumulator = 0
        for index, char in enumerate(digits[start : start + 4]):
            accumulator |= _SEXTETS[char] << 6 * (3 - index)
        out += accumulator.to_bytes(3, "big")
    # the last group may carry fewer meaningful bytes than it was packed into
    del out[out_len:]

    aligned_len = -(-out_len // block_size) * block_size
    out.extend(bytes(aligned_len - out_len))
    return bytes(out)


def encode(data: ByteBuffer) -> str:
    """Encode bytes as padded Base64, wrapped every 76 output characters."""
    payload = bytes(data)
    quads: list[str] = []
    for start in range(0, len(payload), 3):
        group = payload[start : start + 3]
        accumulator = int.from_bytes(group.ljust(3, b"\x00"), "big")
        quad = "".join(ALPHABET[accumulator >> shift & 0x3F] for shift in (18, 12, 6, 0))
        missing = 3 - len(group)
        quads.append(quad[: 4 - missing] + "=" * missing)

    encoded = "".join(quads)
    return LINE_BREAK.join(
        encoded[start : start + LINE_LENGTH]
        for start in range(0, len(encoded), LINE_LENGTH)
    )
