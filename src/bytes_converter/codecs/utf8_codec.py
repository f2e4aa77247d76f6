"""UTF-8 byte buffer <-> text conversion and code-point segmentation."""

from __future__ import annotations

from bytes_converter.errors import InvalidUtf8Error
from bytes_converter.types import ByteBuffer, CodePoint

REPLACEMENT_CHARACTER = "\ufffd"

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def decode(data: ByteBuffer) -> str:
    """Strictly decode UTF-8 bytes into text.

    Overlong forms, encoded surrogate halves, values above U+10FFFF and
    truncated or unexpected continuation bytes are all rejected.

    Raises
    ------
    InvalidUtf8Error
        If ``data`` is not well-formed UTF-8.
    """
    try:
        return bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8Error(
            f"Invalid UTF-8 sequence at byte offset {exc.start}: {exc.reason}",
            offset=exc.start,
        ) from exc


def encode(text: str) -> ByteBuffer:
    """Encode text as UTF-8.

    Surrogate pairs held as two separate code units are joined first and a
    lone surrogate is written as U+FFFD, so encoding never fails.
    """
    return join_surrogates(text).encode("utf-8")


def segment_code_points(text: str) -> tuple[CodePoint, ...]:
    """Return one Unicode scalar value per character of ``text``."""
    return tuple(ord(char) for char in join_surrogates(text))


def join_surrogates(text: str) -> str:
    """Combine UTF-16 surrogate pairs into scalars and replace lone halves."""
    if not any(0xD800 <= ord(char) <= 0xDFFF for char in text):
        return text

    chars: list[str] = []
    index = 0
    while index < len(text):
        unit = ord(text[index])
        if unit in _HIGH_SURROGATES and index + 1 < len(text):
            low = ord(text[index + 1])
            if low in _LOW_SURROGATES:
                chars.append(chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)))
                index += 2
                continue
        if unit in _HIGH_SURROGATES or unit in _LOW_SURROGATES:
            chars.append(REPLACEMENT_CHARACTER)
        else:
            chars.append(text[index])
        index += 1
    return "".join(chars)
