"""Percent-encoding (URI component) <-> text conversion."""

from __future__ import annotations

import re
from urllib.parse import quote_from_bytes, unquote_to_bytes

from bytes_converter.codecs import utf8_codec
from bytes_converter.errors import InvalidEncodingError, InvalidUtf8Error

# Marks left unescaped besides ASCII letters and digits; ``_.-~`` are always
# safe for ``quote_from_bytes``.
UNRESERVED_MARKS = "!*'()"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_text(text: str) -> str:
    """Percent-decode ``text`` and validate the resulting bytes as UTF-8.

    Raises
    ------
    InvalidEncodingError
        If a ``%`` is not followed by two hex digits, or the decoded byte
        stream is not valid UTF-8.
    """
    bad = _MALFORMED_ESCAPE.search(text)
    if bad is not None:
        raise InvalidEncodingError(
            f"URI malformed: '%' at position {bad.start()} is not followed by two hex digits"
        )
    raw = unquote_to_bytes(utf8_codec.encode(text))
    try:
        return utf8_codec.decode(raw)
    except InvalidUtf8Error as exc:
        raise InvalidEncodingError(f"URI malformed: {exc}") from exc


def encode(text: str) -> str:
    """Percent-encode every code point except unreserved characters."""
    return quote_from_bytes(utf8_codec.encode(text), safe=UNRESERVED_MARKS)
