"""Public codec API (thin helpers over the codec modules)."""

from __future__ import annotations

from bytes_converter.codecs import base64_codec, hex_codec, uri_codec, utf8_codec


def hex_to_bytes(text: str) -> bytes:
    """Parse whitespace-tolerant hex text into bytes."""
    return hex_codec.decode(text)


def bytes_to_hex(data: bytes) -> str:
    """Render bytes as space-separated uppercase hex."""
    return hex_codec.encode(data)


def base64_to_bytes(text: str, block_size: int = 1) -> bytes:
    """Decode Base64 text, zero-padding the output to ``block_size``."""
    return base64_codec.decode(text, block_size)


def bytes_to_base64(data: bytes) -> str:
    """Encode bytes as padded, 76-column wrapped Base64."""
    return base64_codec.encode(data)


def uri_decode(text: str) -> str:
    """Percent-decode a URI component into validated text."""
    return uri_codec.decode_text(text)


def uri_encode(text: str) -> str:
    """Percent-encode text as a URI component."""
    return uri_codec.encode(text)


def utf8_decode(data: bytes) -> str:
    """Strictly decode UTF-8 bytes."""
    return utf8_codec.decode(data)


def utf8_encode(text: str) -> bytes:
    """Encode text as UTF-8."""
    return utf8_codec.encode(text)


def code_points(text: str) -> tuple[int, ...]:
    """Split text into Unicode scalar values."""
    return utf8_codec.segment_code_points(text)
