"""Unit tests for percent-encoding and decoding."""

from __future__ import annotations

import pytest

from bytes_converter.codecs import uri_codec
from bytes_converter.errors import InvalidEncodingError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("%E2%82%AC", "€"),
        ("%e2%82%ac", "€"),
        ("a%20b", "a b"),
        ("caf%C3%A9", "café"),
        ("a+b", "a+b"),
        ("€%20", "€ "),
        ("%25", "%"),
    ],
)
def test_decode_text(raw: str, expected: str) -> None:
    """Resolve escapes and pass other characters through."""
    assert uri_codec.decode_text(raw) == expected


@pytest.mark.parametrize("raw", ["%FF", "%C3", "%ED%A0%80"])
def test_decode_text_rejects_invalid_utf8(raw: str) -> None:
    """Decoded bytes must be valid UTF-8."""
    with pytest.raises(InvalidEncodingError, match="URI malformed"):
        uri_codec.decode_text(raw)


@pytest.mark.parametrize("raw", ["%", "100%", "%G1", "%4"])
def test_decode_text_rejects_malformed_escape(raw: str) -> None:
    """A '%' must be followed by two hex digits."""
    with pytest.raises(InvalidEncodingError, match="two hex digits"):
        uri_codec.decode_text(raw)


def test_decode_text_chains_utf8_error() -> None:
    """Keep the underlying UTF-8 failure as the cause."""
    with pytest.raises(InvalidEncodingError) as excinfo:
        uri_codec.decode_text("%FF")
    assert excinfo.value.__cause__ is not None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("€", "%E2%82%AC"),
        ("AZaz09-_.!~*'()", "AZaz09-_.!~*'()"),
        ("a b/?&=#+", "a%20b%2F%3F%26%3D%23%2B"),
        ("%", "%25"),
        ("\U0001f600", "%F0%9F%98%80"),
    ],
)
def test_encode_escapes_everything_but_unreserved(text: str, expected: str) -> None:
    """Leave letters, digits and unreserved marks alone; escape the rest."""
    assert uri_codec.encode(text) == expected
