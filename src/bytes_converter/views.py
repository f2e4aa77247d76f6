"""Display renderings derived from a conversion result.

Every formatter is a pure function of an already computed
:class:`~bytes_converter.application.results.ConversionResult` and returns an
empty string for fields the conversion did not validate.
"""

from __future__ import annotations

from dataclasses import dataclass

from bytes_converter.application.results import ConversionResult
from bytes_converter.codecs import base64_codec, hex_codec, uri_codec
from bytes_converter.schemas import ConversionResponse


@dataclass(frozen=True)
class ConversionViews:
    """All display strings for one conversion result."""

    hex: str
    base64: str
    uri: str
    unicode: str


def format_hex(result: ConversionResult) -> str:
    """Render bytes as space-separated uppercase hex pairs."""
    if not result.bytes_valid:
        return ""
    return hex_codec.encode(result.data)


def format_base64(result: ConversionResult) -> str:
    """Render bytes as line-wrapped Base64."""
    if not result.bytes_valid:
        return ""
    return base64_codec.encode(result.data)


def format_uri(result: ConversionResult) -> str:
    """Render the decoded text percent-encoded."""
    if not result.text_valid:
        return ""
    return uri_codec.encode(result.text)


def format_code_point(code_point: int) -> str:
    """Render one code point as ``U+`` followed by six lowercase hex digits."""
    return f"U+{code_point:06x}"


def format_unicode(result: ConversionResult) -> str:
    """Render the code point sequence, one ``U+xxxxxx`` token per scalar."""
    if not result.text_valid:
        return ""
    return " ".join(format_code_point(cp) for cp in result.code_points)


def render_views(result: ConversionResult) -> ConversionViews:
    """Compute every display string for ``result``."""
    return ConversionViews(
        hex=format_hex(result),
        base64=format_base64(result),
        uri=format_uri(result),
        unicode=format_unicode(result),
    )


def to_response(result: ConversionResult) -> ConversionResponse:
    """Build the transport model shared by the CLI and HTTP surfaces."""
    views = render_views(result)
    return ConversionResponse(
        format=result.source_format,
        state=result.state,
        bytes_valid=result.bytes_valid,
        text_valid=result.text_valid,
        error_message=result.error_message,
        text=result.text,
        code_points=list(result.code_points),
        hex=views.hex,
        base64=views.base64,
        uri=views.uri,
        unicode=views.unicode,
    )
