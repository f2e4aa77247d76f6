"""Top-level API for converting between bytes and their textual forms."""

from __future__ import annotations

from bytes_converter.application.options import ConversionOptions
from bytes_converter.application.results import ConversionResult
from bytes_converter.types import ConversionState, SourceFormat

__version__ = "0.1.0"


def convert(
    source_format: SourceFormat | str,
    text: str,
    *,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Decode raw input into bytes, text and code points.

    Parameters
    ----------
    source_format : SourceFormat | str
        One of ``text``, ``uri``, ``hex`` or ``base64``.
    text : str
        Raw input string as typed by the user.
    options : ConversionOptions | None, default=None
        Optional conversion options.

    Returns
    -------
    ConversionResult
        Byte buffer, decoded text, code points and validity flags. Never
        raises for invalid input.
    """
    from .application.use_cases import convert as _impl

    return _impl(source_format, text, options=options)


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ConversionState",
    "SourceFormat",
    "convert",
]
