"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from bytes_converter.types import ConversionState, SourceFormat

DEFAULT_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of a single conversion call.

    ``text_valid`` is only ever true when ``bytes_valid`` is, and
    ``code_points`` is only populated from a validated text decode.
    """

    source_format: SourceFormat | None
    data: bytes = b""
    bytes_valid: bool = False
    text: str = ""
    text_valid: bool = False
    code_points: tuple[int, ...] = ()
    error_message: str = DEFAULT_ERROR_MESSAGE
    state: ConversionState = ConversionState.EMPTY
