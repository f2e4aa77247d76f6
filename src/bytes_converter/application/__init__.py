"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Mapping

from bytes_converter.application.options import ConversionOptions
from bytes_converter.application.ports import ByteDecoder, TextDecoder
from bytes_converter.application.results import ConversionResult
from bytes_converter.types import SourceFormat


def build_conversion_options(*, base64_block_size: int = 1) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from bytes_converter.application.use_cases import build_conversion_options as _impl

    return _impl(base64_block_size=base64_block_size)


def convert(
    source_format: SourceFormat | str,
    text: str,
    *,
    options: ConversionOptions | None = None,
    decoders: Mapping[SourceFormat, ByteDecoder] | None = None,
    text_decoder: TextDecoder | None = None,
) -> ConversionResult:
    """Convert raw input via lazy use-case import."""
    from bytes_converter.application.use_cases import convert as _impl

    return _impl(
        source_format,
        text,
        options=options,
        decoders=decoders,
        text_decoder=text_decoder,
    )


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "build_conversion_options",
    "convert",
]
