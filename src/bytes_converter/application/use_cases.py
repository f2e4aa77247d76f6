"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from functools import partial

from pydantic import ValidationError

from bytes_converter.application.options import ConversionOptions
from bytes_converter.application.ports import ByteDecoder, TextDecoder
from bytes_converter.application.results import ConversionResult
from bytes_converter.codecs import base64_codec, hex_codec, uri_codec, utf8_codec
from bytes_converter.errors import ConversionError
from bytes_converter.schemas import ConversionOptionsConfig
from bytes_converter.types import ConversionState, SourceFormat, parse_source_format

logger = logging.getLogger(__name__)


def _uri_to_bytes(text: str) -> bytes:
    return utf8_codec.encode(uri_codec.decode_text(text))


def default_decoders(options: ConversionOptions) -> dict[SourceFormat, ByteDecoder]:
    """Map every source format to the decoder that turns it into bytes."""
    return {
        SourceFormat.TEXT: utf8_codec.encode,
        SourceFormat.URI: _uri_to_bytes,
        SourceFormat.HEX: hex_codec.decode,
        SourceFormat.BASE64: partial(
            base64_codec.decode, block_size=options.base64_block_size
        ),
    }


def convert(
    source_format: SourceFormat | str,
    text: str,
    *,
    options: ConversionOptions | None = None,
    decoders: Mapping[SourceFormat, ByteDecoder] | None = None,
    text_decoder: TextDecoder | None = None,
) -> ConversionResult:
    """Use-case: decode ``text`` written in ``source_format`` into every view.

    Stages run strictly in order (bytes, then text, then code points) and
    each stage only runs when the previous one succeeded. Failures never
    propagate: a byte-level failure is reported through ``error_message``
    while undecodable text simply leaves ``text_valid`` false.

    Parameters
    ----------
    source_format : SourceFormat | str
        Format the raw input is written in.
    text : str
        Raw user input.
    options : ConversionOptions | None, default=None
        Conversion options; defaults reproduce unaligned Base64 output.
    decoders : Mapping[SourceFormat, ByteDecoder] | None, default=None
        Override of the per-format byte decoders.
    text_decoder : TextDecoder | None, default=None
        Override of the UTF-8 text decoder.

    Returns
    -------
    ConversionResult
        A freshly built result; nothing is carried over between calls.
    """
    result = ConversionResult(source_format=None)

    try:
        resolved_format = parse_source_format(source_format)
    except ValueError as exc:
        return replace(result, error_message=str(exc), state=ConversionState.BYTES_INVALID)
    result = replace(result, source_format=resolved_format)

    options = options or ConversionOptions()
    decoder_map = decoders if decoders is not None else default_decoders(options)
    text_decoder = text_decoder or utf8_codec.decode

    decoder = decoder_map.get(resolved_format)
    if decoder is None:
        return replace(
            result,
            error_message=f"No decoder registered for source format: {resolved_format}",
            state=ConversionState.BYTES_INVALID,
        )

    try:
        data = bytes(decoder(text))
    except ConversionError as exc:
        logger.debug("%s input rejected: %s", resolved_format, exc)
        return replace(result, error_message=str(exc), state=ConversionState.BYTES_INVALID)
    except Exception as exc:
        logger.exception("unexpected error while decoding %s input", resolved_format)
        return replace(
            result,
            error_message=f"Unexpected error: {exc}",
            state=ConversionState.BYTES_INVALID,
        )

    result = replace(
        result,
        data=data,
        bytes_valid=True,
        error_message="",
        state=ConversionState.BYTES_DECODED,
    )

    try:
        decoded = text_decoder(data)
    except ConversionError as exc:
        logger.debug("bytes are not valid UTF-8 text: %s", exc)
        return replace(result, state=ConversionState.TEXT_INVALID)
    except Exception:
        logger.exception("unexpected error while decoding bytes as text")
        return replace(result, state=ConversionState.TEXT_INVALID)

    return replace(
        result,
        text=decoded,
        text_valid=True,
        code_points=utf8_codec.segment_code_points(decoded),
        state=ConversionState.CODE_POINTS_EXTRACTED,
    )


def build_conversion_options(*, base64_block_size: int = 1) -> ConversionOptions:
    """Build typed option object from command/API params."""
    try:
        config = ConversionOptionsConfig(base64_block_size=base64_block_size)
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion options: {exc}") from exc
    return ConversionOptions(base64_block_size=config.base64_block_size)
