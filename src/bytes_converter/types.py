"""Shared type aliases and enumerations for converter modules."""

from __future__ import annotations

from enum import StrEnum

type ByteBuffer = bytes
type CodePoint = int


class SourceFormat(StrEnum):
    """Representation the raw input string is written in."""

    TEXT = "text"
    URI = "uri"
    HEX = "hex"
    BASE64 = "base64"


class ConversionState(StrEnum):
    """Stage reached by a conversion call.

    ``TEXT_DECODED`` is transient: a successful text decode always proceeds
    to ``CODE_POINTS_EXTRACTED``.
    """

    EMPTY = "empty"
    BYTES_DECODED = "bytes_decoded"
    BYTES_INVALID = "bytes_invalid"
    TEXT_DECODED = "text_decoded"
    TEXT_INVALID = "text_invalid"
    CODE_POINTS_EXTRACTED = "code_points_extracted"


def parse_source_format(value: SourceFormat | str) -> SourceFormat:
    """Normalize a format tag given as enum member or case-insensitive name."""
    if isinstance(value, SourceFormat):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown source format: {value!r} (expected a string tag)")
    normalized = value.strip().lower()
    try:
        return SourceFormat(normalized)
    except ValueError as exc:
        choices = ", ".join(member.value for member in SourceFormat)
        raise ValueError(
            f"Unknown source format: {value!r} (expected one of: {choices})"
        ) from exc
