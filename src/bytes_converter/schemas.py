"""Pydantic schemas for runtime validation of conversion inputs and outputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bytes_converter.types import ConversionState, SourceFormat, parse_source_format


class ConversionOptionsConfig(BaseModel):
    """Validated conversion options."""

    model_config = ConfigDict(extra="forbid")

    base64_block_size: int = Field(default=1, ge=1)


class ConvertRequest(BaseModel):
    """Validated transport payload for a conversion request."""

    model_config = ConfigDict(extra="forbid")

    format: SourceFormat
    input: str

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_source_format(value)
        return value


class ConversionResponse(BaseModel):
    """Conversion outcome together with every derived display string."""

    model_config = ConfigDict(extra="forbid")

    format: SourceFormat | None
    state: ConversionState
    bytes_valid: bool
    text_valid: bool
    error_message: str
    text: str
    code_points: list[int]
    hex: str
    base64: str
    uri: str
    unicode: str
