"""Codec namespace: one module per textual representation of bytes."""

from __future__ import annotations

from bytes_converter.codecs import base64_codec, hex_codec, uri_codec, utf8_codec

__all__ = ["base64_codec", "hex_codec", "uri_codec", "utf8_codec"]
