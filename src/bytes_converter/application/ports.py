"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol


class ByteDecoder(Protocol):
    """Turn a raw input string into a byte buffer."""

    def __call__(self, text: str) -> bytes:
        """Decode text or raise a ``DecodeError``."""


class TextDecoder(Protocol):
    """Turn a byte buffer into validated text."""

    def __call__(self, data: bytes) -> str:
        """Decode bytes or raise ``InvalidUtf8Error``."""
