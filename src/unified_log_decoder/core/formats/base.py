"""Decoder interface."""

from __future__ import annotations

from typing import Protocol

from ..models import DecodeResult


class LineDecoder(Protocol):
    """Decoder interface: always return a DecodeResult, never raise on content."""

    def decode(self, line_no: int, line: str) -> DecodeResult:
        """Decode one line (without its terminator)."""
        ...
