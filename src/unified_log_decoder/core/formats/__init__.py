"""Unified log format: segment tokenizer, value codec and record decoder."""

from __future__ import annotations

from .base import LineDecoder
from .segments import UNTERMINATED_BRACKET, UNTERMINATED_QUOTE, SegmentScan, split_segments
from .unified import UnifiedLogDecoder, decode_line, record_from_segments, render_line
from .values import decode_value, encode_value, is_quoted

__all__ = [
    "LineDecoder",
    "SegmentScan",
    "UNTERMINATED_BRACKET",
    "UNTERMINATED_QUOTE",
    "UnifiedLogDecoder",
    "decode_line",
    "decode_value",
    "encode_value",
    "is_quoted",
    "record_from_segments",
    "render_line",
    "split_segments",
]
