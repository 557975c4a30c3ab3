"""Quoted/bare value decoding and its inverse."""

from __future__ import annotations

import re

# Only quote and backslash escapes are resolved; `\n` and friends stay literal.
_ESCAPE_RE = re.compile(r'\\(["\\])')
_NEEDS_ESCAPE_RE = re.compile(r'(["\\])')


def _char_needs_quote(ch: str) -> bool:
    return ch <= " " or ch in '="[]'


def is_quoted(text: str) -> bool:
    """True when `text` is wrapped in a pair of quotes whose closing quote is not escaped."""
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return False
    inner = text[1:-1]
    trailing = len(inner) - len(inner.rstrip("\\"))
    return trailing % 2 == 0


def decode_value(text: str) -> str:
    """Return the logical value of a segment or field value.

    Quoted values lose their quotes and have `\\"` and `\\\\` resolved; any
    other backslash sequence is kept as both characters. Bare tokens are
    returned verbatim.
    """
    if not is_quoted(text):
        return text
    return _ESCAPE_RE.sub(r"\1", text[1:-1])


def encode_value(value: str) -> str:
    """Render `value` so that `decode_value` gives it back.

    Values without characters that need quoting stay bare.
    """
    if value and not any(_char_needs_quote(ch) for ch in value):
        return value
    return '"' + _NEEDS_ESCAPE_RE.sub(r"\\\1", value) + '"'
