"""Bracket segment tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNTERMINATED_QUOTE = "unterminated quote"
UNTERMINATED_BRACKET = "unterminated bracket"


class _State(str, Enum):
    NORMAL = "normal"
    IN_QUOTE = "in_quote"
    ESCAPE_PENDING = "escape_pending"


@dataclass(frozen=True, slots=True)
class SegmentScan:
    """Raw segments found in a line, left to right.

    `problem` is set when the line ended inside a segment; the last segment
    then holds whatever was collected up to the end of the line.
    """

    segments: tuple[str, ...]
    problem: str | None = None


def split_segments(line: str) -> SegmentScan:
    """Split a line into the raw text of its top-level `[...]` segments.

    Brackets inside a quoted value do not count toward nesting, and a
    backslash inside quotes takes the next character verbatim, so `\\"`
    neither closes the quote nor ends the segment.
    """
    segments: list[str] = []
    buf: list[str] = []
    depth = 0
    state = _State.NORMAL

    for ch in line:
        if depth == 0:
            # Text between segments is dropped.
            if ch == "[":
                depth = 1
                buf = []
            continue

        if state is _State.ESCAPE_PENDING:
            buf.append(ch)
            state = _State.IN_QUOTE
            continue

        if state is _State.IN_QUOTE:
            buf.append(ch)
            if ch == "\\":
                state = _State.ESCAPE_PENDING
            elif ch == '"':
                state = _State.NORMAL
            continue

        if ch == '"':
            state = _State.IN_QUOTE
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                segments.append("".join(buf))
                continue
        buf.append(ch)

    if depth == 0:
        return SegmentScan(segments=tuple(segments))

    segments.append("".join(buf))
    problem = UNTERMINATED_BRACKET if state is _State.NORMAL else UNTERMINATED_QUOTE
    return SegmentScan(segments=tuple(segments), problem=problem)
