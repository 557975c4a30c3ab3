"""Unified log format decoder.

A unified-log line is a run of bracketed segments::

    [2018/12/15 14:20:11.015 +08:00] [INFO] [tikv-server.rs:13] ["TiKV Started"] [key=value]...

The first four segments are time, level, source and message; every further
segment is a `key=value` field.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import DecodeResult, LogRecord, SourceLocation
from .segments import split_segments
from .values import decode_value, encode_value

CORE_SEGMENTS = 4
_RESERVED = '[]"'


def _source_from_segment(text: str) -> SourceLocation:
    file, sep, line = text.rpartition(":")
    if not sep:
        return SourceLocation(file=text, line="")
    return SourceLocation(file=file, line=line)


def _field_from_segment(text: str) -> tuple[str, str, bool]:
    """Split a field segment into (key, value, had_separator)."""
    key, sep, value = text.partition("=")
    return key, decode_value(value), bool(sep)


def record_from_segments(segments: Sequence[str]) -> tuple[LogRecord, list[str]]:
    """Assign segments to record roles; missing roles become empty strings."""
    problems: list[str] = []
    if len(segments) < CORE_SEGMENTS:
        problems.append(f"expected at least {CORE_SEGMENTS} segments, got {len(segments)}")

    padded = list(segments[:CORE_SEGMENTS]) + [""] * (CORE_SEGMENTS - len(segments))
    time_raw, level_raw, source_raw, message_raw = padded

    fields: dict[str, str] = {}
    for text in segments[CORE_SEGMENTS:]:
        key, value, ok = _field_from_segment(text)
        if not ok:
            problems.append(f"field without '=': {key}")
        # Later keys overwrite earlier ones; position stays at first insertion.
        fields[key] = value

    record = LogRecord(
        message=decode_value(message_raw),
        level=level_raw.strip().lower(),
        source=_source_from_segment(source_raw),
        time=time_raw.strip(),
        fields=fields,
    )
    return record, problems


@dataclass(frozen=True, slots=True)
class UnifiedLogDecoder:
    """Decode unified-log lines into LogRecords, best effort."""

    def decode(self, line_no: int, line: str) -> DecodeResult:
        """Decode one line; malformed input yields a partial result, never an error."""
        scan = split_segments(line)
        record, problems = record_from_segments(scan.segments)
        if scan.problem is not None:
            problems.insert(0, scan.problem)
        return DecodeResult(line_no=line_no, record=record, problems=tuple(problems))


def decode_line(line: str) -> LogRecord:
    """Decode a single line and drop the diagnostics."""
    return UnifiedLogDecoder().decode(0, line).record


def _verbatim(role: str, text: str, reserved: str) -> str:
    """Return `text` unchanged, or raise if it could not be decoded back."""
    bad = sorted({ch for ch in text if ch in reserved})
    if bad:
        raise ValueError(f"{role} {text!r} cannot be rendered verbatim (contains {''.join(bad)!r})")
    return text


def render_line(record: LogRecord) -> str:
    """Render a record back into unified-log text.

    Values are quoted only when needed. Time, level, source and keys are
    written verbatim, so a record is only renderable when those contain no
    bracket or quote (and keys no `=`); otherwise ValueError is raised.
    """
    src = record.source
    source = f"{src.file}:{src.line}" if src.line or ":" in src.file else src.file
    parts = [
        f"[{_verbatim('time', record.time, _RESERVED)}]",
        f"[{_verbatim('level', record.level, _RESERVED).upper()}]",
        f"[{_verbatim('source', source, _RESERVED)}]",
        f"[{encode_value(record.message)}]",
    ]
    for key, value in record.fields.items():
        parts.append(f"[{_verbatim('key', key, _RESERVED + '=')}={encode_value(value)}]")
    return " ".join(parts)
