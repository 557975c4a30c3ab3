"""Line-stream drivers around the unified-log decoder.

This module is the integration point that feeds lines (from an iterable or a
log file) through a decoder and yields one DecodeResult per line, in order.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .formats import LineDecoder, UnifiedLogDecoder
from .models import DecodeResult

logger = logging.getLogger(__name__)


def default_decoder() -> LineDecoder:
    return UnifiedLogDecoder()


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _report(result: DecodeResult) -> None:
    if result.partial:
        logger.warning("line %s decoded partially: %s", result.line_no, "; ".join(result.problems))


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


def decode_lines(
    lines: Iterable[str],
    *,
    decoder: LineDecoder | None = None,
    start: int = 1,
) -> Iterator[DecodeResult]:
    """Decode each line of `lines`; every input line yields exactly one result."""
    decoder = decoder or default_decoder()
    for line_no, line in enumerate(lines, start=start):
        result = decoder.decode(line_no, _strip_terminator(line))
        _report(result)
        yield result


async def iter_records(
    log_path: str | Path,
    *,
    decoder: LineDecoder | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[DecodeResult]:
    """Yield one DecodeResult per line of a plain or .gz log file."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    decoder = decoder or default_decoder()
    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line_no, line in _enumerate_async(f, start=1):
            result = decoder.decode(line_no, _strip_terminator(line))
            _report(result)
            yield result


async def get_records(
    log_path: str | Path,
    **iter_kwargs,
) -> list[DecodeResult]:
    """Collect iter_records into a list."""
    return [result async for result in iter_records(log_path, **iter_kwargs)]


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
