"""Command-line entrypoint: unified-log lines on stdin, JSON lines on stdout.

Run:
    unified-log-decoder < tikv.log
    python -m unified_log_decoder < tikv.log
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from unified_log_decoder.core.formats import LineDecoder
from unified_log_decoder.core.log_service import decode_lines

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Send diagnostics to stderr; stdout carries only JSON."""
    level_name = os.getenv("UNIFIED_LOG_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(stdin: TextIO, stdout: TextIO, *, decoder: LineDecoder | None = None) -> int:
    """Decode every line of `stdin` and write one JSON object per line to `stdout`.

    Returns the number of lines written.
    """
    count = 0
    for result in decode_lines(stdin, decoder=decoder):
        stdout.write(result.record.to_json())
        stdout.write("\n")
        count += 1
    stdout.flush()
    return count


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(
        prog="unified-log-decoder",
        description="Decode unified log format lines from stdin into JSON lines on stdout.",
    )
    p.parse_args(argv)

    _configure_logging()
    sys.stdin.reconfigure(encoding="utf-8")
    sys.stdout.reconfigure(encoding="utf-8")

    LOGGER.debug("Decoding stdin")
    try:
        count = run(sys.stdin, sys.stdout)
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); point stdout at devnull so the
        # interpreter's final flush does not raise again.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return
    LOGGER.debug("Decoded %s lines", count)


if __name__ == "__main__":
    main()
