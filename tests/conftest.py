from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

UNIFIED_LINES = [
    '[2018/12/15 14:20:11.015 +08:00] [INFO] [tikv-server.rs:13] ["TiKV Started"]',
    '[2018/12/15 14:20:11.182 +08:00] [WARN] [store.rs:97] ["slow query"] '
    '[sql="SELECT * FROM TABLE\\nWHERE ID=\\"abc\\""] [duration=1.345s]',
    "[2018/12/15 14:20:12.001 +08:00] [FATAL] [panic_hook.rs:45]",
]


@pytest.fixture
def write_unified_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        text = "\n".join(UNIFIED_LINES) + "\n"
        if path.suffix == ".gz":
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write(text)
        else:
            path.write_text(text, encoding="utf-8")

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
