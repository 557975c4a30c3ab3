"""Module entrypoint.

Allows:
    python -m unified_log_decoder
"""

from __future__ import annotations

from unified_log_decoder.cli import main

if __name__ == "__main__":
    main()
