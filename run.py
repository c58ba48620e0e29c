"""Command-line entry point for previewing daily media selections."""

from __future__ import annotations

from dailymedia.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
