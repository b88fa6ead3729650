"""CLI entry point for looking up Bank of Canada USD/CAD rates."""

from __future__ import annotations

import sys

from boc_fx.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
