"""CLI entry point for the currency rate console."""

from __future__ import annotations

from fx_ledger.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
