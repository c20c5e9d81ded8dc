"""Entry point for the Montana county lookup tool."""

from __future__ import annotations

from montana_counties.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
