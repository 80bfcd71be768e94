"""Module entrypoint for running the diagnostic CLI as ``python -m safe_cctype``."""

from __future__ import annotations

from safe_cctype.cli import main


if __name__ == "__main__":
    main()
