"""Module entry point allowing ``python -m spin_wheel``."""

from __future__ import annotations

from .app import main

if __name__ == "__main__":  # pragma: no cover
    main()
