"""spin_wheel package exposing the wheel engine and a lazy ``main`` entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .engine import generate_spin, normalize, reconcile, resolve_winner
from .errors import ErrorCode, WheelError
from .models import AppConfig, ClearPolicy, RemovalPolicy, SpinConfig, SpinResult
from .store import OptionListStore

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m spin_wheel`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "normalize",
    "resolve_winner",
    "generate_spin",
    "reconcile",
    "OptionListStore",
    "SpinConfig",
    "AppConfig",
    "RemovalPolicy",
    "ClearPolicy",
    "SpinResult",
    "ErrorCode",
    "WheelError",
]
