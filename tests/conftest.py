"""Shared fixtures for the spin_wheel test-suite."""

from __future__ import annotations

import os
from pathlib import Path
import sys
from typing import List

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

# Qt widget tests must not need a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from spin_wheel.models import SpinConfig  # noqa: E402
from spin_wheel.store import OptionListStore  # noqa: E402


class ScriptedRng:
    """Stand-in for ``numpy.random.Generator`` returning chosen values.

    ``integers`` answers the segment draw first and the spin-count draw
    second; ``uniform`` returns the point ``offset_fraction`` of the way
    between its bounds.
    """

    def __init__(self, segment: int, offset_fraction: float, spins: int) -> None:
        self._integers: List[int] = [segment, spins]
        self._offset_fraction = offset_fraction
        self.calls: List[tuple] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append(("integers", low, high))
        return self._integers.pop(0)

    def uniform(self, low: float, high: float) -> float:
        self.calls.append(("uniform", low, high))
        return low + (high - low) * self._offset_fraction


@pytest.fixture
def config() -> SpinConfig:
    return SpinConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def store(config: SpinConfig, rng: np.random.Generator) -> OptionListStore:
    return OptionListStore(config, options=["A", "B", "C", "D"], rng=rng)
