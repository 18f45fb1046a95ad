"""Re-anchoring the rotation after option list changes."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from spin_wheel.engine import label_angle, normalize, reconcile, resolve_winner
from spin_wheel.models import SpinConfig

EPS = 1e-6
rotations = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


def test_centers_label_nearest_to_current_rotation(config: SpinConfig) -> None:
    options = ["A", "B", "C"]
    # B's center is local 180, so the base rotation is 90; 1170 is the
    # representative closest to 1000.
    assert reconcile(options, 1000.0, "B", config) == pytest.approx(1170.0)
    assert resolve_winner(options, 1170.0, config) == "B"


def test_missing_label_leaves_rotation_unchanged(config: SpinConfig) -> None:
    assert reconcile(["A", "B"], 123.25, "Gone", config) == 123.25


@given(
    n=st.integers(min_value=1, max_value=12),
    index=st.integers(min_value=0, max_value=11),
    rotation=rotations,
)
@settings(deadline=None, max_examples=300)
def test_reconcile_centers_with_minimal_jump(n: int, index: int, rotation: float) -> None:
    cfg = SpinConfig()
    options = [f"L{i}" for i in range(n)]
    label = options[index % n]
    result = reconcile(options, rotation, label, cfg)

    assert resolve_winner(options, result, cfg) == label
    # Exactly centered: the segment middle sits under the pointer.
    top = normalize(cfg.pointer_angle - normalize(result))
    center = label_angle(index % n, n)
    assert min(abs(top - center), 360.0 - abs(top - center)) < EPS
    # No other representative is closer to the current rotation.
    assert abs(result - rotation) <= 180.0 + EPS


@given(rotation=rotations, label=st.sampled_from(["A", "B", "C", "D", "E"]))
@settings(deadline=None, max_examples=200)
def test_reconcile_is_idempotent(rotation: float, label: str) -> None:
    cfg = SpinConfig()
    options = ["A", "B", "C", "D", "E"]
    first = reconcile(options, rotation, label, cfg)
    assert reconcile(options, rotation, label, cfg) == first
    assert reconcile(options, first, label, cfg) == pytest.approx(first)
