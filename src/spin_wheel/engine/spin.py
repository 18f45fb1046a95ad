"""Randomized spin targets with a guaranteed landing segment."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..errors import InsufficientOptionsError
from ..models import SpinConfig, SpinPlan
from .angles import FULL_TURN, normalize, segment_angle


def plan_spin(
    options: Sequence[str],
    current_rotation: float,
    config: SpinConfig,
    rng: Optional[np.random.Generator] = None,
) -> SpinPlan:
    """Pick a segment, a landing point inside it and the rotation reaching it.

    The landing point keeps ``margin_fraction`` of the segment width away from
    both edges. The returned rotation always moves the wheel forward by
    ``spin_count`` full turns plus less than one more turn.
    """
    n = len(options)
    if n < config.min_options:
        raise InsufficientOptionsError(
            f"Add at least {config.min_options} options to enable spinning"
        )
    if rng is None:
        rng = np.random.default_rng()

    seg = segment_angle(n)
    segment_index = int(rng.integers(0, n))
    margin = seg * config.margin_fraction
    offset = float(rng.uniform(margin, seg - margin))
    local_angle = segment_index * seg + offset
    spin_count = int(rng.integers(config.min_rotations, config.max_rotations + 1))

    # Rotation r brings local angle (pointer - r) under the pointer.
    landing = normalize(config.pointer_angle - local_angle)
    forward = normalize(landing - normalize(current_rotation))
    rotation = float(current_rotation) + spin_count * FULL_TURN + forward
    return SpinPlan(
        segment_index=segment_index,
        local_angle=local_angle,
        spin_count=spin_count,
        rotation=rotation,
    )


def generate_spin(
    options: Sequence[str],
    current_rotation: float,
    config: SpinConfig,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Return the new absolute cumulative rotation for a spin."""
    return plan_spin(options, current_rotation, config, rng).rotation


__all__ = ["plan_spin", "generate_spin"]
