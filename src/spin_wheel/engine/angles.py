"""Angle arithmetic shared by the resolver, generator and renderer.

All angles are in degrees. The wheel-local frame measures angles clockwise
from the wheel's own zero mark; segment ``i`` of ``n`` spans
``[i * 360 / n, (i + 1) * 360 / n)`` in that frame.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..errors import InvalidStateError

FULL_TURN = 360.0


def normalize(degrees: float) -> float:
    """Reduce ``degrees`` into ``[0, 360)``, using true modulo for negatives."""
    value = math.fmod(float(degrees), FULL_TURN)
    if value < 0.0:
        value += FULL_TURN
    # -1e-14 + 360 rounds to exactly 360.0
    if value >= FULL_TURN:
        value = 0.0
    return value


def segment_angle(count: int) -> float:
    """Angular width of one segment on a wheel with ``count`` options."""
    if count <= 0:
        raise InvalidStateError("The wheel has no options")
    return FULL_TURN / count


def segment_span(index: int, count: int) -> Tuple[float, float]:
    """Return the ``(start, end)`` wheel-local angles of segment ``index``."""
    seg = segment_angle(count)
    return index * seg, (index + 1) * seg


def label_angle(index: int, count: int) -> float:
    """Wheel-local angle of the middle of segment ``index``."""
    seg = segment_angle(count)
    return index * seg + seg / 2.0


__all__ = ["FULL_TURN", "normalize", "segment_angle", "segment_span", "label_angle"]
