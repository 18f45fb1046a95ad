"""Geometry helpers used by the wheel renderer."""

import math
from typing import Tuple


def rotate_point(
    x: float, y: float, cx: float, cy: float, angle_deg: float
) -> Tuple[float, float]:
    """Rotate a point around ``(cx, cy)`` by ``angle_deg`` degrees (clockwise on screen)."""
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x0 = x - cx
    y0 = y - cy
    xr = x0 * cos_t - y0 * sin_t + cx
    yr = x0 * sin_t + y0 * cos_t + cy
    return xr, yr


def polar_point(
    cx: float, cy: float, radius: float, clockwise_from_top_deg: float
) -> Tuple[float, float]:
    """Point at ``radius`` from ``(cx, cy)``, angle measured clockwise from 12 o'clock."""
    return rotate_point(cx, cy - radius, cx, cy, clockwise_from_top_deg)


def qt_arc_angle(clockwise_from_top_deg: float) -> float:
    """Convert a clockwise-from-top angle to Qt's counter-clockwise-from-3-o'clock."""
    return 90.0 - clockwise_from_top_deg


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = ["rotate_point", "polar_point", "qt_arc_angle", "clamp"]
