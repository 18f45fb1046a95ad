"""Small helpers shared by the renderer."""

from .colors import segment_hsl, segment_palette
from .geometry import clamp, polar_point, qt_arc_angle, rotate_point

__all__ = [
    "clamp",
    "rotate_point",
    "polar_point",
    "qt_arc_angle",
    "segment_hsl",
    "segment_palette",
]
