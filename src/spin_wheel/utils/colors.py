"""Segment palette: hues spread evenly around the color wheel."""

from typing import List, Tuple

from .geometry import clamp

Hsl = Tuple[float, float, float]


def segment_hsl(index: int, count: int, saturation: int, lightness: int) -> Hsl:
    """Return ``(hue_deg, saturation, lightness)`` with fractions in ``[0, 1]``."""
    hue = (360.0 / count) * index if count > 0 else 0.0
    return (
        hue % 360.0,
        clamp(saturation / 100.0, 0.0, 1.0),
        clamp(lightness / 100.0, 0.0, 1.0),
    )


def segment_palette(count: int, saturation: int, lightness: int) -> List[Hsl]:
    return [segment_hsl(i, count, saturation, lightness) for i in range(count)]


__all__ = ["Hsl", "segment_hsl", "segment_palette"]
