"""Re-anchor the rotation so a label stays under the pointer after an edit."""

from __future__ import annotations

from typing import Sequence

from ..models import SpinConfig
from .angles import FULL_TURN, label_angle, normalize


def reconcile(
    options: Sequence[str], rotation: float, label: str, config: SpinConfig
) -> float:
    """Rotation nearest to ``rotation`` that centers ``label`` under the pointer.

    Returns ``rotation`` unchanged when ``label`` is no longer in ``options``.
    """
    if label not in options:
        return rotation
    index = list(options).index(label)
    base = normalize(config.pointer_angle - label_angle(index, len(options)))
    k = round((rotation - base) / FULL_TURN)
    return base + FULL_TURN * k


__all__ = ["reconcile"]
