"""Map a cumulative rotation to the option under the fixed pointer."""

from __future__ import annotations

import math
from typing import Sequence

from ..errors import InvalidStateError
from ..models import SpinConfig
from .angles import normalize, segment_angle


def resolve_index(count: int, rotation: float, config: SpinConfig) -> int:
    """Index of the segment under the pointer for a wheel of ``count`` options.

    The pointer sits at ``config.pointer_angle`` in the unrotated frame; turning
    the wheel by ``rotation`` moves the wheel-local angle
    ``pointer_angle - rotation`` under it.
    """
    if count <= 0:
        raise InvalidStateError("Cannot resolve a winner without options")
    seg = segment_angle(count)
    top_angle = normalize(config.pointer_angle - normalize(rotation))
    # top_angle / seg can round up to count when top_angle is just below 360
    return int(math.floor(top_angle / seg)) % count


def resolve_winner(
    options: Sequence[str], rotation: float, config: SpinConfig
) -> str:
    """Return the option currently under the pointer."""
    return options[resolve_index(len(options), rotation, config)]


__all__ = ["resolve_index", "resolve_winner"]
