"""Rotation and selection engine behind the wheel."""

from ..models import SpinPlan
from .angles import FULL_TURN, label_angle, normalize, segment_angle, segment_span
from .reconcile import reconcile
from .resolver import resolve_index, resolve_winner
from .spin import generate_spin, plan_spin

__all__ = [
    "FULL_TURN",
    "normalize",
    "segment_angle",
    "segment_span",
    "label_angle",
    "resolve_index",
    "resolve_winner",
    "plan_spin",
    "generate_spin",
    "reconcile",
    "SpinPlan",
]
