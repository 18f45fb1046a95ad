"""Dataclasses describing configuration and spin results for spin_wheel."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Tuple

import json


class RemovalPolicy(str, Enum):
    """What happens when a removal would leave fewer than ``min_options``."""

    DISABLE_SPIN = "disable_spin"  # remove anyway, spinning is disabled
    BLOCK_AT_MINIMUM = "block_at_minimum"  # reject with BelowMinimum


class ClearPolicy(str, Enum):
    """What "Clear All" resets the option list to."""

    EMPTY = "empty"
    DEFAULTS = "defaults"


@dataclass(frozen=True)
class SpinConfig:
    """Immutable engine tunables, passed explicitly to every engine call."""

    margin_fraction: float = 0.1
    min_rotations: int = 3
    max_rotations: int = 6
    pointer_angle: float = 270.0
    min_options: int = 2
    max_options: int = 12
    max_option_length: int = 50
    default_options: Tuple[str, ...] = ("Option 1", "Option 2")
    removal_policy: RemovalPolicy = RemovalPolicy.DISABLE_SPIN
    clear_policy: ClearPolicy = ClearPolicy.EMPTY

    def __post_init__(self) -> None:
        if not 0.0 <= self.margin_fraction < 0.5:
            raise ValueError(
                f"margin_fraction must be in [0, 0.5), got {self.margin_fraction}"
            )
        if not 0 <= self.min_rotations <= self.max_rotations:
            raise ValueError(
                "rotation range must satisfy 0 <= min_rotations <= max_rotations, "
                f"got [{self.min_rotations}, {self.max_rotations}]"
            )
        if not 1 <= self.min_options <= self.max_options:
            raise ValueError(
                "option bounds must satisfy 1 <= min_options <= max_options, "
                f"got [{self.min_options}, {self.max_options}]"
            )
        if self.max_option_length < 1:
            raise ValueError("max_option_length must be at least 1")
        # Tuples keep the frozen instance hashable even if a list was passed.
        object.__setattr__(self, "default_options", tuple(self.default_options))
        if len(self.default_options) > self.max_options:
            raise ValueError("default_options exceed max_options")
        if len(set(self.default_options)) != len(self.default_options):
            raise ValueError("default_options contain duplicates")
        for label in self.default_options:
            if not label.strip() or len(label) > self.max_option_length:
                raise ValueError(f"invalid default option {label!r}")


@dataclass
class AnimationConfig:
    """Timing of the spin animation and UI notices."""

    duration_ms: int = 3000
    # Name of a QEasingCurve.Type; OutCubic approximates
    # cubic-bezier(0.23, 1, 0.32, 1).
    easing: str = "OutCubic"
    success_notice_ms: int = 3000


@dataclass
class WheelStyle:
    """Visual parameters of the painted wheel."""

    size: int = 300
    border_width: int = 4
    border_color: str = "#393939"
    center_size: int = 40
    pointer_color: str = "#da1e28"
    text_color: str = "#ffffff"
    saturation: int = 70  # percent
    lightness: int = 60  # percent
    max_label_chars: int = 18


@dataclass
class SpinPlan:
    """Every random decision taken for one spin."""

    segment_index: int
    local_angle: float  # wheel-local angle brought under the pointer
    spin_count: int  # full turns added for show
    rotation: float  # new cumulative rotation


@dataclass
class SpinResult:
    """Outcome reported once the spin animation has settled."""

    winner: str
    winning_index: int
    rotation: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class AppConfig:
    """Persisted tunables for the application (never the option list)."""

    spin: SpinConfig = field(default_factory=SpinConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    style: WheelStyle = field(default_factory=WheelStyle)

    def to_json(self) -> str:
        data = asdict(self)
        data["spin"]["default_options"] = list(self.spin.default_options)
        data["spin"]["removal_policy"] = self.spin.removal_policy.value
        data["spin"]["clear_policy"] = self.spin.clear_policy.value
        return json.dumps(data, indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError(f"config must be a JSON object, not {type(data).__name__}")
        s = _section(data, "spin")
        a = _section(data, "animation")
        w = _section(data, "style")
        return AppConfig(
            spin=SpinConfig(
                margin_fraction=float(s.get("margin_fraction", 0.1)),
                min_rotations=int(s.get("min_rotations", 3)),
                max_rotations=int(s.get("max_rotations", 6)),
                pointer_angle=float(s.get("pointer_angle", 270.0)),
                min_options=int(s.get("min_options", 2)),
                max_options=int(s.get("max_options", 12)),
                max_option_length=int(s.get("max_option_length", 50)),
                default_options=tuple(
                    str(o) for o in s.get("default_options", ("Option 1", "Option 2"))
                ),
                removal_policy=RemovalPolicy(
                    s.get("removal_policy", RemovalPolicy.DISABLE_SPIN.value)
                ),
                clear_policy=ClearPolicy(s.get("clear_policy", ClearPolicy.EMPTY.value)),
            ),
            animation=AnimationConfig(
                duration_ms=int(a.get("duration_ms", 3000)),
                easing=str(a.get("easing", "OutCubic")),
                success_notice_ms=int(a.get("success_notice_ms", 3000)),
            ),
            style=WheelStyle(
                size=int(w.get("size", 300)),
                border_width=int(w.get("border_width", 4)),
                border_color=str(w.get("border_color", "#393939")),
                center_size=int(w.get("center_size", 40)),
                pointer_color=str(w.get("pointer_color", "#da1e28")),
                text_color=str(w.get("text_color", "#ffffff")),
                saturation=int(w.get("saturation", 70)),
                lightness=int(w.get("lightness", 60)),
                max_label_chars=int(w.get("max_label_chars", 18)),
            ),
        )


def _section(data: Dict, key: str) -> Dict:
    # a missing or null section means "all defaults"
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"config section {key!r} must be an object")
    return value


__all__ = [
    "RemovalPolicy",
    "ClearPolicy",
    "SpinConfig",
    "AnimationConfig",
    "WheelStyle",
    "SpinPlan",
    "SpinResult",
    "AppConfig",
]
