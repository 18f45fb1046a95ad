"""Option list state: validation, rotation ownership and the spin lifecycle.

Every mutation validates before it touches anything, so a rejected call
leaves the store exactly as it was. Mutations that should not visually
disturb the current winner go through the preservation protocol::

    store.request_preserve(label)   # remember what is under the pointer
    ...mutate the option list...
    store.reconcile_if_pending()    # re-center that label, consume request
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .engine import plan_spin, reconcile, resolve_index
from .errors import (
    BelowMinimumError,
    DuplicateOptionError,
    EmptyOptionError,
    InsufficientOptionsError,
    InvalidStateError,
    ListFullError,
    TooLongError,
    WheelError,
)
from .models import ClearPolicy, RemovalPolicy, SpinConfig, SpinPlan, SpinResult

logger = logging.getLogger(__name__)


class OptionListStore:
    """Owns the ordered option labels, the cumulative rotation and spin state."""

    def __init__(
        self,
        config: Optional[SpinConfig] = None,
        options: Optional[Iterable[str]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SpinConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._options: List[str] = []
        self._rotation: float = 0.0
        self._pending: Optional[str] = None
        self._is_spinning: bool = False
        self._last_result: Optional[SpinResult] = None

        initial = self.config.default_options if options is None else options
        for text in initial:
            self._options.append(self.validate_option(text))

    # ----------------------------- Properties ---------------------------------

    @property
    def options(self) -> Tuple[str, ...]:
        return tuple(self._options)

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def pending_preservation(self) -> Optional[str]:
        return self._pending

    @property
    def is_spinning(self) -> bool:
        return self._is_spinning

    @property
    def last_result(self) -> Optional[SpinResult]:
        return self._last_result

    @property
    def can_spin(self) -> bool:
        return not self._is_spinning and len(self._options) >= self.config.min_options

    @property
    def slots_left(self) -> int:
        return max(0, self.config.max_options - len(self._options))

    def current_winner(self) -> Optional[str]:
        """Label under the pointer right now, or ``None`` for an empty wheel."""
        if not self._options:
            return None
        return self._options[resolve_index(len(self._options), self._rotation, self.config)]

    # ----------------------------- Validation ---------------------------------

    def validate_option(
        self, text: str, exempt: Optional[str] = None, grows: bool = True
    ) -> str:
        """Return the trimmed label or raise the matching :class:`WheelError`.

        ``exempt`` is the option's own prior value when editing; it does not
        count as a duplicate. ``grows`` is False for edits, which never hit
        the capacity limit.
        """
        cfg = self.config
        trimmed = (text or "").strip()
        if not trimmed:
            raise EmptyOptionError("Option cannot be empty")
        if len(trimmed) > cfg.max_option_length:
            raise TooLongError(
                f"Option must be {cfg.max_option_length} characters or less"
            )
        if trimmed != exempt and trimmed in self._options:
            raise DuplicateOptionError("This option already exists")
        if grows and len(self._options) >= cfg.max_options:
            raise ListFullError(f"Maximum {cfg.max_options} options allowed")
        return trimmed

    @contextmanager
    def _rejections(self, action: str) -> Iterator[None]:
        try:
            yield
        except WheelError as err:
            logger.debug("Rejected %s (%s): %s", action, err.code.value, err)
            raise

    def _ensure_idle(self) -> None:
        if self._is_spinning:
            raise InvalidStateError("Wait for the wheel to stop spinning")

    # ------------------------- Preservation protocol --------------------------

    def request_preserve(self, label: Optional[str]) -> None:
        """Set (or with ``None``, abandon) the label to keep under the pointer."""
        self._pending = label

    def reconcile_if_pending(self) -> float:
        """Consume the pending preservation, re-centering its label if present."""
        label = self._pending
        self._pending = None
        if label is None:
            return self._rotation
        before = self._rotation
        self._rotation = reconcile(self._options, self._rotation, label, self.config)
        if label in self._options:
            logger.debug(
                "Re-centered %r: rotation %.3f -> %.3f", label, before, self._rotation
            )
        else:
            logger.debug("Preserved label %r is gone; rotation kept", label)
        return self._rotation

    def _commit(self, options: List[str]) -> None:
        self.request_preserve(self.current_winner())
        self._options = options
        self.reconcile_if_pending()

    # ------------------------------ Mutations ---------------------------------

    def add_option(self, text: str) -> str:
        """Append a new option; returns the stored (trimmed) label."""
        with self._rejections("add"):
            self._ensure_idle()
            label = self.validate_option(text)
        self._commit(self._options + [label])
        logger.info("Added option %r (%d total)", label, len(self._options))
        return label

    def edit_option(self, index: int, text: str) -> str:
        """Replace the option at ``index``; returns the stored label."""
        with self._rejections("edit"):
            self._ensure_idle()
            if not 0 <= index < len(self._options):
                raise InvalidStateError(f"No option at position {index + 1}")
            current = self._options[index]
            label = self.validate_option(text, exempt=current, grows=False)
        updated = list(self._options)
        updated[index] = label
        self._commit(updated)
        logger.info("Edited option %r -> %r", current, label)
        return label

    def remove_option(self, index: int) -> str:
        """Remove the option at ``index``; returns the removed label."""
        with self._rejections("remove"):
            self._ensure_idle()
            if not 0 <= index < len(self._options):
                raise InvalidStateError(f"No option at position {index + 1}")
            min_options = self.config.min_options
            if (
                self.config.removal_policy is RemovalPolicy.BLOCK_AT_MINIMUM
                and len(self._options) <= min_options
            ):
                raise BelowMinimumError(
                    f"At least {min_options} options are required"
                )
        removed = self._options[index]
        self._commit(self._options[:index] + self._options[index + 1 :])
        logger.info("Removed option %r (%d left)", removed, len(self._options))
        return removed

    def clear(self) -> None:
        """Reset the list per the clear policy; rotation returns to zero."""
        with self._rejections("clear"):
            self._ensure_idle()
        self.request_preserve(None)
        if self.config.clear_policy is ClearPolicy.DEFAULTS:
            self._options = list(self.config.default_options)
        else:
            self._options = []
        self._rotation = 0.0
        logger.info("Cleared options (policy=%s)", self.config.clear_policy.value)

    # ---------------------------- Spin lifecycle ------------------------------

    def start_spin(self) -> Optional[SpinPlan]:
        """Begin a spin; returns ``None`` while a previous spin is in flight."""
        if self._is_spinning:
            logger.debug("Spin request ignored: wheel is already spinning")
            return None
        with self._rejections("spin"):
            if len(self._options) < self.config.min_options:
                raise InsufficientOptionsError(
                    f"Add at least {self.config.min_options} options to enable spinning"
                )
        plan = plan_spin(self._options, self._rotation, self.config, self._rng)
        self._rotation = plan.rotation
        self._is_spinning = True
        logger.debug(
            "Spin planned: segment %d, %d turns, rotation %.3f",
            plan.segment_index,
            plan.spin_count,
            plan.rotation,
        )
        return plan

    def finish_spin(self) -> SpinResult:
        """Called once the animation has settled; reports the winner."""
        if not self._is_spinning:
            raise InvalidStateError("No spin in progress")
        self._is_spinning = False
        if not self._options:
            raise InvalidStateError("Cannot resolve a winner without options")
        index = resolve_index(len(self._options), self._rotation, self.config)
        result = SpinResult(
            winner=self._options[index], winning_index=index, rotation=self._rotation
        )
        self._last_result = result
        logger.info("Wheel landed on %r", result.winner)
        return result


__all__ = ["OptionListStore"]
