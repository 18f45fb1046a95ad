"""Option list store: validation, preservation protocol and spin lifecycle."""

from __future__ import annotations

import numpy as np
import pytest

from spin_wheel.engine import label_angle, normalize, resolve_winner
from spin_wheel.errors import (
    BelowMinimumError,
    DuplicateOptionError,
    EmptyOptionError,
    ErrorCode,
    InsufficientOptionsError,
    InvalidStateError,
    ListFullError,
    TooLongError,
    WheelError,
)
from spin_wheel.models import ClearPolicy, RemovalPolicy, SpinConfig
from spin_wheel.store import OptionListStore

EPS = 1e-9


def _centered(store: OptionListStore, label: str) -> bool:
    index = store.options.index(label)
    top = normalize(store.config.pointer_angle - normalize(store.rotation))
    center = label_angle(index, len(store.options))
    return min(abs(top - center), 360.0 - abs(top - center)) < 1e-6


def test_defaults_from_config() -> None:
    store = OptionListStore()
    assert store.options == ("Option 1", "Option 2")
    assert store.rotation == 0.0
    assert store.pending_preservation is None
    assert not store.is_spinning
    assert store.can_spin
    assert store.slots_left == 10


def test_initial_options_are_validated(config: SpinConfig) -> None:
    with pytest.raises(DuplicateOptionError):
        OptionListStore(config, options=["A", "A"])


# ------------------------------- Validation -----------------------------------


@pytest.mark.parametrize(
    ("text", "error", "code"),
    [
        ("", EmptyOptionError, ErrorCode.EMPTY_OPTION),
        ("   \t", EmptyOptionError, ErrorCode.EMPTY_OPTION),
        ("x" * 51, TooLongError, ErrorCode.TOO_LONG),
        ("B", DuplicateOptionError, ErrorCode.DUPLICATE_OPTION),
        ("  B  ", DuplicateOptionError, ErrorCode.DUPLICATE_OPTION),
    ],
)
def test_add_rejections_leave_state_untouched(
    store: OptionListStore, text: str, error: type, code: ErrorCode
) -> None:
    before = (store.options, store.rotation)
    with pytest.raises(error) as info:
        store.add_option(text)
    assert info.value.code is code
    assert isinstance(info.value, WheelError)
    assert (store.options, store.rotation) == before
    assert store.pending_preservation is None


def test_add_trims_and_appends(store: OptionListStore) -> None:
    assert store.add_option("  Pizza  ") == "Pizza"
    assert store.options[-1] == "Pizza"


def test_add_accepts_exact_max_length(store: OptionListStore) -> None:
    store.add_option("y" * 50)
    assert len(store.options) == 5


def test_add_when_full() -> None:
    store = OptionListStore(SpinConfig(max_options=3), options=["A", "B", "C"])
    with pytest.raises(ListFullError) as info:
        store.add_option("D")
    assert str(info.value) == "Maximum 3 options allowed"
    assert store.slots_left == 0


def test_error_messages_are_user_facing(store: OptionListStore) -> None:
    with pytest.raises(WheelError, match="This option already exists"):
        store.add_option("A")
    with pytest.raises(WheelError, match="Option cannot be empty"):
        store.add_option(" ")
    with pytest.raises(WheelError, match="50 characters or less"):
        store.add_option("z" * 60)


def test_edit_exempts_its_own_value(store: OptionListStore) -> None:
    assert store.edit_option(1, " B ") == "B"
    assert store.options == ("A", "B", "C", "D")


def test_edit_rejects_other_duplicates(store: OptionListStore) -> None:
    with pytest.raises(DuplicateOptionError):
        store.edit_option(1, "C")
    assert store.options == ("A", "B", "C", "D")


def test_edit_allowed_on_full_list() -> None:
    store = OptionListStore(SpinConfig(max_options=2), options=["A", "B"])
    store.edit_option(0, "Z")
    assert store.options == ("Z", "B")


@pytest.mark.parametrize("index", [-1, 4, 99])
def test_edit_and_remove_out_of_range(store: OptionListStore, index: int) -> None:
    with pytest.raises(InvalidStateError):
        store.edit_option(index, "New")
    with pytest.raises(InvalidStateError):
        store.remove_option(index)
    assert store.options == ("A", "B", "C", "D")


# -------------------------- Preservation protocol -----------------------------


def test_add_preserves_current_winner(config: SpinConfig) -> None:
    store = OptionListStore(config, options=["A", "B"])
    assert store.current_winner() == "B"
    store.add_option("C")
    assert store.current_winner() == "B"
    assert _centered(store, "B")
    assert store.rotation == pytest.approx(90.0)
    assert store.pending_preservation is None


def test_remove_other_option_keeps_winner_centered(store: OptionListStore) -> None:
    store.request_preserve("C")
    store.reconcile_if_pending()
    assert store.current_winner() == "C"
    before = store.rotation

    store.remove_option(0)

    assert store.options == ("B", "C", "D")
    assert store.current_winner() == "C"
    assert _centered(store, "C")
    assert abs(store.rotation - before) <= 180.0


def test_removing_the_winner_keeps_rotation(config: SpinConfig) -> None:
    store = OptionListStore(config, options=["A", "B", "C"])
    assert store.current_winner() == "C"
    store.remove_option(2)
    assert store.rotation == 0.0
    assert store.pending_preservation is None


def test_edit_of_other_option_keeps_winner(store: OptionListStore) -> None:
    winner = store.current_winner()
    index = 0 if winner != "A" else 1
    store.edit_option(index, "Edited")
    assert store.current_winner() == winner


def test_reconcile_consumes_request_even_when_label_missing(
    store: OptionListStore,
) -> None:
    store.request_preserve("Nope")
    assert store.pending_preservation == "Nope"
    assert store.reconcile_if_pending() == 0.0
    assert store.pending_preservation is None


def test_reconcile_without_request_is_noop(store: OptionListStore) -> None:
    assert store.reconcile_if_pending() == store.rotation


def test_reconcile_twice_is_stable(store: OptionListStore) -> None:
    store.request_preserve("B")
    first = store.reconcile_if_pending()
    store.request_preserve("B")
    assert store.reconcile_if_pending() == pytest.approx(first)


# -------------------------------- Policies ------------------------------------


def test_removal_blocked_at_minimum() -> None:
    cfg = SpinConfig(removal_policy=RemovalPolicy.BLOCK_AT_MINIMUM)
    store = OptionListStore(cfg, options=["A", "B"])
    with pytest.raises(BelowMinimumError) as info:
        store.remove_option(0)
    assert info.value.code is ErrorCode.BELOW_MINIMUM
    assert store.options == ("A", "B")


def test_removal_below_minimum_disables_spin(config: SpinConfig) -> None:
    store = OptionListStore(config, options=["A", "B"])
    store.remove_option(0)
    assert store.options == ("B",)
    assert not store.can_spin
    with pytest.raises(InsufficientOptionsError):
        store.start_spin()
    assert not store.is_spinning


def test_remove_down_to_empty(config: SpinConfig) -> None:
    store = OptionListStore(config, options=["A"])
    assert store.remove_option(0) == "A"
    assert store.options == ()
    assert store.current_winner() is None


def test_clear_to_empty(store: OptionListStore) -> None:
    store.start_spin()
    store.finish_spin()
    store.request_preserve("A")
    store.clear()
    assert store.options == ()
    assert store.rotation == 0.0
    assert store.pending_preservation is None
    assert not store.can_spin


def test_clear_to_defaults() -> None:
    cfg = SpinConfig(clear_policy=ClearPolicy.DEFAULTS, default_options=("X", "Y"))
    store = OptionListStore(cfg, options=["A", "B", "C"])
    store.clear()
    assert store.options == ("X", "Y")
    assert store.rotation == 0.0
    assert store.can_spin


# ------------------------------ Spin lifecycle --------------------------------


def test_spin_round_trip(store: OptionListStore) -> None:
    plan = store.start_spin()
    assert plan is not None
    assert store.is_spinning
    assert not store.can_spin
    assert store.rotation == plan.rotation

    result = store.finish_spin()

    assert not store.is_spinning
    assert result.winner == store.options[plan.segment_index]
    assert result.winning_index == plan.segment_index
    assert result.winner == resolve_winner(store.options, store.rotation, store.config)
    assert store.last_result is result


def test_second_spin_request_is_ignored(store: OptionListStore) -> None:
    plan = store.start_spin()
    assert store.start_spin() is None
    assert store.rotation == plan.rotation


def test_mutations_rejected_while_spinning(store: OptionListStore) -> None:
    store.start_spin()
    for action in (
        lambda: store.add_option("New"),
        lambda: store.edit_option(0, "New"),
        lambda: store.remove_option(0),
        store.clear,
    ):
        with pytest.raises(InvalidStateError):
            action()
    assert store.options == ("A", "B", "C", "D")


def test_finish_without_spin(store: OptionListStore) -> None:
    with pytest.raises(InvalidStateError):
        store.finish_spin()


def test_repeated_spins_accumulate_rotation(config: SpinConfig) -> None:
    store = OptionListStore(config, options=["A", "B", "C"], rng=np.random.default_rng(3))
    previous = store.rotation
    for _ in range(25):
        plan = store.start_spin()
        assert plan.rotation >= previous + config.min_rotations * 360.0 - EPS
        result = store.finish_spin()
        assert result.winner == store.options[plan.segment_index]
        previous = store.rotation


def test_spin_then_edit_keeps_reported_winner(store: OptionListStore) -> None:
    store.start_spin()
    winner = store.finish_spin().winner
    store.add_option("E")
    assert store.current_winner() == winner
    assert _centered(store, winner)
