"""Decide which frequency wins when several schedule signals are present."""

from __future__ import annotations

from typing import Callable, Tuple

from models import Frequency, MatchState

Predicate = Callable[[MatchState], bool]


def _set(frequency: Frequency) -> Callable[[MatchState], MatchState]:
    def _apply(state: MatchState) -> MatchState:
        return state.model_copy(update={"frequency": frequency})

    return _apply


# Applied top to bottom; a later rule may overwrite what an earlier one chose.
FREQUENCY_RULES: Tuple[Tuple[str, Predicate, Callable[[MatchState], MatchState]], ...] = (
    (
        "weekdays without a frequency repeat weekly",
        lambda s: bool(s.weekdays) and s.frequency is None,
        _set("WEEKLY"),
    ),
    (
        "nth weekdays repeat monthly",
        lambda s: bool(s.nth_weekdays),
        _set("MONTHLY"),
    ),
    (
        "month days without a frequency repeat monthly",
        lambda s: bool(s.month_days) and s.frequency is None,
        _set("MONTHLY"),
    ),
    (
        "an hour range without a frequency repeats hourly",
        lambda s: s.hour_range is not None and s.frequency is None,
        _set("HOURLY"),
    ),
    (
        "months with nth weekdays repeat yearly",
        lambda s: bool(s.months) and bool(s.nth_weekdays),
        _set("YEARLY"),
    ),
    (
        "months with plain weekdays repeat yearly",
        lambda s: bool(s.months) and bool(s.weekdays) and not s.nth_weekdays,
        _set("YEARLY"),
    ),
    (
        "months without a frequency repeat yearly",
        lambda s: bool(s.months) and s.frequency is None,
        _set("YEARLY"),
    ),
    (
        "an hour range with weekdays stays hourly",
        lambda s: s.hour_range is not None and bool(s.weekdays),
        _set("HOURLY"),
    ),
)


def resolve_frequency(state: MatchState) -> MatchState:
    """Return ``state`` with every matching rule in :data:`FREQUENCY_RULES` applied."""

    for _description, predicate, action in FREQUENCY_RULES:
        if predicate(state):
            state = action(state)
    return state
