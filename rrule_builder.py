"""Assemble RFC 5545 RRULE strings from a resolved :class:`MatchState`."""

from __future__ import annotations

from typing import List

from models import MatchState


class RRuleBuildError(ValueError):
    """Raised when a state is missing data every RRULE requires."""


def _join(values) -> str:
    return ",".join(str(value) for value in values)


def _distinct(values) -> List[int]:
    seen: List[int] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def build_rrule(state: MatchState) -> str:
    """Return the RRULE for ``state``.

    Fields are always emitted in the order FREQ, INTERVAL, COUNT, BYMONTH,
    BYDAY, BYMONTHDAY, BYHOUR, BYMINUTE.
    """

    if not state.frequency:
        raise RRuleBuildError("Frequency is required for RRULE")

    parts = [f"FREQ={state.frequency}"]

    if state.interval and state.interval > 1:
        parts.append(f"INTERVAL={state.interval}")

    if state.count:
        parts.append(f"COUNT={state.count}")

    if state.months:
        parts.append(f"BYMONTH={_join(state.months)}")

    if state.nth_weekdays:
        parts.append(f"BYDAY={_join(state.nth_weekdays)}")
    elif state.weekdays:
        parts.append(f"BYDAY={_join(state.weekdays)}")

    if state.month_days:
        parts.append(f"BYMONTHDAY={_join(state.month_days)}")

    if state.hour_range is not None:
        parts.append(f"BYHOUR={_join(state.hour_range)}")
    elif state.times:
        hours = _distinct(parsed.hour24 for parsed in state.times)
        # All 24 hours is the same as no restriction.
        if len(hours) < 24:
            parts.append(f"BYHOUR={_join(hours)}")
        minutes = sorted(_distinct(parsed.minute for parsed in state.times))
        parts.append(f"BYMINUTE={_join(minutes)}")

    return ";".join(parts)
