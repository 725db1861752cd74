"""Reject field combinations that cannot be expressed as a single schedule."""

from __future__ import annotations

from typing import Optional

from models import MatchState

_SUB_DAILY = {"HOURLY", "MINUTELY", "DAILY"}
_WINDOWED = {"HOURLY", "MINUTELY"}


def detect_conflict(state: MatchState) -> Optional[str]:
    """Return a user-facing reason for the first conflict found, else ``None``."""

    interval = state.interval or 1

    if state.frequency in _SUB_DAILY and state.nth_weekdays:
        return (
            f"Patterns like \"first monday\" cannot repeat {state.frequency.lower()}. "
            "Nth weekday schedules need a weekly or monthly frequency; "
            "drop the time window or the ordinal day."
        )

    if state.frequency == "YEARLY" and state.month_days and not state.months:
        days = ", ".join(str(day) for day in state.month_days)
        return (
            f"A yearly schedule on day {days} is ambiguous without a month. "
            "Add a month name, e.g. \"every year on the 15th of march\"."
        )

    if (
        interval > 1
        and state.frequency == "MINUTELY"
        and state.times
        and state.hour_range is None
    ):
        return (
            f"\"Every {interval} minutes\" conflicts with specific times of day. "
            "Use a window instead, e.g. \"every 15 minutes between 9am and 5pm\"."
        )

    if (
        interval > 1
        and state.frequency == "HOURLY"
        and any(parsed.minute != 0 for parsed in state.times)
    ):
        return (
            f"\"Every {interval} hours\" only fires on the hour, so times with minutes "
            "are ambiguous. Use whole hours such as \"9am\" or a daily schedule."
        )

    if state.hour_range is not None and state.frequency not in _WINDOWED:
        frequency = (state.frequency or "unknown").lower()
        return (
            f"A \"between ... and ...\" window needs an hourly or minutely schedule, "
            f"not {frequency}. Try \"hourly between 9am and 5pm\"."
        )

    return None
