"""Convert natural-language schedule phrases into RRULE strings.

Example::

    >>> convert("every monday at 9am").rrules
    ['FREQ=WEEKLY;BYDAY=MO;BYHOUR=9;BYMINUTE=0']
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from config import config
from conflicts import detect_conflict
from duration import duration_to_count
from matchers import match_patterns
from models import MatchState, RRuleResult, RRuleSuccess, RRuleUnsupported
from rrule_builder import build_rrule
from utils.logging import configure_logger
from utils.recurrence import InvalidStartDate, parse_start_date, strip_start_date
from utils.text import normalize_input
from utils.time_parser import find_invalid_time

LOG_FILE = Path(config.LOG_DIR) / "converter.log"
logger = configure_logger(__name__, LOG_FILE)

EMPTY_INPUT_MESSAGE = (
    "Could not understand the input. Please provide a schedule description."
)
UNRECOGNIZED_MESSAGE = (
    "Could not understand the input. "
    "Please use natural language like 'every monday at 9am'."
)


class AmbiguousCountError(ValueError):
    """Raised when COUNT cannot be shared fairly between split rules."""


def _unsupported(text: str, reason: str) -> RRuleUnsupported:
    logger.info("Unsupported schedule %r: %s", text[:80], reason)
    return RRuleUnsupported(unsupported=reason)


def _needs_split(state: MatchState) -> bool:
    """Return ``True`` when one BYHOUR/BYMINUTE pair would invent extra times."""

    if len(state.times) < 2 or state.hour_range is not None:
        return False
    hours = {parsed.hour24 for parsed in state.times}
    minutes = {parsed.minute for parsed in state.times}
    return len(hours) > 1 and len(minutes) > 1


def split_by_time(state: MatchState) -> List[MatchState]:
    """Return one state per time of day with COUNT shared out between them.

    ``COUNT=10`` over three times becomes 4, 3 and 3. Raises
    :class:`AmbiguousCountError` when COUNT is smaller than the number of
    times.
    """

    total = len(state.times)
    if state.count is None:
        return [
            state.model_copy(update={"times": (parsed,)}) for parsed in state.times
        ]

    if state.count < total:
        raise AmbiguousCountError(
            f"COUNT={state.count} is ambiguous across {total} different times of day; "
            f"it is unclear which times should fire. Use COUNT={total} or more "
            f"(e.g. \"for {total} occurrences\")."
        )

    share, remainder = divmod(state.count, total)
    return [
        state.model_copy(
            update={"times": (parsed,), "count": share + (1 if index < remainder else 0)}
        )
        for index, parsed in enumerate(state.times)
    ]


def convert(text: str, locale: Optional[str] = None) -> RRuleResult:
    """Convert ``text`` to one or more RRULE strings.

    Returns :class:`RRuleSuccess` or :class:`RRuleUnsupported`; never raises
    for bad input. ``locale`` selects the vocabulary, and only English is
    available today.
    """

    locale = (locale or config.DEFAULT_LOCALE).lower()
    normalized = normalize_input(text)
    logger.info("Converting schedule (locale=%s, length=%d)", locale, len(normalized))

    if not normalized:
        return _unsupported(normalized, EMPTY_INPUT_MESSAGE)

    try:
        dtstart = parse_start_date(normalized)
    except InvalidStartDate as exc:
        return _unsupported(
            normalized, f"Invalid start date: {exc}. Use a real calendar date."
        )
    if dtstart:
        normalized = strip_start_date(normalized)

    invalid_time = find_invalid_time(normalized)
    if invalid_time:
        return _unsupported(
            normalized,
            f'Invalid time value "{invalid_time}". Hours must be 0-23 '
            "(or 1-12 with am/pm) and minutes must be 0-59.",
        )

    state = match_patterns(normalized)
    logger.debug("Matched state: %s", state)
    if not state.frequency:
        return _unsupported(normalized, UNRECOGNIZED_MESSAGE)

    if state.count == 0:
        return _unsupported(
            normalized,
            "COUNT must be at least 1. Use \"for N occurrences\" with N of 1 or more.",
        )

    conflict = detect_conflict(state)
    if conflict:
        return _unsupported(normalized, conflict)

    note = None
    if state.duration is not None and state.count is None:
        count = duration_to_count(
            state.duration,
            state.frequency,
            interval=state.interval or 1,
            weekday_count=len(state.weekdays),
        )
        phrase = state.duration.describe()
        if count is None:
            return _unsupported(
                normalized,
                f'Cannot convert "{phrase}" into a number of occurrences for a '
                f"{state.frequency.lower()} schedule.",
            )
        if count < 1:
            return _unsupported(
                normalized,
                f'"{phrase}" is shorter than one {state.frequency.lower()} '
                "occurrence. Use \"for N occurrences\" instead.",
            )
        state = state.model_copy(update={"count": count})
        note = f'Converted "{phrase}" to COUNT={count}.'

    try:
        states = split_by_time(state) if _needs_split(state) else [state]
    except AmbiguousCountError as exc:
        return _unsupported(normalized, str(exc))

    try:
        rrules = [build_rrule(item) for item in states]
    except ValueError as exc:
        logger.warning("Could not build RRULE for %r: %s", normalized[:80], exc)
        return RRuleUnsupported(unsupported=f"Could not construct a valid RRULE: {exc}")

    logger.info("Converted schedule into %d rule(s)", len(rrules))
    return RRuleSuccess(rrules=rrules, note=note, dtstart=dtstart)
