"""Extractors that pull schedule fields out of normalized text.

Every matcher reads only the normalized string and returns plain values, so
they can be called and tested on their own. :func:`match_patterns` runs them
all and hands the combined :class:`MatchState` to the frequency resolver.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from frequency import resolve_frequency
from models import Frequency, MatchState
from utils.recurrence import (
    parse_count,
    parse_duration,
    parse_interval,
    parse_ordinals,
)
from utils.time_parser import extract_times

WEEKDAY_CODES: Dict[str, str] = {
    "monday": "MO",
    "mon": "MO",
    "tuesday": "TU",
    "tues": "TU",
    "tue": "TU",
    "wednesday": "WE",
    "wed": "WE",
    "thursday": "TH",
    "thurs": "TH",
    "thur": "TH",
    "thu": "TH",
    "friday": "FR",
    "fri": "FR",
    "saturday": "SA",
    "sat": "SA",
    "sunday": "SU",
    "sun": "SU",
}

WORKING_DAYS = ("MO", "TU", "WE", "TH", "FR")
WEEKEND_DAYS = ("SA", "SU")

POSITIONS: Dict[str, int] = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "last": -1,
}

MONTH_CODES: Dict[str, int] = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sept": 9,
    "sep": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}

INTERVAL_FREQUENCIES: Dict[str, Frequency] = {
    "minute": "MINUTELY",
    "hour": "HOURLY",
    "day": "DAILY",
    "week": "WEEKLY",
    "month": "MONTHLY",
    "year": "YEARLY",
}

# Checked in order; the first keyword present decides the frequency.
FREQUENCY_KEYWORDS: Tuple[Tuple[re.Pattern, Frequency, Optional[int]], ...] = (
    (re.compile(r"\b(?:hourly|every hour)\b"), "HOURLY", None),
    (re.compile(r"\b(?:daily|every day)\b"), "DAILY", None),
    (re.compile(r"\b(?:weekly|every week)\b"), "WEEKLY", None),
    (re.compile(r"\b(?:monthly|every month)\b"), "MONTHLY", None),
    (re.compile(r"\b(?:yearly|annually|every year)\b"), "YEARLY", None),
    (re.compile(r"\bquarterly\b"), "MONTHLY", 3),
)


def _word_alternation(words) -> str:
    # Longest first so "september" wins over "sep" at the same offset.
    return "|".join(sorted(words, key=len, reverse=True))


_FULL_DAY_NAMES = tuple(name for name in WEEKDAY_CODES if name.endswith("day"))

_WORKING_DAYS_PATTERN = re.compile(r"\bweekdays?\b")
_WEEKEND_PATTERN = re.compile(r"\bweekends?\b")
_WEEKDAY_PATTERN = re.compile(rf"\b({_word_alternation(WEEKDAY_CODES)})\b")
_DIRECT_NTH_PATTERN = re.compile(
    rf"\b({_word_alternation(POSITIONS)}) ({_word_alternation(_FULL_DAY_NAMES)})\b"
)
_NTH_TOKEN_PATTERN = re.compile(
    rf"\b({_word_alternation(POSITIONS)}|{_word_alternation(_FULL_DAY_NAMES)})\b|\."
)
_LAST_DAY_PATTERN = re.compile(r"\blast day of (?:the |every )?month\b")
_MONTH_PATTERN = re.compile(rf"\b({_word_alternation(MONTH_CODES)})\b")
_HOUR_RANGE_PATTERN = re.compile(
    r"\bbetween (\d{1,2})(?::\d{2})? ?(am|pm)? and (\d{1,2})(?::\d{2})? ?(am|pm)?\b"
)


def match_frequency(text: str) -> Tuple[Optional[Frequency], Optional[int]]:
    """Return ``(frequency, interval)`` from keywords and ``every N <unit>`` phrases.

    An interval phrase always wins over a keyword because it is applied last.
    """

    frequency: Optional[Frequency] = None
    interval: Optional[int] = None
    for pattern, keyword_frequency, keyword_interval in FREQUENCY_KEYWORDS:
        if pattern.search(text):
            frequency = keyword_frequency
            interval = keyword_interval
            break

    parsed_interval = parse_interval(text)
    if parsed_interval:
        interval, unit = parsed_interval
        frequency = INTERVAL_FREQUENCIES[unit]

    return frequency, interval


def match_weekdays(text: str) -> Tuple[str, ...]:
    """Return weekday codes in the order they first appear."""

    if _WORKING_DAYS_PATTERN.search(text):
        return WORKING_DAYS
    if _WEEKEND_PATTERN.search(text):
        return WEEKEND_DAYS

    codes: List[str] = []
    for match in _WEEKDAY_PATTERN.finditer(text):
        code = WEEKDAY_CODES[match.group(1)]
        if code not in codes:
            codes.append(code)
    return tuple(codes)


def _nth_sort_key(code: str) -> Tuple[bool, int]:
    ordinal = int(code[:-2])
    return ordinal == -1, ordinal


def match_nth_weekdays(text: str) -> Tuple[str, ...]:
    """Return codes like ``1MO`` or ``-1FR``, ordered with ``last`` entries at the end.

    Direct pairs (``first monday``) are found first. A second scan pairs every
    position word with each day name that follows it in the same sentence,
    which covers ``first and third monday``.
    """

    codes: List[str] = []

    def _add(position: str, day: str) -> None:
        code = f"{POSITIONS[position]}{WEEKDAY_CODES[day]}"
        if code not in codes:
            codes.append(code)

    for match in _DIRECT_NTH_PATTERN.finditer(text):
        _add(match.group(1), match.group(2))

    pending: List[str] = []
    for match in _NTH_TOKEN_PATTERN.finditer(text):
        word = match.group(1)
        if word is None:
            pending.clear()
        elif word in POSITIONS:
            if word not in pending:
                pending.append(word)
        else:
            for position in pending:
                _add(position, word)

    return tuple(sorted(codes, key=_nth_sort_key))


def match_month_days(text: str) -> Tuple[int, ...]:
    """Return days of the month, or ``(-1,)`` for ``last day of the month``."""

    if _LAST_DAY_PATTERN.search(text):
        return (-1,)
    days = {day for day in parse_ordinals(text) if 1 <= day <= 31}
    return tuple(sorted(days))


def match_months(text: str) -> Tuple[int, ...]:
    """Return month numbers mentioned in ``text``, ascending."""

    months = {MONTH_CODES[match.group(1)] for match in _MONTH_PATTERN.finditer(text)}
    return tuple(sorted(months))


def _range_hour(hour: int, period: Optional[str]) -> Optional[int]:
    if period:
        if hour < 1 or hour > 12:
            return None
        if period == "pm" and hour != 12:
            return hour + 12
        if period == "am" and hour == 12:
            return 0
        return hour
    if hour > 23:
        return None
    return hour


def match_hour_range(text: str) -> Optional[Tuple[int, ...]]:
    """Expand ``between 9am and 5pm`` into the hours it covers.

    Ranges that cross midnight wrap, so ``between 11pm and 2am`` yields
    ``(23, 0, 1, 2)``. Returns ``None`` when no valid range is present.
    """

    match = _HOUR_RANGE_PATTERN.search(text)
    if not match:
        return None

    start = _range_hour(int(match.group(1)), match.group(2))
    end = _range_hour(int(match.group(3)), match.group(4))
    if start is None or end is None:
        return None

    if start > end:
        return tuple(range(start, 24)) + tuple(range(0, end + 1))
    return tuple(range(start, end + 1))


def match_patterns(text: str) -> MatchState:
    """Run every extractor over ``text`` and resolve the final frequency."""

    frequency, interval = match_frequency(text)
    count = parse_count(text)
    state = MatchState(
        frequency=frequency,
        interval=interval,
        weekdays=match_weekdays(text),
        nth_weekdays=match_nth_weekdays(text),
        month_days=match_month_days(text),
        months=match_months(text),
        times=tuple(extract_times(text)),
        hour_range=match_hour_range(text),
        count=count,
        duration=parse_duration(text) if count is None else None,
    )
    return resolve_frequency(state)
