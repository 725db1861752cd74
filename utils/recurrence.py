"""Helpers for interpreting interval, count, duration and start-date phrases."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional, Tuple

from models import Duration

SPELLED_NUMBERS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "other": 2,
}

MONTH_NUMBERS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

INTERVAL_UNITS = ("minute", "hour", "day", "week", "month", "year")

_UNIT_GROUP = "|".join(INTERVAL_UNITS)
_DIGIT_INTERVAL = re.compile(rf"\bevery (\d{{1,4}}) ({_UNIT_GROUP})s?\b")
_SPELLED_INTERVAL = re.compile(
    rf"\bevery ({'|'.join(SPELLED_NUMBERS)}) ({_UNIT_GROUP})s?\b"
)
_COUNT_PATTERN = re.compile(r"\bfor (\d{1,6}) occurrences?\b")
_DURATION_PATTERN = re.compile(r"\bfor (\d{1,6}) (day|week|month|year)s?\b")
_ORDINAL_PATTERN = re.compile(r"\b(\d{1,2})(?:st|nd|rd|th)\b")
_ISO_START = re.compile(r"\bstarting (\d{4})-(\d{2})-(\d{2})\b")
_NAMED_START = re.compile(
    rf"\bstarting ({'|'.join(MONTH_NUMBERS)}) (\d{{1,2}}),? ?(\d{{4}})\b"
)


class InvalidStartDate(ValueError):
    """Raised when a ``starting ...`` phrase names a date that does not exist."""


def parse_interval(text: str) -> Optional[Tuple[int, str]]:
    """Return ``(value, unit)`` for phrases like ``every 2 weeks`` or ``every other day``."""

    digit_match = _DIGIT_INTERVAL.search(text)
    if digit_match:
        value = int(digit_match.group(1))
        if value >= 1:
            return value, digit_match.group(2)

    spelled_match = _SPELLED_INTERVAL.search(text)
    if spelled_match:
        return SPELLED_NUMBERS[spelled_match.group(1)], spelled_match.group(2)

    return None


def parse_count(text: str) -> Optional[int]:
    """Return ``N`` from ``for N occurrences``.

    Zero is returned as-is so callers can reject it.
    """

    match = _COUNT_PATTERN.search(text)
    if match:
        return int(match.group(1))
    return None


def parse_duration(text: str) -> Optional[Duration]:
    """Return the span described by ``for N days/weeks/months/years``."""

    match = _DURATION_PATTERN.search(text)
    if not match:
        return None
    value = int(match.group(1))
    if value < 1:
        return None
    return Duration(value=value, unit=match.group(2))


def parse_ordinals(text: str) -> list[int]:
    """Return every ordinal number (``1st``, ``22nd``) in textual order."""

    return [int(match.group(1)) for match in _ORDINAL_PATTERN.finditer(text)]


def parse_start_date(text: str) -> Optional[str]:
    """Return the compact ``YYYYMMDD`` form of a ``starting <date>`` phrase.

    Accepts ``starting 2025-01-15`` and ``starting january 15, 2025``. Raises
    :class:`InvalidStartDate` when the phrase is present but names an
    impossible calendar date.
    """

    iso_match = _ISO_START.search(text)
    if iso_match:
        year, month, day = (int(part) for part in iso_match.groups())
    else:
        named_match = _NAMED_START.search(text)
        if not named_match:
            return None
        month = MONTH_NUMBERS[named_match.group(1)]
        day = int(named_match.group(2))
        year = int(named_match.group(3))

    try:
        start = date(year, month, day)
    except ValueError as exc:
        raise InvalidStartDate(str(exc)) from exc
    return f"{start.year:04d}{start.month:02d}{start.day:02d}"


def strip_start_date(text: str) -> str:
    """Remove a ``starting <date>`` phrase so it cannot leak into other matches."""

    stripped = _ISO_START.sub(" ", text)
    stripped = _NAMED_START.sub(" ", stripped)
    return " ".join(stripped.split())
