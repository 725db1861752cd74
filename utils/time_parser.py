"""Recognize and validate time-of-day tokens such as ``9am`` or ``17:45``."""

from __future__ import annotations

import re
from typing import List, Optional

from models import ParsedTime

_TWELVE_HOUR = re.compile(r"(-?\d{1,2})(?::(\d{2}))? ?(am|pm)")
_TWENTY_FOUR_HOUR = re.compile(r"(-?\d{1,2}):(\d{2})")

# One alternation with fixed-width quantifiers so scanning stays linear.
_TIME_TOKEN = re.compile(
    r"\b(?:noon|midnight)\b"
    r"|(?<![\d:])-?\d{1,2}(?::\d{2})? ?(?:am|pm)\b"
    r"|(?<![\d:])-?\d{1,2}:\d{2}(?![\d:])"
)

# Anything that looks like a standalone clock value, including overlong digit
# runs and dotted separators the extractor would silently drop.
_TIME_SHAPED = re.compile(r"(?<![\w:.-])(-?\d+(?:[:.]\d+)?) ?(am|pm)?(?![\w:])")


def parse_time(token: str) -> Optional[ParsedTime]:
    """Return the :class:`ParsedTime` for ``token`` or ``None`` if it is invalid."""

    candidate = token.strip().lower()
    if candidate == "midnight":
        return ParsedTime(hour24=0, minute=0)
    if candidate == "noon":
        return ParsedTime(hour24=12, minute=0)

    twelve = _TWELVE_HOUR.fullmatch(candidate)
    if twelve:
        hour = int(twelve.group(1))
        minute = int(twelve.group(2) or 0)
        if hour < 1 or hour > 12 or minute > 59:
            return None
        if twelve.group(3) == "pm" and hour != 12:
            hour += 12
        elif twelve.group(3) == "am" and hour == 12:
            hour = 0
        return ParsedTime(hour24=hour, minute=minute)

    twenty_four = _TWENTY_FOUR_HOUR.fullmatch(candidate)
    if twenty_four:
        hour = int(twenty_four.group(1))
        minute = int(twenty_four.group(2))
        if hour < 0 or hour > 23 or minute > 59:
            return None
        return ParsedTime(hour24=hour, minute=minute)

    return None


def extract_times(text: str) -> List[ParsedTime]:
    """Return every valid time in ``text`` in the order it appears."""

    times: List[ParsedTime] = []
    for match in _TIME_TOKEN.finditer(text):
        parsed = parse_time(match.group(0))
        if parsed is not None:
            times.append(parsed)
    return times


def find_invalid_time(text: str) -> Optional[str]:
    """Return the first time-shaped token in ``text`` that fails validation.

    Only tokens carrying a colon or an am/pm marker count as time-shaped, so
    phrases like ``every 2 days`` or ``every 1.5 hours`` are left alone. Digit
    runs of any length are scanned, so ``125:00`` and ``9.30am`` are caught.
    """

    for match in _TIME_SHAPED.finditer(text):
        number, period = match.group(1), match.group(2)
        if ":" not in number and not period:
            continue
        token = f"{number}{period or ''}"
        if parse_time(token) is None:
            return token
    return None
