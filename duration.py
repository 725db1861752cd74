"""Turn duration phrases such as ``for 5 weeks`` into an occurrence count."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Dict, Optional

from models import Duration

# Occurrences of each frequency per duration unit.
CONVERSION_TABLE: Dict[str, Dict[str, Fraction]] = {
    "DAILY": {
        "day": Fraction(1),
        "week": Fraction(7),
        "month": Fraction(30),
        "year": Fraction(365),
    },
    "WEEKLY": {
        "day": Fraction(1, 7),
        "week": Fraction(1),
        "month": Fraction(4),
        "year": Fraction(52),
    },
    "MONTHLY": {
        "day": Fraction(1, 30),
        "week": Fraction(1, 4),
        "month": Fraction(1),
        "year": Fraction(12),
    },
    "YEARLY": {
        "day": Fraction(1, 365),
        "week": Fraction(1, 52),
        "month": Fraction(1, 12),
        "year": Fraction(1),
    },
    "HOURLY": {
        "day": Fraction(24),
        "week": Fraction(168),
        "month": Fraction(720),
        "year": Fraction(8760),
    },
    "MINUTELY": {
        "day": Fraction(1440),
        "week": Fraction(10080),
        "month": Fraction(43200),
        "year": Fraction(525600),
    },
}


def duration_to_count(
    duration: Duration,
    frequency: str,
    interval: int = 1,
    weekday_count: int = 1,
) -> Optional[int]:
    """Return how many occurrences ``duration`` spans at ``frequency``.

    ``every 2 weeks for 4 weeks`` gives 2, and ``every monday and wednesday
    for 5 weeks`` gives 10 because each week fires once per selected day.
    Returns ``None`` when the frequency has no conversion for the unit.
    """

    multiplier = CONVERSION_TABLE.get(frequency, {}).get(duration.unit)
    if multiplier is None:
        return None

    count = math.floor(duration.value * multiplier / max(interval, 1))
    if frequency == "WEEKLY" and weekday_count > 1:
        count *= weekday_count
    return count
