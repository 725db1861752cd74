"""Pathological inputs must convert quickly regardless of repetition."""

import sys
import time
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from converter import convert
from models import RRuleSuccess, RRuleUnsupported

# Cost grows linearly with length; 100k-character inputs need roughly 0.2s
# on a typical CI host, so the ceiling leaves headroom for slower runners.
TIME_BUDGET_SECONDS = 0.5

REPEATED_INPUTS = {
    "weekday names": "monday " * 1000,
    "every keywords": "every " * 1000 + "day",
    "at keywords": "at " * 1000 + "9am",
    "position words": "first " * 1000 + "monday",
    "last words": "last " * 5000 + "friday",
    "excessive spaces": "every" + " " * 10000 + "monday",
    "alternating text": "a " * 500 + "monday",
    "spaces before time": "at" + " " * 5000 + "9am",
    "excessive commas": "," * 10000 + "every monday",
    "comma space pairs": ", " * 5000 + "every monday",
    "commas in weekday list": "monday" + "," * 1000 + " tuesday",
    "invalid times": "99:99 " * 1000,
    "negative times": "-99:99 " * 1000,
    "between keywords": "between " * 1000 + "9am and 5pm",
    "colon chains": "1:2:3:4:5:" * 1000,
    "long digit runs": "123456789:" * 10_000,
    "am pm markers": "ampmampm" * 5000,
    "on the": "on the " * 1000 + "1st",
    "ordinal suffixes": "on the 1stndrdth" * 500,
    "interval words": "every other " * 2000 + "week",
    "for phrases": "for " * 5000 + "10 occurrences daily",
    "starting phrases": "starting " * 5000 + "2025-01-15 daily",
    "digits": "1" * 100_000,
    "unicode filler": "日本語の予定 " * 14_000 + "every monday",
    "mixed keywords": "every monday first last between and at 9 " * 2400,
}


@pytest.mark.parametrize("name", sorted(REPEATED_INPUTS))
def test_repeated_patterns_finish_within_budget(name):
    text = REPEATED_INPUTS[name]
    assert len(text) <= 100_000

    started = time.perf_counter()
    result = convert(text)
    elapsed = time.perf_counter() - started

    assert isinstance(result, (RRuleSuccess, RRuleUnsupported))
    assert elapsed < TIME_BUDGET_SECONDS, f"{name} took {elapsed:.3f}s"


def test_padded_phrase_still_converts():
    text = "every" + " " * 10000 + "monday"
    assert convert(text) == RRuleSuccess(rrules=["FREQ=WEEKLY;BYDAY=MO"])


def test_invalid_time_flood_is_reported():
    result = convert("99:99 " * 1000)
    assert isinstance(result, RRuleUnsupported)
    assert '"99:99"' in result.unsupported
