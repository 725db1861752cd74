"""Tests for :func:`rrule_builder.build_rrule`."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from models import MatchState, ParsedTime
from rrule_builder import RRuleBuildError, build_rrule


def _time(hour: int, minute: int = 0) -> ParsedTime:
    return ParsedTime(hour24=hour, minute=minute)


def test_requires_frequency():
    with pytest.raises(RRuleBuildError):
        build_rrule(MatchState(weekdays=("MO",)))


def test_field_order_is_fixed():
    state = MatchState(
        frequency="YEARLY",
        interval=2,
        count=4,
        months=(3, 9),
        weekdays=("MO",),
        month_days=(1,),
        times=(_time(9, 30),),
    )
    assert build_rrule(state) == (
        "FREQ=YEARLY;INTERVAL=2;COUNT=4;BYMONTH=3,9;BYDAY=MO;BYMONTHDAY=1;"
        "BYHOUR=9;BYMINUTE=30"
    )


def test_interval_of_one_is_omitted():
    assert build_rrule(MatchState(frequency="DAILY", interval=1)) == "FREQ=DAILY"


def test_nth_weekdays_take_precedence():
    state = MatchState(frequency="MONTHLY", weekdays=("MO",), nth_weekdays=("1MO",))
    assert build_rrule(state) == "FREQ=MONTHLY;BYDAY=1MO"


def test_hour_range_replaces_times():
    state = MatchState(
        frequency="HOURLY",
        hour_range=(22, 23, 0),
        times=(_time(22), _time(0, 15)),
    )
    assert build_rrule(state) == "FREQ=HOURLY;BYHOUR=22,23,0"


def test_distinct_hours_keep_order_and_minutes_sort():
    state = MatchState(
        frequency="DAILY", times=(_time(17, 45), _time(9, 15), _time(17, 15))
    )
    assert build_rrule(state) == "FREQ=DAILY;BYHOUR=17,9;BYMINUTE=15,45"


def test_all_hours_drop_byhour():
    state = MatchState(frequency="DAILY", times=tuple(_time(hour) for hour in range(24)))
    assert build_rrule(state) == "FREQ=DAILY;BYMINUTE=0"


def test_last_day_sentinel():
    state = MatchState(frequency="MONTHLY", month_days=(-1,))
    assert build_rrule(state) == "FREQ=MONTHLY;BYMONTHDAY=-1"
