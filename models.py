"""Data structures shared by the schedule conversion pipeline."""

# pylint: disable=too-few-public-methods

from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Frequency = Literal["DAILY", "WEEKLY", "MONTHLY", "YEARLY", "HOURLY", "MINUTELY"]
DurationUnit = Literal["day", "week", "month", "year"]


class ParsedTime(BaseModel):
    """A validated time of day on the 24-hour clock."""

    model_config = ConfigDict(frozen=True)

    hour24: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)


class Duration(BaseModel):
    """A span such as ``for 5 weeks`` that still needs converting to a COUNT."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=1)
    unit: DurationUnit

    def describe(self) -> str:
        plural = "" if self.value == 1 else "s"
        return f"for {self.value} {self.unit}{plural}"


class MatchState(BaseModel):
    """Everything extracted from a phrase, threaded through the later stages.

    Stages never mutate a state; they return a copy made with
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    frequency: Optional[Frequency] = None
    interval: Optional[int] = None
    weekdays: Tuple[str, ...] = ()
    nth_weekdays: Tuple[str, ...] = ()
    month_days: Tuple[int, ...] = ()
    months: Tuple[int, ...] = ()
    times: Tuple[ParsedTime, ...] = ()
    hour_range: Optional[Tuple[int, ...]] = None
    count: Optional[int] = None
    duration: Optional[Duration] = None


class RRuleSuccess(BaseModel):
    """One or more RRULE strings describing the phrase."""

    model_config = ConfigDict(frozen=True)

    rrules: List[str]
    note: Optional[str] = None
    dtstart: Optional[str] = Field(None, pattern=r"^\d{8}$")


class RRuleUnsupported(BaseModel):
    """The phrase could not be represented; ``unsupported`` explains why."""

    model_config = ConfigDict(frozen=True)

    unsupported: str


RRuleResult = Union[RRuleSuccess, RRuleUnsupported]
