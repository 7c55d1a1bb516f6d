"""Time span — an in-universe minute count with day/hour/minute breakdown."""
from __future__ import annotations

from functools import total_ordering
from typing import Union

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY  # 1440

SpanLike = Union["TimeSpan", int]


def _minutes_of(value: SpanLike) -> int:
    if isinstance(value, TimeSpan):
        return value.total_minutes
    return int(value)


@total_ordering
class TimeSpan:
    """A count of minutes, used both as an instant and as a duration.

    An instant is measured from midnight of the starting day (day 0). A
    duration is simply an offset to add to an instant. Either a TimeSpan or
    a plain number of minutes is accepted wherever one is expected.
    """

    __slots__ = ("total_minutes",)

    def __init__(self, days: int = 0, hours: int = 0, minutes: int = 0) -> None:
        self.total_minutes = (
            days * MINUTES_PER_DAY + hours * MINUTES_PER_HOUR + minutes
        )

    @classmethod
    def from_minutes(cls, minutes: int) -> TimeSpan:
        return cls(0, 0, int(minutes))

    # -- Breakdown --

    def get_minutes(self) -> int:
        """Minutes past the current hour (0-59)."""
        return self.total_minutes % MINUTES_PER_HOUR

    def get_hours(self) -> int:
        """Hour of the current day (0-23)."""
        return (self.total_minutes // MINUTES_PER_HOUR) % HOURS_PER_DAY

    def get_days(self) -> int:
        """Full days since midnight of the starting day."""
        return self.total_minutes // MINUTES_PER_DAY

    def get_total_hours(self) -> int:
        return self.total_minutes // MINUTES_PER_HOUR

    def get_total_minutes(self) -> int:
        return self.total_minutes

    def get_minutes_of_day(self) -> int:
        """Minutes since midnight of the current day (0-1439)."""
        return self.total_minutes % MINUTES_PER_DAY

    def is_daytime(self, day_start: SpanLike, night_start: SpanLike) -> bool:
        """True while the time of day is within [day_start, night_start)."""
        time_of_day = self.get_minutes_of_day()
        return _minutes_of(day_start) <= time_of_day < _minutes_of(night_start)

    def is_night(self, day_start: SpanLike, night_start: SpanLike) -> bool:
        return not self.is_daytime(day_start, night_start)

    # -- In-place changes --

    def add(self, span: SpanLike) -> int:
        """Add a span (or minutes) to this one. Returns the new total."""
        self.total_minutes += _minutes_of(span)
        return self.total_minutes

    def add_minutes(self, minutes: int) -> int:
        self.total_minutes += minutes
        return self.total_minutes

    def set_total_minutes(self, minutes: int) -> int:
        self.total_minutes = int(minutes)
        return self.total_minutes

    def set_forward_to(self, time_of_day: SpanLike) -> int:
        """Move forward to the next occurrence of the given time of day.

        Only the time-of-day part of the target is used. If it is earlier in
        the day than now, the result lands on that time tomorrow.
        """
        target = _minutes_of(time_of_day) % MINUTES_PER_DAY
        difference = target - self.get_minutes_of_day()
        if difference < 0:
            difference += MINUTES_PER_DAY
        self.total_minutes += difference
        return self.total_minutes

    # -- Pure arithmetic --

    def plus(self, span: SpanLike) -> TimeSpan:
        return TimeSpan.from_minutes(self.total_minutes + _minutes_of(span))

    def minus(self, span: SpanLike) -> TimeSpan:
        return TimeSpan.from_minutes(self.total_minutes - _minutes_of(span))

    def copy(self) -> TimeSpan:
        return TimeSpan.from_minutes(self.total_minutes)

    def __add__(self, other: SpanLike) -> TimeSpan:
        if not isinstance(other, (TimeSpan, int)):
            return NotImplemented
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other: SpanLike) -> TimeSpan:
        if not isinstance(other, (TimeSpan, int)):
            return NotImplemented
        return self.minus(other)

    def __int__(self) -> int:
        return self.total_minutes

    def __index__(self) -> int:
        return self.total_minutes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (TimeSpan, int)):
            return self.total_minutes == _minutes_of(other)
        return NotImplemented

    def __lt__(self, other: SpanLike) -> bool:
        if isinstance(other, (TimeSpan, int)):
            return self.total_minutes < _minutes_of(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.get_hours():02d}:{self.get_minutes():02d}"

    def __repr__(self) -> str:
        return (
            f"TimeSpan(days={self.get_days()}, "
            f"time={self}, total_minutes={self.total_minutes})"
        )


def format_time(span: SpanLike) -> str:
    """Human-readable time string, e.g. 'Day 2 (08:30)'."""
    span = span if isinstance(span, TimeSpan) else TimeSpan.from_minutes(span)
    return f"Day {span.get_days()} ({span})"
