"""Tests for src/daynight/mechanics/time_span.py."""
from __future__ import annotations

import pytest

from daynight.mechanics.time_span import (
    MINUTES_PER_DAY,
    TimeSpan,
    format_time,
)


class TestConstruction:
    def test_defaults_to_zero(self):
        assert TimeSpan().get_total_minutes() == 0

    def test_days_hours_minutes(self):
        assert TimeSpan(1, 2, 3).get_total_minutes() == 1440 + 120 + 3

    def test_from_minutes(self):
        assert TimeSpan.from_minutes(425).get_total_minutes() == 425


class TestBreakdown:
    @pytest.mark.parametrize("minutes, days, hours, mins, of_day, total_hours", [
        (0, 0, 0, 0, 0, 0),
        (59, 0, 0, 59, 59, 0),
        (60, 0, 1, 0, 60, 1),
        (1439, 0, 23, 59, 1439, 23),
        (1440, 1, 0, 0, 0, 24),
        (3000, 2, 2, 0, 120, 50),
    ])
    def test_fields(self, minutes, days, hours, mins, of_day, total_hours):
        span = TimeSpan.from_minutes(minutes)
        assert span.get_days() == days
        assert span.get_hours() == hours
        assert span.get_minutes() == mins
        assert span.get_minutes_of_day() == of_day
        assert span.get_total_hours() == total_hours

    @pytest.mark.parametrize("minutes", [0, 1, 59, 61, 719, 1439, 1440, 1441, 10_000, 987_654])
    def test_fields_recompose(self, minutes):
        span = TimeSpan.from_minutes(minutes)
        assert span.get_hours() * 60 + span.get_minutes() == span.get_minutes_of_day()
        assert span.get_days() * MINUTES_PER_DAY + span.get_minutes_of_day() == span.get_total_minutes()


class TestIsDaytime:
    DAY_START = 6 * 60
    NIGHT_START = 20 * 60

    @pytest.mark.parametrize("hours, minutes, expected", [
        (6, 0, True),       # day starts
        (12, 0, True),
        (19, 59, True),     # last daytime minute
        (20, 0, False),     # night starts
        (5, 59, False),
        (0, 0, False),
    ])
    def test_boundaries(self, hours, minutes, expected):
        span = TimeSpan(0, hours, minutes)
        assert span.is_daytime(self.DAY_START, self.NIGHT_START) is expected
        assert span.is_night(self.DAY_START, self.NIGHT_START) is not expected

    def test_uses_time_of_day_on_later_days(self):
        assert TimeSpan(3, 12, 0).is_daytime(self.DAY_START, self.NIGHT_START)

    def test_accepts_time_span_bounds(self):
        assert TimeSpan(0, 7, 0).is_daytime(TimeSpan(0, 6, 0), TimeSpan(0, 20, 0))


class TestSetForwardTo:
    def test_rolls_past_midnight(self):
        span = TimeSpan(0, 22, 0)
        span.set_forward_to(TimeSpan(0, 8, 0))
        assert span.get_days() == 1
        assert str(span) == "08:00"

    def test_same_day(self):
        span = TimeSpan(0, 22, 0)
        span.set_forward_to(TimeSpan(0, 23, 0))
        assert span.get_days() == 0
        assert str(span) == "23:00"

    def test_same_time_is_no_change(self):
        span = TimeSpan(2, 8, 0)
        total = span.get_total_minutes()
        assert span.set_forward_to(TimeSpan(0, 8, 0)) == total

    def test_ignores_target_day(self):
        span = TimeSpan(0, 6, 0)
        span.set_forward_to(TimeSpan(5, 7, 0))
        assert span.get_total_minutes() == 7 * 60

    def test_never_moves_backward(self):
        for target in range(0, MINUTES_PER_DAY, 97):
            span = TimeSpan(1, 13, 17)
            before = span.get_total_minutes()
            span.set_forward_to(target)
            assert before <= span.get_total_minutes() < before + MINUTES_PER_DAY


class TestArithmetic:
    def test_add_mutates_and_returns_total(self):
        span = TimeSpan(0, 1, 0)
        assert span.add(TimeSpan(0, 0, 30)) == 90
        assert span.get_total_minutes() == 90

    def test_add_accepts_minutes(self):
        span = TimeSpan()
        span.add(15)
        span.add_minutes(5)
        assert span.get_total_minutes() == 20

    def test_plus_returns_new_span(self):
        span = TimeSpan(0, 1, 0)
        result = span.plus(30)
        assert isinstance(result, TimeSpan)
        assert result.get_total_minutes() == 90
        assert span.get_total_minutes() == 60

    def test_minus_returns_new_span(self):
        span = TimeSpan(0, 1, 0)
        result = span.minus(TimeSpan(0, 0, 15))
        assert isinstance(result, TimeSpan)
        assert result.get_total_minutes() == 45
        assert span.get_total_minutes() == 60

    def test_operators(self):
        assert (TimeSpan(0, 1, 0) + 5).get_total_minutes() == 65
        assert (5 + TimeSpan(0, 1, 0)).get_total_minutes() == 65
        assert (TimeSpan(0, 1, 0) - TimeSpan(0, 0, 5)).get_total_minutes() == 55

    def test_comparison_with_ints_and_spans(self):
        assert TimeSpan(0, 1, 0) == 60
        assert TimeSpan(0, 1, 0) == TimeSpan.from_minutes(60)
        assert TimeSpan(0, 1, 0) < TimeSpan(0, 1, 1)
        assert TimeSpan(0, 2, 0) > 60
        assert int(TimeSpan(1)) == 1440

    def test_copy_is_independent(self):
        span = TimeSpan(0, 5, 0)
        other = span.copy()
        other.add_minutes(10)
        assert span.get_total_minutes() == 300

    def test_set_total_minutes(self):
        span = TimeSpan(4)
        assert span.set_total_minutes(12) == 12


class TestFormatting:
    @pytest.mark.parametrize("minutes, expected", [
        (0, "00:00"),
        (425, "07:05"),
        (1145, "19:05"),
        (1440 + 61, "01:01"),
    ])
    def test_str(self, minutes, expected):
        assert str(TimeSpan.from_minutes(minutes)) == expected

    def test_format_time(self):
        assert format_time(1440 + 510) == "Day 1 (08:30)"
        assert format_time(TimeSpan(0, 8, 0)) == "Day 0 (08:00)"
