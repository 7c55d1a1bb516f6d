"""Text parsers for clock times, durations and screen tones — pure, no I/O."""
from __future__ import annotations

import re

from daynight.mechanics.time_span import TimeSpan
from daynight.models.tone import Tone

# Pattern: H:MM or HH:MM, optional space, optional a/am/p/pm
_TIME_OF_DAY_RE = re.compile(r"(\d{1,2}):(\d{2}) ?(?:([ap])m?)?", re.IGNORECASE)

_DAYS_RE = re.compile(r"(\d+) ?d", re.IGNORECASE)
_HOURS_RE = re.compile(r"(\d+) ?h", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+) ?m", re.IGNORECASE)

# Pattern: r, g, b, gray, separated by any run of commas and spaces
_TONE_RE = re.compile(r"(-?\d+)[, ]+(-?\d+)[, ]+(-?\d+)[, ]+(-?\d+)")
_TONE_GROUP_RE = re.compile(r"[(\[{]([\-\d, ]+)[)\]}]")


class ParseError(ValueError):
    """Raised when clock, duration or tone text cannot be understood."""


def parse_time_of_day(text: str) -> TimeSpan:
    """Parse '7:05 AM', '7:05pm' or '19:05' into a day-0 time of day."""
    m = _TIME_OF_DAY_RE.search(text)
    if not m:
        raise ParseError(f"Invalid time-of-day string: {text!r}")

    hours = int(m.group(1))
    minutes = int(m.group(2))
    marker = m.group(3)
    if marker:
        if marker.lower() == "p":
            if hours != 12:
                hours += 12  # 7:15 PM -> 19:15
        elif hours == 12:
            hours = 0  # 12:xx AM -> 00:xx
    return TimeSpan(0, hours, minutes)


def parse_duration(text: str) -> TimeSpan:
    """Parse a duration like '2h 30m', '1d' or '45m'.

    Each unit is looked for independently, in any order; missing units are 0.
    """
    days = _first_int(_DAYS_RE, text)
    hours = _first_int(_HOURS_RE, text)
    minutes = _first_int(_MINUTES_RE, text)
    return TimeSpan(days, hours, minutes)


def _first_int(pattern: re.Pattern, text: str) -> int:
    m = pattern.search(text)
    return int(m.group(1)) if m else 0


def parse_tone(text: str) -> Tone:
    """Parse '(-68, -68, -14, 41)' into a Tone."""
    m = _TONE_RE.search(text)
    if not m:
        raise ParseError(f"Tone parse error: {text!r}")
    red, green, blue, gray = (int(g) for g in m.groups())
    return Tone(red=red, green=green, blue=blue, gray=gray)


def parse_tone_list(text: str) -> tuple[Tone, ...]:
    """Parse every bracketed tone in *text*, left to right.

    Parentheses, square brackets and curly braces are all accepted. Text
    without any bracketed group yields an empty tuple.
    """
    return tuple(parse_tone(m.group(0)) for m in _TONE_GROUP_RE.finditer(text))
