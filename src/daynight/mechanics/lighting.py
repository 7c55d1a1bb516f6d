"""Lighting — pick the screen tone for a lighting keyword at a given time."""
from __future__ import annotations

from daynight.mechanics.time_span import SpanLike, TimeSpan
from daynight.models.settings import DayNightSettings, normalize_keyword
from daynight.models.tone import Tone


def get_phase(instant: SpanLike, settings: DayNightSettings) -> tuple[str, int]:
    """Return (phase name, phase index) for the instant's time of day.

    The index is the step within the dawn or dusk tone sequence, 0 otherwise.
    An empty tone sequence never enters its window.
    """
    span = instant if isinstance(instant, TimeSpan) else TimeSpan.from_minutes(instant)
    t = span.get_minutes_of_day()
    per_phase = settings.minutes_per_tone_phase

    if t < settings.dawn_start_time:
        return "night", 0
    if t < settings.dawn_end_time:
        return "dawn", (t - settings.dawn_start_time) // per_phase
    if t < settings.dusk_start_time:
        return "day", 0
    if t < settings.dusk_end_time:
        return "dusk", (t - settings.dusk_start_time) // per_phase
    return "night", 0


def get_outside_tone(instant: SpanLike, settings: DayNightSettings) -> Tone:
    """Tone for an outdoor area: night, dawn phases, daylight, dusk phases, night."""
    phase, index = get_phase(instant, settings)
    if phase == "dawn":
        return settings.dawn_tone_phases[index]
    if phase == "dusk":
        return settings.dusk_tone_phases[index]
    if phase == "day":
        return settings.daylight_tone
    return settings.night_tone


def is_outdoor_keyword(keyword: str | None, settings: DayNightSettings) -> bool:
    normalized = normalize_keyword(keyword)
    return bool(normalized) and normalized == settings.outdoor_lighting_keyword


def resolve_tone(keyword: str | None, instant: SpanLike, settings: DayNightSettings) -> Tone:
    """Tone to show for *keyword* at *instant*.

    The outdoor keyword follows the time of day; any other keyword is looked
    up in the lighting presets. Blank and unknown keywords get the default
    tone.
    """
    normalized = normalize_keyword(keyword)
    if not normalized:
        return settings.default_tone
    if normalized == settings.outdoor_lighting_keyword:
        return get_outside_tone(instant, settings)
    return settings.lighting_presets.get(normalized, settings.default_tone)
