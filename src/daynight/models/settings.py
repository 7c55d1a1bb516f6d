from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from daynight.mechanics.time_span import MINUTES_PER_DAY
from daynight.models.tone import NEUTRAL_TONE, Tone

DEFAULT_DAWN_TONE_PHASES = (
    Tone.of(-68, -68, -14, 41),
    Tone.of(-68, -68, -27, 14),
    Tone.of(-54, -54, -27, 0),
    Tone.of(-27, -27, -14, 0),
)
DEFAULT_DUSK_TONE_PHASES = (
    Tone.of(27, -14, -14, 0),
    Tone.of(54, -27, -27, 0),
    Tone.of(41, -41, -27, 14),
    Tone.of(-14, -54, -14, 41),
)
DEFAULT_DAYLIGHT_TONE = Tone.of(0, 0, 0, 0)
DEFAULT_NIGHT_TONE = Tone.of(-68, -68, 0, 68)

DEFAULT_LIGHTING_PRESETS: dict[str, Tone] = {
    "bright": Tone.of(0, 0, 0, 0),
    "fire": Tone.of(-16, -70, -100, 100),
    "blue": Tone.of(-68, -68, 0, 68),
    "dark": Tone.of(-68, -68, -68, 0),
    "verydark": Tone.of(-100, -100, -100, 100),
    "black": Tone.of(-100, -100, -100, 100),
    "gold": Tone.of(34, 0, -90, 100),
    "swamp": Tone.of(-34, 0, -68, 100),
}


def normalize_keyword(keyword: str | None) -> str:
    return (keyword or "").strip().lower()


class DayNightSettings(BaseModel):
    """Everything the clock and tone resolver need, built once at startup.

    Times are minute-of-day values (0-1439). Switch and variable ids of 0
    mean "not configured", except the current time variable, which is
    required.
    """

    model_config = ConfigDict(frozen=True)

    # Data
    current_time_variable: int = Field(gt=0)
    daytime_switch: int = Field(default=0, ge=0)
    night_switch: int = Field(default=0, ge=0)
    days_variable: int = Field(default=0, ge=0)
    hour_variable: int = Field(default=0, ge=0)
    minute_variable: int = Field(default=0, ge=0)
    outdoor_lighting_keyword: str = "outside"

    # Timing
    new_game_start_time: int = Field(default=8 * 60, ge=0, lt=MINUTES_PER_DAY)
    dawn_start_time: int = Field(default=6 * 60, ge=0, lt=MINUTES_PER_DAY)
    day_start_time: int = Field(default=6 * 60, ge=0, lt=MINUTES_PER_DAY)
    dusk_start_time: int = Field(default=18 * 60, ge=0, lt=MINUTES_PER_DAY)
    night_start_time: int = Field(default=20 * 60, ge=0, lt=MINUTES_PER_DAY)
    minutes_per_step: int = Field(default=5, ge=0)
    minutes_per_tone_phase: int = Field(default=30, gt=0)
    tone_fade_duration: int = Field(default=60, ge=0)

    # Tones
    dawn_tone_phases: tuple[Tone, ...] = DEFAULT_DAWN_TONE_PHASES
    daylight_tone: Tone = DEFAULT_DAYLIGHT_TONE
    dusk_tone_phases: tuple[Tone, ...] = DEFAULT_DUSK_TONE_PHASES
    night_tone: Tone = DEFAULT_NIGHT_TONE
    default_tone: Tone = NEUTRAL_TONE

    # Simple lighting presets
    default_lighting_keyword: str = "outside"
    lighting_presets: Mapping[str, Tone] = Field(
        default_factory=lambda: dict(DEFAULT_LIGHTING_PRESETS), validate_default=True
    )

    @field_validator("outdoor_lighting_keyword", "default_lighting_keyword")
    @classmethod
    def _lowercase_keyword(cls, value: str) -> str:
        return normalize_keyword(value)

    @field_validator("lighting_presets")
    @classmethod
    def _lowercase_preset_keys(cls, value: Mapping[str, Tone]) -> Mapping[str, Tone]:
        presets = {normalize_keyword(k): v for k, v in value.items() if normalize_keyword(k)}
        return MappingProxyType(presets)

    @model_validator(mode="after")
    def _distinct_slots(self) -> DayNightSettings:
        if self.daytime_switch and self.daytime_switch == self.night_switch:
            raise ValueError(
                f"daytime_switch and night_switch must differ (both {self.daytime_switch})"
            )
        seen = {self.current_time_variable: "current_time_variable"}
        for name in ("days_variable", "hour_variable", "minute_variable"):
            variable_id = getattr(self, name)
            if not variable_id:
                continue
            if variable_id in seen:
                raise ValueError(
                    f"{name} reuses variable {variable_id}, already used by {seen[variable_id]}"
                )
            seen[variable_id] = name
        return self

    @property
    def dawn_end_time(self) -> int:
        return self.dawn_start_time + self.minutes_per_tone_phase * len(self.dawn_tone_phases)

    @property
    def dusk_end_time(self) -> int:
        return self.dusk_start_time + self.minutes_per_tone_phase * len(self.dusk_tone_phases)
