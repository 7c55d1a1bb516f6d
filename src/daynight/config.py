"""Load day-night settings from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from daynight.mechanics.parsing import ParseError, parse_time_of_day, parse_tone, parse_tone_list
from daynight.models.settings import DayNightSettings, normalize_keyword

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"

_TIME_KEYS = (
    "new_game_start_time",
    "dawn_start_time",
    "day_start_time",
    "dusk_start_time",
    "night_start_time",
)
_TONE_KEYS = ("daylight_tone", "night_tone", "default_tone")
_TONE_LIST_KEYS = ("dawn_tone_phases", "dusk_tone_phases")
_PLAIN_KEYS = (
    "current_time_variable",
    "daytime_switch",
    "night_switch",
    "days_variable",
    "hour_variable",
    "minute_variable",
    "outdoor_lighting_keyword",
    "minutes_per_step",
    "minutes_per_tone_phase",
    "tone_fade_duration",
    "default_lighting_keyword",
)


class ConfigError(ValueError):
    """The day-night configuration is missing or invalid."""


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Read a TOML config file. A missing file gives an empty config."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults.", config_path)
        return {}
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_settings(config: dict[str, Any]) -> DayNightSettings:
    """Parse the [daynight] table into validated settings."""
    section = config.get("daynight", {})
    if not section.get("current_time_variable"):
        raise ConfigError(
            "daynight.current_time_variable is not set, so the day-night cycle "
            "cannot track time. Set it to a valid variable id."
        )

    values: dict[str, Any] = {k: section[k] for k in _PLAIN_KEYS if k in section}
    try:
        for key in _TIME_KEYS:
            if key in section:
                values[key] = parse_time_of_day(str(section[key])).get_minutes_of_day()
        for key in _TONE_KEYS:
            if key in section:
                values[key] = parse_tone(str(section[key]))
        for key in _TONE_LIST_KEYS:
            if key in section:
                values[key] = parse_tone_list(str(section[key]))
        if "lighting_presets" in section:
            values["lighting_presets"] = _load_presets(section["lighting_presets"])
    except ParseError as exc:
        raise ConfigError(f"Invalid day-night setting: {exc}") from exc

    try:
        return DayNightSettings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid day-night settings: {exc}") from exc


def _load_presets(entries: list[dict[str, Any]]) -> dict[str, Any]:
    presets = {}
    for i, entry in enumerate(entries, 1):
        raw = entry.get("keyword")
        if raw is not None and not isinstance(raw, str):
            raise ConfigError(f"Lighting preset {i}: keyword must be text, got {raw!r}")
        keyword = normalize_keyword(raw)
        if not keyword:
            logger.debug("Skipping lighting preset %d: no keyword.", i)
            continue
        presets[keyword] = parse_tone(str(entry.get("tone", "")))
    return presets
