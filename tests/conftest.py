"""Shared fixtures for the day-night test suite."""
from __future__ import annotations

import pytest

from daynight.engine.clock import DayNightClock
from daynight.engine.switches import GameSwitches, GameVariables, VariableSlot
from daynight.models.settings import DayNightSettings

TIME_VAR = 1
DAYTIME_SWITCH = 1
NIGHT_SWITCH = 2
DAYS_VAR = 2
HOUR_VAR = 3
MINUTE_VAR = 4


@pytest.fixture
def settings() -> DayNightSettings:
    return DayNightSettings(
        current_time_variable=TIME_VAR,
        daytime_switch=DAYTIME_SWITCH,
        night_switch=NIGHT_SWITCH,
        days_variable=DAYS_VAR,
        hour_variable=HOUR_VAR,
        minute_variable=MINUTE_VAR,
    )


@pytest.fixture
def switches() -> GameSwitches:
    return GameSwitches()


@pytest.fixture
def variables() -> GameVariables:
    return GameVariables()


@pytest.fixture
def clock(settings, switches, variables) -> DayNightClock:
    handle = switches.reserve(settings.daytime_switch, settings.night_switch)
    slot = VariableSlot(variables, settings.current_time_variable)
    return DayNightClock(settings, slot, handle, variables)


@pytest.fixture
def config_file(tmp_path):
    """Write a minimal config.toml and return its path."""
    path = tmp_path / "config.toml"
    path.write_text(
        "[daynight]\n"
        "current_time_variable = 1\n"
        "daytime_switch = 1\n"
        "night_switch = 2\n"
        'new_game_start_time = "8:00 AM"\n'
        "\n"
        "[[daynight.lighting_presets]]\n"
        'keyword = "Fire"\n'
        'tone = "(-16, -70, -100, 100)"\n'
    )
    return path
