from __future__ import annotations

from daynight.engine.clock import DayNightClock
from daynight.engine.commands import DayNightCommands
from daynight.engine.game_map import GameMap, Party, Screen
from daynight.engine.switches import (
    GameSwitches,
    GameVariables,
    PolicyViolation,
    ReservedSwitchHandle,
    VariableSlot,
)

__all__ = [
    "DayNightClock",
    "DayNightCommands",
    "GameMap",
    "GameSwitches",
    "GameVariables",
    "Party",
    "PolicyViolation",
    "ReservedSwitchHandle",
    "Screen",
    "VariableSlot",
]
