"""Application bootstrap — wires the clock, switches and map together."""
from __future__ import annotations

import logging
from pathlib import Path

from daynight.config import load_config, load_settings
from daynight.models.settings import DayNightSettings

logger = logging.getLogger(__name__)


class DayNightApp:
    """Owns one game's day-night state and its collaborators."""

    def __init__(
        self,
        settings: DayNightSettings | None = None,
        config_path: str | Path | None = None,
    ):
        self.settings = settings or load_settings(load_config(config_path))

        # Lazy-initialized components
        self._switches = None
        self._variables = None
        self._clock = None
        self._game_map = None
        self._party = None
        self._commands = None

    # -- Component initialization (lazy) --

    @property
    def switches(self):
        if self._switches is None:
            from daynight.engine.switches import GameSwitches

            self._switches = GameSwitches()
        return self._switches

    @property
    def variables(self):
        if self._variables is None:
            from daynight.engine.switches import GameVariables

            self._variables = GameVariables()
        return self._variables

    @property
    def clock(self):
        if self._clock is None:
            from daynight.engine.clock import DayNightClock
            from daynight.engine.switches import VariableSlot

            handle = self.switches.reserve(
                self.settings.daytime_switch, self.settings.night_switch
            )
            slot = VariableSlot(self.variables, self.settings.current_time_variable)
            self._clock = DayNightClock(self.settings, slot, handle, self.variables)
        return self._clock

    @property
    def game_map(self):
        if self._game_map is None:
            from daynight.engine.game_map import GameMap

            self._game_map = GameMap(self.clock)
            self.clock.add_listener(self._game_map.on_time_changed)
        return self._game_map

    @property
    def party(self):
        if self._party is None:
            from daynight.engine.game_map import Party

            self._party = Party(self.clock, self.game_map)
        return self._party

    @property
    def commands(self):
        if self._commands is None:
            from daynight.engine.commands import DayNightCommands

            self._commands = DayNightCommands(self.clock, self.game_map)
        return self._commands

    # -- Game lifecycle --

    def new_game(self) -> None:
        """Start a new game at the configured start time on day 0."""
        self.clock.reset()
        logger.info("New game started at %s.", self.clock.now())

    def load_game(self, total_minutes: int) -> None:
        """Restore a saved clock value and refresh everything derived from it."""
        self.clock.set_to(total_minutes)

    def enter_map(self, note: str = "") -> None:
        self.game_map.setup(note)
