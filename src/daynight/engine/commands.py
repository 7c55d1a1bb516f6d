"""Plugin commands — 'set 7:05 AM', 'add 2h 30m', 'reset', 'lighting Fire'."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from daynight.mechanics.parsing import parse_duration, parse_time_of_day

if TYPE_CHECKING:
    from daynight.engine.clock import DayNightClock
    from daynight.engine.game_map import GameMap

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "daynight"


class DayNightCommands:
    def __init__(self, clock: DayNightClock, game_map: GameMap | None = None) -> None:
        self.clock = clock
        self.game_map = game_map
        self._handlers = {
            "set": self._set,
            "add": self._add,
            "reset": self._reset,
            "lighting": self._lighting,
        }

    def run(self, command: str) -> None:
        """Run one command line. A leading 'DayNight' is optional."""
        words = command.strip().split(None, 1)
        if words and words[0].lower() == COMMAND_PREFIX:
            words = words[1].split(None, 1) if len(words) > 1 else []
        if not words:
            raise ValueError("Empty day-night command")

        name = words[0].lower()
        args = words[1] if len(words) > 1 else ""
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown day-night command: {name}")
        logger.debug("Command %s %r", name, args)
        handler(args)

    def _set(self, args: str) -> None:
        # Time only moves forward: an earlier time of day lands tomorrow.
        self.clock.set_time_of_day(parse_time_of_day(args))

    def _add(self, args: str) -> None:
        self.clock.advance(parse_duration(args))

    def _reset(self, args: str) -> None:
        self.clock.reset()

    def _lighting(self, args: str) -> None:
        if self.game_map is None:
            raise ValueError("No map to apply lighting to")
        self.game_map.apply_lighting_preset(args.strip(), self.clock.settings.tone_fade_duration)
