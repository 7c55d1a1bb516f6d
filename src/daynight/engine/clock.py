"""Day-night clock — owns the in-universe time and keeps switches/variables in sync."""
from __future__ import annotations

import logging
from typing import Callable

from daynight.engine.switches import GameVariables, ReservedSwitchHandle, TimeSlot
from daynight.mechanics.time_span import SpanLike, TimeSpan
from daynight.models.settings import DayNightSettings

logger = logging.getLogger(__name__)

TimeListener = Callable[[TimeSpan], None]


class DayNightClock:
    """The single writer of the current time.

    The total minute count lives in an external slot so it is saved with the
    game. Every change rewrites the daytime/night switches and the
    days/hour/minute variables, then notifies listeners, before returning.
    """

    def __init__(
        self,
        settings: DayNightSettings,
        slot: TimeSlot,
        switches: ReservedSwitchHandle,
        variables: GameVariables,
        listeners: list[TimeListener] | None = None,
    ) -> None:
        self.settings = settings
        self._slot = slot
        self._switches = switches
        self._variables = variables
        self._listeners: list[TimeListener] = list(listeners or [])

    def add_listener(self, listener: TimeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TimeListener) -> None:
        self._listeners.remove(listener)

    # -- Reading --

    def now(self) -> TimeSpan:
        """A copy of the current time; changing it does not move the clock."""
        return TimeSpan.from_minutes(self._slot.get())

    def get_minutes(self) -> int:
        return self.now().get_minutes()

    def get_hours(self) -> int:
        return self.now().get_hours()

    def get_days(self) -> int:
        return self.now().get_days()

    def get_total_hours(self) -> int:
        return self.now().get_total_hours()

    def get_total_minutes(self) -> int:
        return self._slot.get()

    def get_minutes_of_day(self) -> int:
        return self.now().get_minutes_of_day()

    def is_daytime(self) -> bool:
        return self.now().is_daytime(
            self.settings.day_start_time, self.settings.night_start_time
        )

    def is_night(self) -> bool:
        return not self.is_daytime()

    # -- Changing --

    def set_to(self, instant: SpanLike) -> None:
        """Replace the current time, sync, then notify listeners."""
        minutes = int(instant)
        previous = self._slot.get()
        self._slot.set(minutes)
        self.sync()
        logger.debug("Time changed: %d -> %d (%s)", previous, minutes, self.now())
        self._notify()

    def advance(self, duration: SpanLike) -> None:
        self.set_to(self.now().plus(duration))

    def set_time_of_day(self, time_of_day: SpanLike) -> None:
        """Move forward to the next occurrence of a time of day."""
        target = self.now()
        target.set_forward_to(time_of_day)
        self.set_to(target)

    def reset(self) -> None:
        """Back to day 0, at the new-game start time."""
        self.set_to(0)
        self.set_time_of_day(self.settings.new_game_start_time)

    def sync(self) -> None:
        """Write time-derived switches and variables."""
        now = self.now()
        is_day = now.is_daytime(
            self.settings.day_start_time, self.settings.night_start_time
        )
        with self._switches.guarded():
            self._switches.set_value(self.settings.daytime_switch, is_day)
            self._switches.set_value(self.settings.night_switch, not is_day)
            self._variables.set_value(self.settings.days_variable, now.get_days())
            self._variables.set_value(self.settings.hour_variable, now.get_hours())
            self._variables.set_value(self.settings.minute_variable, now.get_minutes())

    def _notify(self) -> None:
        now = self.now()
        for listener in list(self._listeners):
            listener(now)
