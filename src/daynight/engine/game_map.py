"""Map-side lighting: applies tones to the screen as the clock moves."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from daynight.mechanics.lighting import is_outdoor_keyword, resolve_tone
from daynight.mechanics.notetags import parse_map_note
from daynight.mechanics.time_span import TimeSpan
from daynight.models.tone import NEUTRAL_TONE, Tone

if TYPE_CHECKING:
    from daynight.engine.clock import DayNightClock

logger = logging.getLogger(__name__)


class Screen:
    """Receives tint requests. The fade itself is the renderer's job."""

    def __init__(self) -> None:
        self.tone: Tone = NEUTRAL_TONE
        self.fade_duration = 0
        self.tint_count = 0

    def start_tint(self, tone: Tone, duration: int) -> None:
        self.tone = tone
        self.fade_duration = duration
        self.tint_count += 1


class GameMap:
    def __init__(self, clock: DayNightClock, screen: Screen | None = None) -> None:
        self.clock = clock
        self.settings = clock.settings
        self.screen = screen or Screen()
        self.lighting_type: str | None = None
        self.is_outside = False
        self.map_tone: Tone = self.settings.default_tone
        self.minutes_per_step = 0

    def setup(self, note: str = "") -> None:
        """Apply a newly entered map's note tags."""
        tags = parse_map_note(note, self.settings.minutes_per_step)
        self.minutes_per_step = tags.minutes_per_step
        keyword = tags.lighting_keyword or self.settings.default_lighting_keyword
        self.apply_lighting_preset(keyword)

    def apply_lighting_preset(self, keyword: str | None, duration: int = 0) -> None:
        self.lighting_type = keyword
        self.is_outside = is_outdoor_keyword(keyword, self.settings)
        self.map_tone = resolve_tone(keyword, self.clock.now(), self.settings)
        logger.debug("Lighting %r -> %s", keyword, self.map_tone)
        self.screen.start_tint(self.map_tone, duration)

    def on_time_changed(self, now: TimeSpan) -> None:
        """Fade to the new outdoor tone when the time of day calls for one."""
        if not self.is_outside:
            return
        tone = resolve_tone(self.lighting_type, now, self.settings)
        if tone != self.map_tone:
            self.map_tone = tone
            logger.debug("Outdoor tone at %s -> %s", now, tone)
            self.screen.start_tint(tone, self.settings.tone_fade_duration)


class Party:
    """Counts steps; walking on a stepping map moves the clock forward."""

    def __init__(self, clock: DayNightClock, game_map: GameMap) -> None:
        self.clock = clock
        self.game_map = game_map
        self.steps = 0

    def increase_steps(self) -> None:
        self.steps += 1
        if self.game_map.minutes_per_step > 0:
            self.clock.advance(self.game_map.minutes_per_step)
