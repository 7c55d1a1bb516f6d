"""Map note tags — <DayNight: step>, <DayNight: step=15m>, <Lighting: keyword>."""
from __future__ import annotations

import re
from dataclasses import dataclass

from daynight.mechanics.parsing import parse_duration

_DAYNIGHT_TAG_RE = re.compile(r"<\s*DayNight\s*:\s*step\s*(?:=\s*([^>]*?))?\s*>", re.IGNORECASE)
_LIGHTING_TAG_RE = re.compile(r"<\s*Lighting\s*:\s*([^>]*?)\s*>", re.IGNORECASE)


@dataclass
class MapNoteSettings:
    lighting_keyword: str | None = None
    minutes_per_step: int = 0


def parse_map_note(note: str, default_minutes_per_step: int = 0) -> MapNoteSettings:
    """Read day-night tags out of a map's note box.

    A bare step tag uses *default_minutes_per_step*; a step tag with a
    duration (``step=15m``) uses that duration instead. Maps without a step
    tag do not advance time as the party walks.
    """
    result = MapNoteSettings()

    step = _DAYNIGHT_TAG_RE.search(note)
    if step:
        if step.group(1):
            result.minutes_per_step = parse_duration(step.group(1)).get_total_minutes()
        else:
            result.minutes_per_step = default_minutes_per_step

    lighting = _LIGHTING_TAG_RE.search(note)
    if lighting and lighting.group(1):
        result.lighting_keyword = lighting.group(1).lower()

    return result
