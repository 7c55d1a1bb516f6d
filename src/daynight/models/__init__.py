from __future__ import annotations

from daynight.models.settings import DayNightSettings, normalize_keyword
from daynight.models.tone import NEUTRAL_TONE, Tone

__all__ = [
    "DayNightSettings",
    "NEUTRAL_TONE",
    "Tone",
    "normalize_keyword",
]
