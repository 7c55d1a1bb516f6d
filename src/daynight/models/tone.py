from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Tone(BaseModel):
    """Screen tint: red, green and blue offsets plus a gray (desaturation) level."""

    model_config = ConfigDict(frozen=True)

    red: int = 0
    green: int = 0
    blue: int = 0
    gray: int = 0

    @classmethod
    def of(cls, red: int, green: int, blue: int, gray: int = 0) -> Tone:
        return cls(red=red, green=green, blue=blue, gray=gray)

    def as_list(self) -> list[int]:
        return [self.red, self.green, self.blue, self.gray]

    def __str__(self) -> str:
        return f"({self.red}, {self.green}, {self.blue}, {self.gray})"


NEUTRAL_TONE = Tone()
