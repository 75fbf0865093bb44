# chart/commands.py
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from notes.model import Side

Number = Union[int, float]

def json_number(value) -> Number:
    """Integral values serialise as ints (1, not 1.0)."""
    if isinstance(value, Fraction):
        return value.numerator if value.denominator == 1 else float(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

@dataclass(frozen=True)
class TempoCommand:
    bpm: Number
    beat: Number = 0

    def to_dict(self) -> dict:
        return {"type": "System", "cmd": "BPM", "beat": json_number(self.beat), "bpm": json_number(self.bpm)}

@dataclass(frozen=True)
class SingleNote:
    lane: int
    beat: Fraction
    flick: bool = False

    def to_dict(self) -> dict:
        out = {"type": "Note", "note": "Single", "lane": self.lane, "beat": json_number(self.beat)}
        if self.flick:
            out["flick"] = True
        return out

@dataclass(frozen=True)
class SlideNote:
    lane: int
    beat: Fraction
    side: Side
    is_start: bool = False
    is_end: bool = False
    flick: bool = False

    def __post_init__(self):
        if self.is_start and self.is_end:
            raise ValueError("slide note cannot both start and end a slide")

    def to_dict(self) -> dict:
        out = {"type": "Note", "note": "Slide", "lane": self.lane,
               "beat": json_number(self.beat), "pos": self.side.value}
        if self.is_start:
            out["start"] = True
        if self.is_end:
            out["end"] = True
        if self.flick:
            out["flick"] = True
        return out

ChartCommand = Union[TempoCommand, SingleNote, SlideNote]
