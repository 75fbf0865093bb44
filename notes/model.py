# notes/model.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

class Side(str, Enum):
    A = "A"
    B = "B"

class Category(str, Enum):
    TAP = "tap"
    FLICK = "flick"
    SLIDE_START = "slide"
    SLIDE_TAP_END = "slideTap"
    SLIDE_FLICK_END = "slideFlick"

SLIDE_CATEGORIES = frozenset({Category.SLIDE_START, Category.SLIDE_TAP_END, Category.SLIDE_FLICK_END})

@dataclass(frozen=True)
class NoteKind:
    """What a note does in the chart. Slide kinds always carry a side."""
    category: Category
    side: Optional[Side] = None

    def __post_init__(self):
        if (self.category in SLIDE_CATEGORIES) != (self.side is not None):
            raise ValueError(f"{self.category.value} kind needs side={self.category in SLIDE_CATEGORIES}")

    @classmethod
    def tap(cls) -> "NoteKind":
        return cls(Category.TAP)

    @classmethod
    def flick(cls) -> "NoteKind":
        return cls(Category.FLICK)

    @classmethod
    def slide_start(cls, side: Side) -> "NoteKind":
        return cls(Category.SLIDE_START, side)

    @classmethod
    def slide_tap_end(cls, side: Side) -> "NoteKind":
        return cls(Category.SLIDE_TAP_END, side)

    @classmethod
    def slide_flick_end(cls, side: Side) -> "NoteKind":
        return cls(Category.SLIDE_FLICK_END, side)

    @property
    def is_slide(self) -> bool:
        return self.category in SLIDE_CATEGORIES

    @property
    def is_instant(self) -> bool:
        return self.category in (Category.TAP, Category.FLICK)

    @property
    def is_slide_end(self) -> bool:
        return self.category in (Category.SLIDE_TAP_END, Category.SLIDE_FLICK_END)

    def __str__(self) -> str:
        if self.side is None:
            return self.category.value
        return f"{self.category.value}/{self.side.value}"

@dataclass(frozen=True)
class RawEvent:
    tick_delta: int  # ticks since previous event
    is_start: bool
    channel: int
    pitch: int

@dataclass(frozen=True)
class Note:
    kind: NoteKind
    lane: int        # 1..7
    start_time: int  # ticks
    end_time: int    # ticks

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time
