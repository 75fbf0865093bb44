# notes/diagnostics.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from notes.model import NoteKind

class DiagnosticKind(str, Enum):
    OVERLAPPING_START = "overlapping start"
    UNPAIRED_STOP = "unpaired stop"
    DANGLING_START = "dangling start"
    NEGATIVE_DURATION = "negative duration"
    INSTANT_NONZERO_DURATION = "instantaneous note has nonzero duration"
    SLIDE_ZERO_DURATION = "slide note has zero duration"
    SLIDE_DISCONTINUITY = "slide discontinuity"
    SLIDE_END_WITHOUT_CHAIN = "slide end without open chain"
    DANGLING_SLIDE = "dangling slide"

@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    time: Optional[int] = None        # ticks
    lane: Optional[int] = None
    note_kind: Optional[NoteKind] = None

    def to_dict(self) -> dict:
        out = {"kind": self.kind.value, "message": self.message}
        if self.time is not None:
            out["time"] = self.time
        if self.lane is not None:
            out["lane"] = self.lane
        if self.note_kind is not None:
            out["noteKind"] = str(self.note_kind)
        return out

class DiagnosticLog:
    """Collects diagnostics for one stage and mirrors them to a logger."""
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.items: List[Diagnostic] = []

    def report(self, kind: DiagnosticKind, message: str, time: Optional[int] = None,
               lane: Optional[int] = None, note_kind: Optional[NoteKind] = None) -> Diagnostic:
        d = Diagnostic(kind=kind, message=message, time=time, lane=lane, note_kind=note_kind)
        self.items.append(d)
        self.logger.warning("%s: %s", kind.value, message)
        return d
