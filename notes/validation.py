# notes/validation.py
from typing import Optional

from notes.diagnostics import Diagnostic, DiagnosticKind
from notes.model import Category, Note

def validate_note(note: Note) -> Optional[Diagnostic]:
    """Return None when the note is well formed, otherwise the reason it is rejected.

    Taps and flicks are instantaneous. A slide start spans the slide body so it
    must last. Slide ends only mark where the slide lands and are not checked here.
    """
    where = dict(time=note.start_time, lane=note.lane, note_kind=note.kind)
    if note.duration < 0:
        return Diagnostic(DiagnosticKind.NEGATIVE_DURATION,
                          f"negative duration {note.duration} on lane {note.lane} and type {note.kind} "
                          f"at time {note.end_time}, discarding note", **where)
    if note.kind.is_instant and note.duration != 0:
        return Diagnostic(DiagnosticKind.INSTANT_NONZERO_DURATION,
                          f"{note.kind} note on lane {note.lane} at time {note.start_time} "
                          f"has duration {note.duration}, discarding note", **where)
    if note.kind.category is Category.SLIDE_START and note.duration == 0:
        return Diagnostic(DiagnosticKind.SLIDE_ZERO_DURATION,
                          f"{note.kind} note on lane {note.lane} at time {note.start_time} "
                          f"has duration 0, discarding note", **where)
    return None
