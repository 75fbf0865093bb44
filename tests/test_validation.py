import pytest

from notes.diagnostics import DiagnosticKind
from notes.model import Note
from notes.validation import validate_note

from helpers import FLICK, FLICK_END_A, SLIDE_B, TAP, TAP_END_A


@pytest.mark.parametrize("kind,start,end,expected", [
    (TAP, 4, 4, None),
    (FLICK, 4, 4, None),
    (TAP, 4, 5, DiagnosticKind.INSTANT_NONZERO_DURATION),
    (FLICK, 0, 2, DiagnosticKind.INSTANT_NONZERO_DURATION),
    (SLIDE_B, 0, 4, None),
    (SLIDE_B, 4, 4, DiagnosticKind.SLIDE_ZERO_DURATION),
    (TAP_END_A, 8, 8, None),
    (FLICK_END_A, 8, 10, None),
    (SLIDE_B, 8, 4, DiagnosticKind.NEGATIVE_DURATION),
    (TAP, 8, 4, DiagnosticKind.NEGATIVE_DURATION),
])
def test_validate_note(kind, start, end, expected):
    d = validate_note(Note(kind=kind, lane=2, start_time=start, end_time=end))
    if expected is None:
        assert d is None
    else:
        assert d.kind == expected
        assert d.lane == 2
        assert d.note_kind == kind
