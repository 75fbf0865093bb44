from fractions import Fraction

import pytest

from chart.commands import SingleNote, SlideNote, TempoCommand
from chart.encoder import encode_chart
from config import ChartConfig
from notes.diagnostics import DiagnosticKind
from notes.model import Note, Side

from helpers import FLICK, FLICK_END_A, SLIDE_A, SLIDE_B, TAP, TAP_END_A, TAP_END_B

CFG = ChartConfig(bpm=180, offset_steps=4, steps_per_beat=4)


def encode(notes, tpb=4):
    return encode_chart(notes, tpb, CFG)


def test_tempo_comes_first_even_without_notes():
    res = encode([])
    assert res.commands == [TempoCommand(bpm=180)]
    assert res.diagnostics == []


def test_tap_and_flick_become_single_notes():
    res = encode([Note(TAP, 1, 0, 0), Note(FLICK, 5, 2, 2)])
    assert res.commands[1:] == [
        SingleNote(lane=1, beat=Fraction(1)),
        SingleNote(lane=5, beat=Fraction(3, 2), flick=True),
    ]


def test_slide_start_then_end_sets_flags():
    res = encode([Note(SLIDE_A, 3, 0, 8), Note(TAP_END_A, 3, 8, 8)])
    assert res.commands[1:] == [
        SlideNote(lane=3, beat=Fraction(1), side=Side.A, is_start=True),
        SlideNote(lane=3, beat=Fraction(3), side=Side.A, is_end=True),
    ]
    assert res.diagnostics == []


def test_flick_end_carries_flick():
    res = encode([Note(SLIDE_A, 3, 0, 8), Note(FLICK_END_A, 4, 8, 8)])
    end = res.commands[-1]
    assert end.is_end and end.flick and not end.is_start


def test_slide_end_without_chain_is_dropped():
    res = encode([Note(TAP_END_B, 2, 4, 4)])
    assert res.commands == [TempoCommand(bpm=180)]
    assert [d.kind for d in res.diagnostics] == [DiagnosticKind.SLIDE_END_WITHOUT_CHAIN]


def test_orphan_end_does_not_touch_other_side():
    res = encode([Note(SLIDE_A, 3, 0, 4), Note(TAP_END_B, 2, 4, 4), Note(TAP_END_A, 3, 4, 4)])
    assert [type(c) for c in res.commands] == [TempoCommand, SlideNote, SlideNote]
    assert res.commands[-1].side is Side.A and res.commands[-1].is_end


def test_gap_in_chain_is_reported_but_emitted():
    res = encode([Note(SLIDE_A, 3, 0, 4), Note(TAP_END_A, 3, 6, 6)])
    assert len(res.commands) == 3
    assert res.commands[-1].is_end
    assert [d.kind for d in res.diagnostics] == [DiagnosticKind.SLIDE_DISCONTINUITY]


def test_second_slide_start_continues_open_chain():
    res = encode([Note(SLIDE_A, 3, 0, 4), Note(SLIDE_A, 5, 4, 8), Note(TAP_END_A, 5, 8, 8)])
    flags = [(c.is_start, c.is_end) for c in res.commands[1:]]
    assert flags == [(True, False), (False, False), (False, True)]
    assert res.diagnostics == []


def test_sides_are_independent():
    res = encode([
        Note(SLIDE_A, 1, 0, 8),
        Note(SLIDE_B, 7, 0, 4),
        Note(TAP_END_B, 6, 4, 4),
        Note(TAP_END_A, 2, 8, 8),
    ])
    assert [(c.side, c.is_start, c.is_end) for c in res.commands[1:]] == [
        (Side.A, True, False),
        (Side.B, True, False),
        (Side.B, False, True),
        (Side.A, False, True),
    ]
    assert res.diagnostics == []


def test_unfinished_slide_is_reported():
    res = encode([Note(SLIDE_B, 4, 0, 4)])
    assert len(res.commands) == 2
    assert [d.kind for d in res.diagnostics] == [DiagnosticKind.DANGLING_SLIDE]


def test_beat_uses_ticks_per_beat_and_offset():
    res = encode_chart([Note(TAP, 1, 480, 480)], 480, ChartConfig(offset_steps=2, steps_per_beat=4))
    assert res.commands[1].beat == Fraction(3, 2)


def test_rejects_non_positive_ticks_per_beat():
    with pytest.raises(ValueError):
        encode_chart([], 0, CFG)
