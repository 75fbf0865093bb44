# chart/encoder.py
import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, Iterable, List, Optional

from chart.commands import ChartCommand, SingleNote, SlideNote, TempoCommand
from config import ChartConfig
from notes.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from notes.model import Category, Note, Side

log = logging.getLogger(__name__)

SlideChains = Dict[Side, Optional[Note]]  # side -> last note emitted in the open chain

@dataclass
class EncodeResult:
    commands: List[ChartCommand] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

def note_beat(note: Note, ticks_per_beat: int, cfg: ChartConfig) -> Fraction:
    return Fraction(note.start_time, ticks_per_beat) + cfg.beat_offset

def _seconds(beat: Fraction, bpm) -> str:
    return f"{float(beat) / bpm * 60:.2f}s"

def _check_continuity(chains: SlideChains, note: Note, when: str, diags: DiagnosticLog):
    # bestdori only needs start beats, so a gap is reported but not fatal
    last = chains[note.kind.side]
    if last is not None and last.end_time != note.start_time:
        diags.report(DiagnosticKind.SLIDE_DISCONTINUITY,
                     f"last slide note for pos {note.kind.side.value} ends at {last.end_time}, "
                     f"not connected to {note.kind} at {note.start_time} ({when}), continuing",
                     time=note.start_time, lane=note.lane, note_kind=note.kind)

def encode_chart(notes: Iterable[Note], ticks_per_beat: int, cfg: Optional[ChartConfig] = None) -> EncodeResult:
    """Turn a start-ordered note list into chart commands.

    Each side (A/B) holds at most one open slide. A slide start opens the chain
    or, when one is already open, continues it; a slide end closes it.
    """
    if ticks_per_beat <= 0:
        raise ValueError(f"ticks_per_beat must be positive, got {ticks_per_beat}")
    cfg = cfg or ChartConfig()
    diags = DiagnosticLog(log)
    chains: SlideChains = {Side.A: None, Side.B: None}
    out: List[ChartCommand] = [TempoCommand(bpm=cfg.bpm)]

    for note in notes:
        beat = note_beat(note, ticks_per_beat, cfg)
        when = _seconds(beat, cfg.bpm)
        cat = note.kind.category

        if cat is Category.TAP:
            out.append(SingleNote(lane=note.lane, beat=beat))
        elif cat is Category.FLICK:
            out.append(SingleNote(lane=note.lane, beat=beat, flick=True))
        elif cat is Category.SLIDE_START:
            side = note.kind.side
            is_start = chains[side] is None
            _check_continuity(chains, note, when, diags)
            out.append(SlideNote(lane=note.lane, beat=beat, side=side, is_start=is_start))
            chains[side] = note
        else:
            side = note.kind.side
            if chains[side] is None:
                diags.report(DiagnosticKind.SLIDE_END_WITHOUT_CHAIN,
                             f"slide end note of type {note.kind} at time {when} is not within a slide, "
                             f"discarding note",
                             time=note.start_time, lane=note.lane, note_kind=note.kind)
                continue
            _check_continuity(chains, note, when, diags)
            out.append(SlideNote(lane=note.lane, beat=beat, side=side, is_end=True,
                                 flick=cat is Category.SLIDE_FLICK_END))
            chains[side] = None

    for side, last in chains.items():
        if last is not None:
            diags.report(DiagnosticKind.DANGLING_SLIDE,
                         f"slide on pos {side.value} opened on lane {last.lane} never ended",
                         time=last.start_time, lane=last.lane, note_kind=last.kind)

    return EncodeResult(commands=out, diagnostics=diags.items)
