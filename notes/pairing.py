# notes/pairing.py
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from notes.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from notes.model import Note, NoteKind, RawEvent
from notes.tables import LookupTables
from notes.validation import validate_note

log = logging.getLogger(__name__)

PairKey = Tuple[int, NoteKind]  # (lane, kind)

@dataclass
class PairingResult:
    notes: List[Note] = field(default_factory=list)   # completion order
    diagnostics: List[Diagnostic] = field(default_factory=list)
    skipped: int = 0                                   # events outside the lookup tables

def pair_events(events: Iterable[RawEvent], tables: Optional[LookupTables] = None) -> PairingResult:
    """Rebuild notes from start/stop events.

    Stop events do not say which start they close, so starts are held open per
    (lane, kind) until the next stop with the same key. Notes with the same lane
    and kind are assumed never to overlap; a second start replaces the first.
    """
    tables = tables or LookupTables()
    diags = DiagnosticLog(log)
    result = PairingResult()
    open_starts: Dict[PairKey, int] = {}
    time = 0

    for ev in events:
        # time advances even for events we end up skipping
        time += ev.tick_delta
        resolved = tables.resolve(ev.channel, ev.pitch)
        if resolved is None:
            result.skipped += 1
            log.debug("skip event channel=%d pitch=%d at time %d", ev.channel, ev.pitch, time)
            continue
        kind, lane = resolved
        key = (lane, kind)

        if ev.is_start:
            if key in open_starts:
                diags.report(DiagnosticKind.OVERLAPPING_START,
                             f"overlay on lane {lane} and type {kind} at time {time}, "
                             f"discarding old note started at {open_starts[key]}",
                             time=time, lane=lane, note_kind=kind)
            open_starts[key] = time
            continue

        if key not in open_starts:
            diags.report(DiagnosticKind.UNPAIRED_STOP,
                         f"unpaired off event on lane {lane} and type {kind} at time {time}, "
                         f"discarding current event",
                         time=time, lane=lane, note_kind=kind)
            continue

        note = Note(kind=kind, lane=lane, start_time=open_starts.pop(key), end_time=time)
        rejected = validate_note(note)
        if rejected is not None:
            diags.report(rejected.kind, rejected.message,
                         time=rejected.time, lane=rejected.lane, note_kind=rejected.note_kind)
            continue
        result.notes.append(note)

    for (lane, kind), start in open_starts.items():
        diags.report(DiagnosticKind.DANGLING_START,
                     f"note on lane {lane} and type {kind} started at time {start} never stopped",
                     time=start, lane=lane, note_kind=kind)

    result.diagnostics = diags.items
    if result.skipped:
        log.info("skipped %d events with unknown channel or pitch", result.skipped)
    return result
