# pipeline.py
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from chart.commands import ChartCommand
from chart.encoder import encode_chart
from config import AppConfig
from midi.parser import parse_midi_to_events
from notes.diagnostics import Diagnostic, DiagnosticKind
from notes.model import RawEvent
from notes.pairing import pair_events
from notes.tables import LookupTables
from timeline.sorter import sort_timeline

log = logging.getLogger(__name__)

@dataclass
class ConversionResult:
    commands: List[ChartCommand] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    skipped: int = 0

    def count(self, kind: DiagnosticKind) -> int:
        return sum(1 for d in self.diagnostics if d.kind == kind)

    def to_json_list(self) -> list:
        return [c.to_dict() for c in self.commands]

def convert_events(events: Iterable[RawEvent], ticks_per_beat: int,
                   cfg: Optional[AppConfig] = None) -> ConversionResult:
    """pair -> validate -> sort -> encode"""
    cfg = cfg or AppConfig()
    tables = LookupTables(cfg.tables.kind_by_channel, cfg.tables.lane_by_pitch)
    paired = pair_events(events, tables)
    timeline = sort_timeline(paired.notes)
    encoded = encode_chart(timeline, ticks_per_beat, cfg.chart)
    result = ConversionResult(
        commands=encoded.commands,
        diagnostics=paired.diagnostics + encoded.diagnostics,
        skipped=paired.skipped,
    )
    log.info("converted %d notes into %d commands, %d diagnostics",
             len(timeline), len(result.commands), len(result.diagnostics))
    return result

def convert_file(path: str, cfg: Optional[AppConfig] = None) -> ConversionResult:
    events, tpb = parse_midi_to_events(path)
    return convert_events(events, tpb, cfg)
