# ========================= config.py =========================
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict

from notes.model import NoteKind
from notes.tables import DEFAULT_KIND_BY_CHANNEL, DEFAULT_LANE_BY_PITCH

@dataclass
class ChartConfig:
    bpm: float = 180
    offset_steps: int = 4     # chart starts this many steps after the music
    steps_per_beat: int = 4

    @property
    def beat_offset(self) -> Fraction:
        return Fraction(self.offset_steps, self.steps_per_beat)

@dataclass
class TableConfig:
    lane_by_pitch: Dict[int, int] = field(default_factory=lambda: dict(DEFAULT_LANE_BY_PITCH))
    kind_by_channel: Dict[int, NoteKind] = field(default_factory=lambda: dict(DEFAULT_KIND_BY_CHANNEL))

@dataclass
class OutputConfig:
    indent: int = 2
    ensure_ascii: bool = False

@dataclass
class AppConfig:
    chart: ChartConfig = field(default_factory=ChartConfig)
    tables: TableConfig = field(default_factory=TableConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
