# notes/tables.py
from typing import Dict, Optional, Tuple

from notes.model import NoteKind, Side

# MIDI channel ("color" in the editor) -> note kind
DEFAULT_KIND_BY_CHANNEL: Dict[int, NoteKind] = {
    0: NoteKind.slide_start(Side.A),
    1: NoteKind.slide_start(Side.B),
    4: NoteKind.tap(),
    5: NoteKind.slide_tap_end(Side.A),
    6: NoteKind.slide_tap_end(Side.B),
    8: NoteKind.flick(),
    9: NoteKind.slide_flick_end(Side.A),
    10: NoteKind.slide_flick_end(Side.B),
}

# MIDI pitch -> lane, lane 1 is the leftmost column
DEFAULT_LANE_BY_PITCH: Dict[int, int] = {
    36: 7,
    37: 6,
    38: 5,
    39: 4,
    40: 3,
    41: 2,
    42: 1,
}

class LookupTables:
    """Fixed channel/pitch lookups used while pairing events."""
    def __init__(self, kind_by_channel: Optional[Dict[int, NoteKind]] = None,
                 lane_by_pitch: Optional[Dict[int, int]] = None):
        self.kind_by_channel = dict(DEFAULT_KIND_BY_CHANNEL if kind_by_channel is None else kind_by_channel)
        self.lane_by_pitch = dict(DEFAULT_LANE_BY_PITCH if lane_by_pitch is None else lane_by_pitch)

    def resolve(self, channel: int, pitch: int) -> Optional[Tuple[NoteKind, int]]:
        kind = self.kind_by_channel.get(channel)
        lane = self.lane_by_pitch.get(pitch)
        if kind is None or lane is None:
            return None
        return kind, lane
