# midi/parser.py
import logging
from typing import Iterable, List, Tuple

import mido

from notes.model import RawEvent

log = logging.getLogger(__name__)

class ConversionError(Exception):
    """The MIDI input could not be read or decoded."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

def messages_to_events(messages: Iterable[mido.Message]) -> List[RawEvent]:
    """Keep note on/off messages; their deltas absorb any skipped messages in between."""
    events: List[RawEvent] = []
    pending = 0
    for msg in messages:
        pending += msg.time
        if msg.is_meta or msg.type not in ('note_on', 'note_off'):
            continue
        # note_on with velocity 0 is a note off
        is_start = msg.type == 'note_on' and msg.velocity > 0
        events.append(RawEvent(tick_delta=pending, is_start=is_start, channel=msg.channel, pitch=msg.note))
        pending = 0
    return events

def parse_midi_to_events(path: str) -> Tuple[List[RawEvent], int]:
    try:
        mid = mido.MidiFile(path)
    except (OSError, EOFError, ValueError, KeyError, IndexError) as e:
        raise ConversionError(path, f"{type(e).__name__}: {e}") from e
    tpb = mid.ticks_per_beat
    if not tpb or tpb <= 0:
        raise ConversionError(path, f"unsupported ticks per beat {tpb!r}")
    events = messages_to_events(mido.merge_tracks(mid.tracks))
    log.info("read %d note events from %s (tpb=%d)", len(events), path, tpb)
    return events, tpb
