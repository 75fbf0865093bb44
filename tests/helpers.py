import mido

from notes.model import NoteKind, RawEvent, Side
from notes.tables import DEFAULT_KIND_BY_CHANNEL, DEFAULT_LANE_BY_PITCH

CHANNEL_BY_KIND = {k: ch for ch, k in DEFAULT_KIND_BY_CHANNEL.items()}
PITCH_BY_LANE = {lane: p for p, lane in DEFAULT_LANE_BY_PITCH.items()}

TAP = NoteKind.tap()
FLICK = NoteKind.flick()
SLIDE_A = NoteKind.slide_start(Side.A)
SLIDE_B = NoteKind.slide_start(Side.B)
TAP_END_A = NoteKind.slide_tap_end(Side.A)
TAP_END_B = NoteKind.slide_tap_end(Side.B)
FLICK_END_A = NoteKind.slide_flick_end(Side.A)


def on(delta, kind, lane):
    return RawEvent(tick_delta=delta, is_start=True, channel=CHANNEL_BY_KIND[kind], pitch=PITCH_BY_LANE[lane])


def off(delta, kind, lane):
    return RawEvent(tick_delta=delta, is_start=False, channel=CHANNEL_BY_KIND[kind], pitch=PITCH_BY_LANE[lane])


def write_midi(path, messages, tpb=4):
    mid = mido.MidiFile(ticks_per_beat=tpb)
    track = mido.MidiTrack()
    track.extend(messages)
    mid.tracks.append(track)
    mid.save(str(path))
    return str(path)
