# core/midi_reader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import mido  # type: ignore

from core.errors import MidiReadError
from core.events import MidiMessage, NoteBegin, NoteEnd, OtherMessage, TimedEvent

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def to_message(msg: "mido.Message", *, note_on_zero_as_end: bool = False) -> MidiMessage:
    """mido message -> core message variant."""
    if msg.type == "note_on":
        if note_on_zero_as_end and int(msg.velocity) == 0:
            return NoteEnd(pitch=int(msg.note), velocity=0, channel=int(msg.channel))
        return NoteBegin(pitch=int(msg.note), velocity=int(msg.velocity), channel=int(msg.channel))
    if msg.type == "note_off":
        return NoteEnd(pitch=int(msg.note), velocity=int(msg.velocity), channel=int(msg.channel))
    return OtherMessage(kind=str(msg.type))


def to_timed_events(track: "mido.MidiTrack", *, note_on_zero_as_end: bool = False) -> List[TimedEvent]:
    return [
        TimedEvent(delta_ticks=int(msg.time), message=to_message(msg, note_on_zero_as_end=note_on_zero_as_end))
        for msg in track
    ]


def read_tracks(path: PathLike, *, note_on_zero_as_end: bool = False) -> List[List[TimedEvent]]:
    """
    Decode a Standard MIDI File into per-track TimedEvent lists.
    Any decode problem becomes MidiReadError.
    """
    midi_path = Path(path)
    if not midi_path.exists() or not midi_path.is_file():
        raise MidiReadError(f"Could not read input file: {midi_path}")

    try:
        mid = mido.MidiFile(str(midi_path))
    except Exception as e:
        raise MidiReadError(f"Could not parse MIDI file contents: {midi_path} ({e})") from e

    logger.debug(
        "decoded %s: type=%s tracks=%d ticks_per_beat=%s",
        midi_path.name, mid.type, len(mid.tracks), mid.ticks_per_beat,
    )
    return [to_timed_events(tr, note_on_zero_as_end=note_on_zero_as_end) for tr in mid.tracks]


def read_first_track(path: PathLike, *, note_on_zero_as_end: bool = False) -> List[TimedEvent]:
    tracks = read_tracks(path, note_on_zero_as_end=note_on_zero_as_end)
    if not tracks:
        raise MidiReadError(f"MIDI file has no tracks: {path}")
    if len(tracks) > 1:
        logger.info("Ignoring %d extra track(s); only the first track is converted", len(tracks) - 1)
    return tracks[0]
