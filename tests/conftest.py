from __future__ import annotations

from pathlib import Path
from typing import List

import mido  # type: ignore
import pytest


@pytest.fixture
def make_midi(tmp_path: Path):
    """
    Write a tiny type-1 MIDI file (96 ticks per beat).
    `tracks` is a list of message lists; message.time is the delta in ticks.
    """

    def _make(tracks: List[List[mido.Message]], name: str = "in.mid", ticks_per_beat: int = 96) -> Path:
        mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
        for msgs in tracks:
            tr = mido.MidiTrack()
            tr.extend(msgs)
            mid.tracks.append(tr)
        p = tmp_path / name
        mid.save(str(p))
        return p

    return _make


def on(note: int, time: int = 0, velocity: int = 64, channel: int = 0) -> mido.Message:
    return mido.Message("note_on", note=note, velocity=velocity, time=time, channel=channel)


def off(note: int, time: int = 0, velocity: int = 64, channel: int = 0) -> mido.Message:
    return mido.Message("note_off", note=note, velocity=velocity, time=time, channel=channel)
