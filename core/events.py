# core/events.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoteBegin:
    pitch: int
    velocity: int
    channel: int = 0


@dataclass(frozen=True)
class NoteEnd:
    pitch: int
    velocity: int
    channel: int = 0


@dataclass(frozen=True)
class OtherMessage:
    """Any decoded message the note pairer does not care about (CC, meta, sysex...)."""
    kind: str


MidiMessage = Union[NoteBegin, NoteEnd, OtherMessage]


@dataclass(frozen=True)
class TimedEvent:
    """One track entry: ticks since the previous entry + the message."""
    delta_ticks: int
    message: MidiMessage
