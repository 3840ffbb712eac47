"""
core.note_pairer

Monophonic note pairing over one track's decoded events.

The pairer keeps a single pending slot:
- a note-begin opens (or silently replaces) the pending note
- a note-end closes the pending note, whatever its pitch
- a note-end with nothing pending is fatal (UnmatchedNoteEndError)
- a note still pending when the track ends is dropped
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from core.errors import UnmatchedNoteEndError
from core.events import NoteBegin, NoteEnd, TimedEvent
from core.models import Note
from core.timing import ticks_to_seconds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingNote:
    pitch: int
    time_start: float


class NotePairer:
    def __init__(self, bpm: float):
        self.bpm = float(bpm)
        self.elapsed_ticks = 0
        self.pending: Optional[PendingNote] = None
        self.notes: List[Note] = []
        self._index = 0

    def feed(self, event: TimedEvent) -> None:
        # absolute clock advances for every event kind
        self.elapsed_ticks += int(event.delta_ticks)
        index = self._index
        self._index += 1

        msg = event.message
        if isinstance(msg, NoteBegin):
            if self.pending is not None:
                logger.debug(
                    "note-begin #%d (pitch %d) replaces pending pitch %d",
                    index, msg.pitch, self.pending.pitch,
                )
            self.pending = PendingNote(
                pitch=int(msg.pitch),
                time_start=ticks_to_seconds(self.elapsed_ticks, self.bpm),
            )
        elif isinstance(msg, NoteEnd):
            if self.pending is None:
                raise UnmatchedNoteEndError(index=index, elapsed_ticks=self.elapsed_ticks)
            self.notes.append(
                Note(
                    time_start=self.pending.time_start,
                    time_end=ticks_to_seconds(self.elapsed_ticks, self.bpm),
                    pitch_value=self.pending.pitch,
                )
            )
            self.pending = None

    def finish(self) -> List[Note]:
        if self.pending is not None:
            logger.debug("dropping unterminated note (pitch %d) at end of track", self.pending.pitch)
            self.pending = None
        return list(self.notes)


def extract_notes(events: Iterable[TimedEvent], bpm: float) -> List[Note]:
    pairer = NotePairer(bpm)
    for ev in events:
        pairer.feed(ev)
    return pairer.finish()
