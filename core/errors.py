# core/errors.py
from __future__ import annotations


# -----------------------------
# Exceptions (Business-level)
# -----------------------------
class Midi2JsonError(Exception):
    """Base exception for every midi2json failure."""


class InputError(Midi2JsonError):
    """Caller supplied something unusable (file or tempo)."""


class MidiReadError(InputError):
    """MIDI file missing, unreadable, or not a valid Standard MIDI File."""


class InvalidTempoError(InputError):
    """BPM is not a finite number > 0."""


class StreamConsistencyError(Midi2JsonError):
    """Decoded event stream contradicts the note pairing rules."""


class UnmatchedNoteEndError(StreamConsistencyError):
    """A note-end arrived while no note-begin was pending."""

    kind = "unmatched-note-end"

    def __init__(self, index: int, elapsed_ticks: int):
        super().__init__(
            f"{self.kind}: event #{index} at tick {elapsed_ticks} has no pending note-begin"
        )
        self.index = index
        self.elapsed_ticks = elapsed_ticks


class OutputWriteError(Midi2JsonError):
    """Notes JSON could not be written."""
