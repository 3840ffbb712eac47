# core/pipeline.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from core.config import Settings, get_settings
from core.midi_reader import read_first_track
from core.models import NoteInfo
from core.note_pairer import extract_notes
from core.note_writer import NoteSink, file_sink
from core.timing import validate_bpm

logger = logging.getLogger(__name__)


def convert_midi_file(
    input_path: Union[str, Path],
    bpm: Union[str, float],
    *,
    sink: Optional[NoteSink] = None,
    settings: Optional[Settings] = None,
) -> NoteInfo:
    """
    First track of a MIDI file -> NoteInfo, handed to `sink`.

    Default sink writes settings.output_path. Every failure raises before the
    sink is called, so a failed run never leaves partial output.
    """
    s = settings or get_settings()
    tempo = validate_bpm(bpm)

    logger.info("Loading MIDI file...")
    events = read_first_track(input_path, note_on_zero_as_end=s.note_on_zero_as_end)

    logger.info("Handling contents...")
    notes = extract_notes(events, tempo)
    info = NoteInfo(notes=notes)
    logger.info("Extracted %d note(s) from %d event(s) at %.3f bpm", len(notes), len(events), tempo)

    logger.info("Saving output JSON file...")
    out = sink or file_sink(s.output_path, indent=s.json_indent)
    out(info)

    logger.info("Done.")
    return info
