from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.errors import OutputWriteError
from core.models import Note, NoteInfo
from core.note_writer import file_sink, write_notes_json


def _info() -> NoteInfo:
    return NoteInfo(notes=[
        Note(time_start=0.0, time_end=0.25, pitch_value=60),
        Note(time_start=0.25, time_end=1.0, pitch_value=64),
    ])


def test_write_creates_parent_dir(tmp_path: Path):
    out = tmp_path / "output" / "notes.json"
    written = write_notes_json(_info(), out)
    assert written == out.resolve()

    text = out.read_text(encoding="utf-8")
    assert "\n  \"notes\"" in text  # pretty printed
    data = json.loads(text)
    assert [n["pitch_value"] for n in data["notes"]] == [60, 64]


def test_file_sink_compact(tmp_path: Path):
    out = tmp_path / "notes.json"
    file_sink(out, indent=0)(_info())
    text = out.read_text(encoding="utf-8")
    assert "\n" not in text
    assert json.loads(text)["notes"][1]["time_end"] == 1.0


def test_write_failure_is_wrapped(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        write_notes_json(_info(), blocker / "notes.json")
