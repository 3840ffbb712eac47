# core/note_writer.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Union

from core.errors import OutputWriteError
from core.models import NoteInfo

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
NoteSink = Callable[[NoteInfo], None]


def write_notes_json(info: NoteInfo, out_path: PathLike, *, indent: int = 2) -> Path:
    p = Path(out_path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(info.model_dump_json(indent=indent or None), encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to save notes JSON to {p}: {e}") from e
    logger.info("Wrote %d note(s) to %s", len(info.notes), p)
    return p.resolve()


def file_sink(out_path: PathLike, *, indent: int = 2) -> NoteSink:
    """Sink that writes the document to a fixed path."""

    def _sink(info: NoteInfo) -> None:
        write_notes_json(info, out_path, indent=indent)

    return _sink
