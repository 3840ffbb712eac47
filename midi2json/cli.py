from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from core.config import get_settings
from core.errors import InputError, InvalidTempoError, OutputWriteError, StreamConsistencyError
from core.models import Note
import core.pipeline as pipeline  # IMPORTANT: allow monkeypatch in tests
from core.utils import setup_logging


# exit codes (keep stable)
EXIT_OK = 0
EXIT_BAD_ARGS = 2
EXIT_INPUT = 3
EXIT_STREAM = 4
EXIT_OUTPUT = 5


def _print_err(msg: str) -> None:
    print(msg, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="midi2json", description="Converts MIDI files into note information in JSON")
    p.add_argument("-i", "--input", required=True, metavar="INPUT", help="Sets the input MIDI file to read")
    p.add_argument("-b", "--bpm", required=True, metavar="BPM", help="Sets the tempo, in beats per minute")
    return p


def format_notes(notes: List[Note]) -> str:
    lines = ["Notes:"]
    for n in notes:
        lines.append(f"  {n.time_start} to {n.time_end}: pitch {n.pitch_value}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        info = pipeline.convert_midi_file(args.input, args.bpm, settings=settings)
    except InvalidTempoError as e:
        _print_err(str(e))
        return EXIT_BAD_ARGS
    except InputError as e:
        _print_err(str(e))
        return EXIT_INPUT
    except StreamConsistencyError as e:
        _print_err(f"Stream error: {e}")
        return EXIT_STREAM
    except OutputWriteError as e:
        _print_err(str(e))
        return EXIT_OUTPUT

    print(format_notes(info.notes))
    print(str(settings.output_path))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
