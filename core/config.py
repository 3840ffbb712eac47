# core/config.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: .../midi2json
BASE_DIR = Path(__file__).resolve().parents[1]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    midi2json settings.

    Reads from:
    - environment variables
    - .env in project root

    The CLI itself only takes --input and --bpm; everything else lives here.
    """

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ---- Output ----
    output_path: Path = Field(
        default=Path("output/notes.json"),
        validation_alias=AliasChoices("OUTPUT_PATH", "MIDI2JSON_OUTPUT"),
    )
    json_indent: int = Field(default=2, validation_alias="JSON_INDENT")

    # ---- Logging ----
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # ---- Decoding ----
    # note_on with velocity 0 is a note-begin unless this is switched on
    note_on_zero_as_end: bool = Field(default=False, validation_alias="NOTE_ON_ZERO_AS_END")

    def model_post_init(self, __context) -> None:
        # Normalize paths to absolute, relative to BASE_DIR
        self.output_path = self._abs_path(self.output_path)

        self.json_indent = int(min(max(self.json_indent, 0), 8))

        level = str(self.log_level or "").strip().upper()
        self.log_level = level if level in _LOG_LEVELS else "INFO"

    @staticmethod
    def _abs_path(p: Path) -> Path:
        if p.is_absolute():
            return p
        return (BASE_DIR / p).resolve()

    @property
    def log_level_no(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
