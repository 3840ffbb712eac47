from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


# =========================
# Base Model Config (Frozen)
# =========================
class _ContractBaseModel(BaseModel):
    """
    Output contract hardening:
    - forbid extra fields
    - field names are part of the JSON format, never rename them
    """
    model_config = ConfigDict(extra="forbid")


# =========================
# Schemas
# =========================
class Note(_ContractBaseModel):
    """A finished note. Times are seconds from the start of the track."""
    time_start: float = Field(..., allow_inf_nan=False, description="Note start in seconds")
    time_end: float = Field(..., allow_inf_nan=False, description="Note end in seconds")
    pitch_value: int = Field(..., ge=0, description="MIDI key number (0-127 by convention)")

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "Note":
        if self.time_end < self.time_start:
            raise ValueError("time_end must be >= time_start")
        return self


class NoteInfo(_ContractBaseModel):
    """Top-level JSON document: {"notes": [...]}."""
    notes: List[Note] = Field(default_factory=list)
