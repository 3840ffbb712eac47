# core/timing.py
from __future__ import annotations

import math
from typing import Union

from core.errors import InvalidTempoError

# Fixed pulse rate; the file header's own division is not consulted.
TICKS_PER_BEAT = 96
SECONDS_PER_MINUTE = 60
TICKS_PER_SECOND_PER_BPM = TICKS_PER_BEAT / SECONDS_PER_MINUTE  # 1.6


def ticks_to_seconds(ticks: int, bpm: float) -> float:
    """
    Absolute tick count -> elapsed seconds at a constant tempo.

    seconds = ticks / (bpm * 1.6)

    bpm must already be validated (> 0), see validate_bpm().
    """
    ticks_per_sec = float(bpm) * TICKS_PER_SECOND_PER_BPM
    return float(ticks) / ticks_per_sec


def validate_bpm(value: Union[str, int, float]) -> float:
    try:
        bpm = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidTempoError(f"Cannot parse BPM: {value!r}") from e

    if not math.isfinite(bpm) or bpm <= 0:
        raise InvalidTempoError(f"BPM must be a finite number > 0, got {value!r}")
    # subnormal tempos overflow the seconds-per-tick factor
    if not math.isfinite(1.0 / (bpm * TICKS_PER_SECOND_PER_BPM)):
        raise InvalidTempoError(f"BPM is too small to convert ticks to seconds, got {value!r}")
    return bpm
