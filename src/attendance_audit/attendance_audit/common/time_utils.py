"""Minute-of-day helpers for punch and shift times.

All functions here are total: malformed input degrades to 0 minutes (or to
``None`` for :func:`parse_punch`) instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from ..core.constants import MINUTES_PER_DAY, NO_PUNCH_SENTINELS, ZERO_TIME

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: str) -> int:
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def time_to_minutes(value: Optional[str]) -> int:
    """Convert ``HH:MM`` into minutes after midnight.

    Sentinels (``NA``, ``00:00``, empty) and strings without a colon map to 0.
    Non-numeric components count as 0.
    """
    if not isinstance(value, str) or ":" not in value:
        return 0
    clean = value.upper().replace("NA", ZERO_TIME, 1).strip()
    if clean in ("", ZERO_TIME):
        return 0
    parts = clean.split(":")
    return _leading_int(parts[0]) * 60 + _leading_int(parts[1])


def minutes_to_time(total_minutes: float) -> str:
    minutes = max(0, int(math.floor(total_minutes + 0.5)))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def diff_minutes(start: int, end: int) -> int:
    """Duration from start to end, wrapping past midnight for overnight spans."""
    if end < start:
        return (end + MINUTES_PER_DAY) - start
    return end - start


def is_valid_punch(value: Optional[str]) -> bool:
    return (value or "").strip().upper() not in NO_PUNCH_SENTINELS


def parse_punch(value: Optional[str]) -> Optional[int]:
    """Normalize a raw punch cell: ``None`` for "no punch", minutes otherwise."""
    if not is_valid_punch(value):
        return None
    return time_to_minutes(value)
