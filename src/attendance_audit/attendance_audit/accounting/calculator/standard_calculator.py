from __future__ import annotations

from typing import Optional

from ...attendance.model import TimeAccounting
from ...common.time_utils import diff_minutes, minutes_to_time
from ...core.constants import (
    BREAK_DEDUCTION_MINUTES,
    EFFECTIVE_BASELINE_MINUTES,
    GROSS_BASELINE_MINUTES,
    ZERO_TIME,
)
from .base import TimeAccountingCalculator


class StandardTimeAccountingCalculator(TimeAccountingCalculator):
    """Standard rule: gross = out - in (wrapping midnight), effective = gross - 60.

    Shortfall is measured against 8h effective and 9h gross. Without both
    punches only total/effective hours are set, to ``00:00``.
    """

    def compute(
        self,
        *,
        in_minutes: Optional[int],
        out_minutes: Optional[int],
        shift_start: int,
        shift_end: int,
    ) -> TimeAccounting:
        if in_minutes is None or out_minutes is None:
            return TimeAccounting(total_hours=ZERO_TIME, effective_hours=ZERO_TIME)

        gross = diff_minutes(in_minutes, out_minutes)
        effective = max(0, gross - BREAK_DEDUCTION_MINUTES)

        return TimeAccounting(
            late_by=minutes_to_time(in_minutes - shift_start) if in_minutes > shift_start else ZERO_TIME,
            early_by=minutes_to_time(shift_end - out_minutes) if out_minutes < shift_end else ZERO_TIME,
            total_hours=minutes_to_time(gross),
            effective_hours=minutes_to_time(effective),
            over_time=minutes_to_time(out_minutes - shift_end) if out_minutes > shift_end else ZERO_TIME,
            short_hours_effective=minutes_to_time(max(0, EFFECTIVE_BASELINE_MINUTES - effective)),
            short_hours_gross=minutes_to_time(max(0, GROSS_BASELINE_MINUTES - gross)),
        )
