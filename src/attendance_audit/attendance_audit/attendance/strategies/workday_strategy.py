from __future__ import annotations

import logging

from ...common.time_utils import time_to_minutes
from ...core.constants import DEFAULT_SHIFT_TOKEN
from ...core.enums import AttendanceStatus
from ..waiver import WaiverCounter, waiver_month_key
from .base import AttendanceStrategy, ClassificationContext, StatusDecision

logger = logging.getLogger(__name__)


class WorkdayStrategy(AttendanceStrategy):
    """Full punches on an ordinary workday, checked against the resolved shift.

    Order of checks: very early in, then late in / early out (with the monthly
    waiver allowance), then on time.
    """

    def __init__(self, default_shift_token: str = DEFAULT_SHIFT_TOKEN):
        self._default_shift_token = default_shift_token

    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        token = ctx.record.shift or self._default_shift_token
        shift = ctx.index.find_shift(token)
        if not shift:
            logger.debug("Undefined shift %r for %s on %s", token, ctx.record.employee_number, ctx.record.date)
            return StatusDecision(status=AttendanceStatus.AUDIT, deviation=f"Undefined Shift: {ctx.record.shift}")

        shift_start = time_to_minutes(shift.start_time)
        shift_end = time_to_minutes(shift.end_time)
        actual_in = ctx.in_minutes
        actual_out = ctx.out_minutes

        is_late_in = actual_in > shift_start
        is_early_out = actual_out < shift_end
        is_very_early_in = actual_in < shift_start - (shift.early_in_threshold or 0)

        if is_very_early_in:
            return StatusDecision(
                status=AttendanceStatus.AUDIT,
                deviation=f"Very Early In ({shift_start - actual_in}m)",
                shift=shift,
            )

        if is_late_in or is_early_out:
            if is_late_in and is_early_out:
                reason = "Double Violation (Late + Early)"
            elif is_late_in:
                reason = f"Late In ({actual_in - shift_start}m)"
            else:
                reason = f"Early Out ({shift_end - actual_out}m)"

            occasion = None
            if is_late_in != is_early_out and not ctx.employee.shift_deviation_allowed:
                key = waiver_month_key(ctx.employee.employee_number, ctx.record.date)
                occasion = waivers.claim(key, shift.late_cap)

            if occasion is not None:
                reason = f"Audit Waiver Eligible (Occasion {occasion}/2) - {reason}"
            return StatusDecision(status=AttendanceStatus.AUDIT, deviation=reason, shift=shift)

        return StatusDecision(status=AttendanceStatus.CLEAN, deviation="On Time", shift=shift)
