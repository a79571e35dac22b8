from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..waiver import WaiverCounter
from .base import AttendanceStrategy, ClassificationContext, StatusDecision


class NoPunchStrategy(AttendanceStrategy):
    """No valid punch at all: holiday, weekly off or absent (in that order)."""

    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        if ctx.holiday:
            return StatusDecision(status=AttendanceStatus.HOLIDAY, deviation=ctx.holiday.label)
        if ctx.is_weekly_off:
            return StatusDecision(status=AttendanceStatus.WEEKLY_OFF, deviation="Standard Weekly Off")
        return StatusDecision(status=AttendanceStatus.ABSENT, deviation="No Punch Records")
