from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..waiver import WaiverCounter
from .base import AttendanceStrategy, ClassificationContext, StatusDecision


class WorkedOffStrategy(AttendanceStrategy):
    """Full punches on a holiday or weekly off."""

    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        if ctx.holiday:
            deviation = f"Worked on Holiday: {ctx.holiday.label}"
        else:
            deviation = "Worked on Weekly Off"
        return StatusDecision(status=AttendanceStatus.WORKED_OFF, deviation=deviation)
