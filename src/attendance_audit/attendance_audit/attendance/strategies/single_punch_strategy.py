from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..waiver import WaiverCounter
from .base import AttendanceStrategy, ClassificationContext, StatusDecision


class SinglePunchStrategy(AttendanceStrategy):
    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        reason = "Missing Out Punch" if ctx.has_in else "Missing In Punch"
        return StatusDecision(status=AttendanceStatus.AUDIT, deviation=reason)
