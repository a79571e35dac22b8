from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..waiver import WaiverCounter
from .base import AttendanceStrategy, ClassificationContext, StatusDecision


class UnknownEmployeeStrategy(AttendanceStrategy):
    """Employee number missing from the master."""

    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ID_ERROR, deviation="ID Not Found in Master")


class InactiveEmployeeStrategy(AttendanceStrategy):
    """Employee present but not Active."""

    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ID_ERROR, deviation="Staff Inactive/Terminated")
