from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Semantic status assigned to one employee-day."""

    CLEAN = "Clean"
    AUDIT = "Audit"
    ABSENT = "Absent"
    HOLIDAY = "Holiday"
    WEEKLY_OFF = "Weekly Off"
    WORKED_OFF = "Worked Off"
    ID_ERROR = "ID Error"


class ReviewStatus(str, Enum):
    """Review workflow state of an audit queue entry."""

    PENDING = "Pending Review"
    UNDER_REVIEW = "Under Review"
    REVIEWED = "Reviewed"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_decided(self) -> bool:
        return self in (ReviewStatus.APPROVED, ReviewStatus.REJECTED)
