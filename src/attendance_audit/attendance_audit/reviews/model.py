from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, ReviewStatus


@dataclass(frozen=True)
class AuditQueueEntry:
    """Domain entity: one flagged attendance record awaiting manual review.

    ``entry_id`` is ``EMPLOYEE-DATE``; ``record_key`` is the ``EMPLOYEE|DATE`` key
    used to merge decisions back into classified output.
    """

    entry_id: str
    record_key: str
    employee_number: str
    employee_name: str
    date: str
    department: str
    location: str
    current_status: AttendanceStatus
    deviation: str
    audit_reason: str
    review_status: ReviewStatus = ReviewStatus.PENDING
    updated_status: Optional[AttendanceStatus] = None
    reviewed_by: Optional[str] = None
    reviewed_on: Optional[str] = None
    remarks: str = ""
    pushed_to_monthly: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "employeeNumber": self.employee_number,
            "employeeName": self.employee_name,
            "date": self.date,
            "department": self.department,
            "location": self.location,
            "currentStatus": self.current_status.value,
            "deviation": self.deviation,
            "auditReason": self.audit_reason,
            "reviewStatus": self.review_status.value,
            "updatedStatus": self.updated_status.value if self.updated_status else None,
            "reviewedBy": self.reviewed_by,
            "reviewedOn": self.reviewed_on,
            "remarks": self.remarks,
            "isPushedToMonthly": self.pushed_to_monthly,
        }
