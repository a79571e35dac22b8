from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import ClassifiedAttendanceRecord
from ..common.datetime_utils import format_roster_date, today_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus, ReviewStatus
from ..core.exceptions import ReviewStateError, ValidationError
from .model import AuditQueueEntry
from .repository import AuditQueueRepository

logger = logging.getLogger(__name__)


def _parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}")


class AuditReviewService:
    """Review workflow over ``Audit`` records of a classification pass.

    Decisions only ever change the ``status`` of the matching record when pushed;
    the waiver occasions consumed by the pass are never given back.
    """

    def __init__(self, queue: AuditQueueRepository):
        self._queue = queue

    def build_queue(self, records: Iterable[ClassifiedAttendanceRecord]) -> list[AuditQueueEntry]:
        entries = []
        seen: dict[str, int] = {}
        for r in records:
            if r.status != AttendanceStatus.AUDIT:
                continue

            entry_id = f"{r.employee_number}-{r.date}"
            seen[entry_id] = seen.get(entry_id, 0) + 1
            if seen[entry_id] > 1:
                logger.warning("Repeated audit record for %s on %s", r.employee_number, r.date)
                entry_id = f"{entry_id}-{seen[entry_id]}"

            entries.append(
                AuditQueueEntry(
                    entry_id=entry_id,
                    record_key=r.key,
                    employee_number=r.employee_number,
                    employee_name=r.employee_name,
                    date=r.date,
                    department=r.department,
                    location=r.location,
                    current_status=r.status,
                    deviation=r.deviation,
                    audit_reason=r.deviation or "Flagged for manual review",
                )
            )
        self._queue.replace_all(entries)
        logger.info("Audit queue rebuilt with %d entries", len(entries))
        return list(self._queue.list_all())

    def list_queue(self, *, review_status: Optional[ReviewStatus] = None) -> Sequence[AuditQueueEntry]:
        entries = self._queue.list_all()
        if review_status is None:
            return list(entries)
        return [e for e in entries if e.review_status == review_status]

    def _get_open(self, entry_id: str) -> AuditQueueEntry:
        entry = self._queue.get(entry_id)
        if not entry:
            raise ValidationError(f"Audit queue entry not found: {entry_id}")
        if entry.review_status.is_decided:
            raise ReviewStateError(f"Audit queue entry already {entry.review_status.value.lower()}: {entry_id}")
        return entry

    def update_status(
        self,
        *,
        entry_id: str,
        new_status,
        reviewer: str,
        reviewed_on: date | None = None,
    ) -> AuditQueueEntry:
        reviewer = require_non_empty(reviewer, "reviewer")
        status = _parse_status(new_status)
        entry = self._get_open(entry_id)

        updated = replace(
            entry,
            updated_status=status,
            review_status=ReviewStatus.REVIEWED,
            reviewed_by=reviewer,
            reviewed_on=format_roster_date(reviewed_on or today_local()),
            remarks=f"Status updated from {entry.current_status.value} to {status.value} by {reviewer}",
        )
        self._queue.save(updated)
        return updated

    def approve(self, *, entry_id: str, reviewer: str, reviewed_on: date | None = None) -> AuditQueueEntry:
        return self._decide(entry_id, ReviewStatus.APPROVED, reviewer, reviewed_on)

    def reject(self, *, entry_id: str, reviewer: str, reviewed_on: date | None = None) -> AuditQueueEntry:
        return self._decide(entry_id, ReviewStatus.REJECTED, reviewer, reviewed_on)

    def _decide(self, entry_id: str, decision: ReviewStatus, reviewer: str, reviewed_on: date | None) -> AuditQueueEntry:
        reviewer = require_non_empty(reviewer, "reviewer")
        entry = self._get_open(entry_id)

        verb = "Approved" if decision == ReviewStatus.APPROVED else "Rejected"
        decided = replace(
            entry,
            review_status=decision,
            reviewed_by=reviewer,
            reviewed_on=format_roster_date(reviewed_on or today_local()),
            remarks=entry.remarks or f"{verb} by {reviewer}",
        )
        self._queue.save(decided)
        logger.info("Audit entry %s %s by %s", entry_id, verb.lower(), reviewer)
        return decided

    def push_to_monthly(self, records: Iterable[ClassifiedAttendanceRecord]) -> list[ClassifiedAttendanceRecord]:
        """Apply approved status overrides to classified records by ``EMPLOYEE|DATE`` key.

        Approved entries with an updated status are flagged as pushed; every other
        entry is flagged as not pushed. Records keep their order.
        """
        overrides: dict[str, AttendanceStatus] = {}
        for entry in self._queue.list_all():
            pushed = entry.review_status == ReviewStatus.APPROVED and entry.updated_status is not None
            if pushed:
                overrides[entry.record_key] = entry.updated_status
            if entry.pushed_to_monthly != pushed:
                self._queue.save(replace(entry, pushed_to_monthly=pushed))

        merged = [replace(r, status=overrides[r.key]) if r.key in overrides else r for r in records]
        logger.info("Pushed %d approved audit overrides", len(overrides))
        return merged
