from __future__ import annotations

from dataclasses import dataclass

from .accounting.calculator.standard_calculator import StandardTimeAccountingCalculator
from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceClassificationService
from .core.constants import DEFAULT_SHIFT_TOKEN
from .reports.service import AttendanceSummaryService
from .reviews.repository import InMemoryAuditQueueRepository
from .reviews.service import AuditReviewService


@dataclass(frozen=True)
class Container:
    audit_queue_repo: InMemoryAuditQueueRepository

    classification_service: AttendanceClassificationService
    review_service: AuditReviewService
    summary_service: AttendanceSummaryService

    default_weekly_offs: tuple[int, ...] = ()


def build_container(*, settings: dict | None = None) -> Container:
    settings = settings or {}
    shift_token = str(settings.get("DEFAULT_SHIFT_TOKEN") or DEFAULT_SHIFT_TOKEN)

    audit_queue_repo = InMemoryAuditQueueRepository()

    classification_service = AttendanceClassificationService(
        strategy_factory=AttendanceStrategyFactory(default_shift_token=shift_token),
        calculator=StandardTimeAccountingCalculator(),
    )
    review_service = AuditReviewService(audit_queue_repo)
    summary_service = AttendanceSummaryService()

    return Container(
        audit_queue_repo=audit_queue_repo,
        classification_service=classification_service,
        review_service=review_service,
        summary_service=summary_service,
        default_weekly_offs=tuple(int(d) for d in settings.get("DEFAULT_WEEKLY_OFFS", ())),
    )
