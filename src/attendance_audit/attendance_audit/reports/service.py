from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import ClassifiedAttendanceRecord
from ..common.datetime_utils import EPOCH, month_token, parse_roster_date
from ..common.time_utils import minutes_to_time, time_to_minutes
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class SummaryReport:
    rows: list[dict]


class AttendanceSummaryService:
    """Per employee and month roll-up of classified records.

    Reads the classified fields only; nothing is re-derived from punches.
    """

    def build(self, records: Iterable[ClassifiedAttendanceRecord]) -> SummaryReport:
        summary_map: dict[tuple[str, str], dict] = {}

        for r in records:
            key = (r.employee_number.upper(), month_token(r.date))
            s = summary_map.get(key)
            if not s:
                s = {
                    "employee_number": r.employee_number,
                    "employee_name": r.employee_name,
                    "department": r.department,
                    "month": key[1],
                    "first_date": parse_roster_date(r.date) or EPOCH,
                    "days": 0,
                    "status_counts": {status.value: 0 for status in AttendanceStatus},
                    "waiver_occasions": 0,
                    "total_minutes": 0,
                    "effective_minutes": 0,
                    "late_minutes": 0,
                }
                summary_map[key] = s

            s["days"] += 1
            s["status_counts"][r.status.value] += 1
            if r.is_waiver_eligible:
                s["waiver_occasions"] += 1
            s["total_minutes"] += time_to_minutes(r.total_hours)
            s["effective_minutes"] += time_to_minutes(r.effective_hours)
            s["late_minutes"] += time_to_minutes(r.late_by)

        rows = []
        for s in sorted(summary_map.values(), key=lambda x: (x["first_date"].year, x["first_date"].month, x["employee_number"])):
            rows.append(
                {
                    "employee_number": s["employee_number"],
                    "employee_name": s["employee_name"],
                    "department": s["department"] or "-",
                    "month": s["month"],
                    "days": s["days"],
                    "status_counts": s["status_counts"],
                    "waiver_occasions": s["waiver_occasions"],
                    "total_hours": minutes_to_time(s["total_minutes"]),
                    "effective_hours": minutes_to_time(s["effective_minutes"]),
                    "late_hours": minutes_to_time(s["late_minutes"]),
                }
            )
        return SummaryReport(rows=rows)
