from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..common.time_utils import parse_punch
from ..core.constants import NO_DEVIATION
from ..core.enums import AttendanceStatus


def record_key(employee_number: str, date: str) -> str:
    """Key used by downstream merges: ``EMPLOYEE|DATE`` (uppercased)."""
    return f"{(employee_number or '').upper()}|{(date or '').upper()}"


@dataclass(frozen=True)
class RawPunchRecord:
    """Domain entity: one employee-day as imported from the time clock."""

    employee_number: str
    date: str
    shift: str = ""
    in_time: str = ""
    out_time: str = ""
    employee_name: str = ""
    job_title: str = ""
    business_unit: str = ""
    department: str = ""
    sub_department: str = ""
    location: str = ""
    cost_center: str = ""
    reporting_manager: str = ""
    legal_entity: str = ""
    shift_start: str = ""
    shift_end: str = ""

    @property
    def in_minutes(self) -> Optional[int]:
        return parse_punch(self.in_time)

    @property
    def out_minutes(self) -> Optional[int]:
        return parse_punch(self.out_time)

    @property
    def key(self) -> str:
        return record_key(self.employee_number, self.date)


@dataclass(frozen=True)
class TimeAccounting:
    """Derived durations, all ``HH:MM``. ``None`` means "not computed"."""

    late_by: Optional[str] = None
    early_by: Optional[str] = None
    total_hours: Optional[str] = None
    effective_hours: Optional[str] = None
    over_time: Optional[str] = None
    short_hours_effective: Optional[str] = None
    short_hours_gross: Optional[str] = None


@dataclass(frozen=True)
class ClassifiedAttendanceRecord:
    """Read-model produced by one classification pass."""

    employee_number: str
    date: str
    shift: str
    in_time: str
    out_time: str
    employee_name: str
    job_title: str
    business_unit: str
    department: str
    sub_department: str
    location: str
    cost_center: str
    reporting_manager: str
    legal_entity: str
    shift_start: str
    shift_end: str
    status: AttendanceStatus
    deviation: str = NO_DEVIATION
    late_by: Optional[str] = None
    early_by: Optional[str] = None
    total_hours: Optional[str] = None
    effective_hours: Optional[str] = None
    over_time: Optional[str] = None
    short_hours_effective: Optional[str] = None
    short_hours_gross: Optional[str] = None

    @property
    def key(self) -> str:
        return record_key(self.employee_number, self.date)

    @property
    def is_waiver_eligible(self) -> bool:
        return self.deviation.startswith("Audit Waiver Eligible")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return {_CAMEL_KEYS.get(k, k): v for k, v in data.items()}


_CAMEL_KEYS = {
    "employee_number": "employeeNumber",
    "in_time": "inTime",
    "out_time": "outTime",
    "employee_name": "employeeName",
    "job_title": "jobTitle",
    "business_unit": "businessUnit",
    "sub_department": "subDepartment",
    "cost_center": "costCenter",
    "reporting_manager": "reportingManager",
    "legal_entity": "legalEntity",
    "shift_start": "shiftStart",
    "shift_end": "shiftEnd",
    "late_by": "lateBy",
    "early_by": "earlyBy",
    "total_hours": "totalHours",
    "effective_hours": "effectiveHours",
    "over_time": "overTime",
    "short_hours_effective": "totalShortHoursEffective",
    "short_hours_gross": "totalShortHoursGross",
}
