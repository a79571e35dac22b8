"""Mapping of JSON payloads (camelCase or snake_case keys) onto domain models.

Used at the HTTP boundary. Reference rows must carry their key field; punch rows
are accepted as-is so that dirty data is reported by the classifier instead of
rejecting the batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..common.validators import require_list, require_mapping, require_non_empty
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..shifts.model import ShiftDefinition
from .model import RawPunchRecord

_TRUE_STRINGS = {"true", "yes", "y", "1"}


def _get(row: dict, *names: str, default: Any = "") -> Any:
    for name in names:
        if name in row and row[name] is not None:
            return row[name]
    return default


def _text(row: dict, *names: str) -> str:
    return str(_get(row, *names)).strip()


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _int(value: Any, field_name: str, default: int = 0) -> int:
    if value in (None, ""):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def employee_from_dict(row: Any) -> Employee:
    row = require_mapping(row, "employee")
    return Employee(
        employee_number=require_non_empty(_text(row, "employeeNumber", "employee_number"), "employeeNumber"),
        full_name=_text(row, "fullName", "full_name"),
        active_status=_text(row, "activeStatus", "active_status"),
        shift_deviation_allowed=_flag(_get(row, "shiftDeviationAllowed", "shift_deviation_allowed", default=False)),
        job_title=_text(row, "jobTitle", "job_title"),
        business_unit=_text(row, "businessUnit", "business_unit"),
        department=_text(row, "department"),
        sub_department=_text(row, "subDepartment", "sub_department"),
        location=_text(row, "location"),
        cost_center=_text(row, "costCenter", "cost_center"),
        reporting_to=_text(row, "reportingTo", "reporting_to"),
        legal_entity=_text(row, "legalEntity", "legal_entity"),
    )


def shift_from_dict(row: Any) -> ShiftDefinition:
    row = require_mapping(row, "shift")
    shift_id = _text(row, "id")
    label = _text(row, "label")
    if not shift_id and not label:
        raise ValidationError("shift requires an id or a label")
    return ShiftDefinition(
        id=shift_id or label,
        label=label or shift_id,
        start_time=_text(row, "startTime", "start_time"),
        end_time=_text(row, "endTime", "end_time"),
        early_in_threshold=_int(_get(row, "earlyInThreshold", "early_in_threshold"), "earlyInThreshold"),
        allowed_late_count=_int(_get(row, "allowedLateCount", "allowed_late_count"), "allowedLateCount"),
    )


def holiday_from_dict(row: Any) -> Holiday:
    row = require_mapping(row, "holiday")
    return Holiday(date=require_non_empty(_text(row, "date"), "holiday date"), label=_text(row, "label"))


def punch_from_dict(row: Any) -> RawPunchRecord:
    row = require_mapping(row, "attendance record")
    return RawPunchRecord(
        employee_number=_text(row, "employeeNumber", "employee_number"),
        date=_text(row, "date"),
        shift=_text(row, "shift"),
        in_time=_text(row, "inTime", "in_time"),
        out_time=_text(row, "outTime", "out_time"),
        employee_name=_text(row, "employeeName", "employee_name"),
        job_title=_text(row, "jobTitle", "job_title"),
        business_unit=_text(row, "businessUnit", "business_unit"),
        department=_text(row, "department"),
        sub_department=_text(row, "subDepartment", "sub_department"),
        location=_text(row, "location"),
        cost_center=_text(row, "costCenter", "cost_center"),
        reporting_manager=_text(row, "reportingManager", "reporting_manager"),
        legal_entity=_text(row, "legalEntity", "legal_entity"),
        shift_start=_text(row, "shiftStart", "shift_start"),
        shift_end=_text(row, "shiftEnd", "shift_end"),
    )


@dataclass(frozen=True)
class RecalculatePayload:
    employees: list[Employee]
    records: list[RawPunchRecord]
    shifts: list[ShiftDefinition]
    holidays: list[Holiday]
    weekly_offs: list[int]


def parse_recalculate_payload(body: Any, *, default_weekly_offs: Optional[Iterable[int]] = None) -> RecalculatePayload:
    body = require_mapping(body, "request body")

    weekly_offs_raw = _get(body, "weeklyOffs", "weekly_offs", default=None)
    if weekly_offs_raw is None:
        weekly_offs = list(default_weekly_offs or [])
    else:
        weekly_offs = [_int(d, "weeklyOffs") for d in require_list(weekly_offs_raw, "weeklyOffs")]
    for day in weekly_offs:
        if not 0 <= day <= 6:
            raise ValidationError("weeklyOffs entries must be between 0 (Sunday) and 6 (Saturday)")

    return RecalculatePayload(
        employees=[employee_from_dict(r) for r in require_list(body.get("employees"), "employees")],
        records=[punch_from_dict(r) for r in require_list(_get(body, "attendance", "records", default=None), "attendance")],
        shifts=[shift_from_dict(r) for r in require_list(body.get("shifts"), "shifts")],
        holidays=[holiday_from_dict(r) for r in require_list(body.get("holidays"), "holidays")],
        weekly_offs=weekly_offs,
    )
