from __future__ import annotations

import pytest

from attendance_audit.attendance.model import RawPunchRecord
from attendance_audit.employees.model import Employee
from attendance_audit.holidays.model import Holiday
from attendance_audit.shifts.model import ShiftDefinition


def _punch(employee_number="E1", date="01-JAN-2024", in_time="09:00", out_time="18:00", shift="GS", **extra):
    return RawPunchRecord(
        employee_number=employee_number,
        date=date,
        shift=shift,
        in_time=in_time,
        out_time=out_time,
        **extra,
    )


@pytest.fixture
def make_punch():
    return _punch


@pytest.fixture
def general_shift():
    return ShiftDefinition(
        id="GS",
        label="General Shift",
        start_time="09:00",
        end_time="18:00",
        early_in_threshold=30,
        allowed_late_count=2,
    )


@pytest.fixture
def night_shift():
    return ShiftDefinition(id="NS", label="Night Shift", start_time="22:00", end_time="06:00", early_in_threshold=60)


@pytest.fixture
def employee():
    return Employee(
        employee_number="E1",
        full_name="Asha Rao",
        active_status="Active",
        job_title="Analyst",
        department="Finance",
        location="Chennai",
        cost_center="CC-10",
        reporting_to="M1",
    )


@pytest.fixture
def pongal():
    return Holiday(date="15-JAN-2024", label="Pongal")
