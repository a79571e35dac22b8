"""Example: use the service layer directly (no Flask).

Classifies one week of punches for a single employee and prints the result.
"""

import importlib

from config import get_settings_module

from attendance_audit.attendance.model import RawPunchRecord
from attendance_audit.container import build_container
from attendance_audit.employees.model import Employee
from attendance_audit.holidays.model import Holiday
from attendance_audit.shifts.model import ShiftDefinition


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={"DEFAULT_SHIFT_TOKEN": settings.DEFAULT_SHIFT_TOKEN})

    employees = [Employee(employee_number="E1", full_name="Asha Rao", department="Finance")]
    shifts = [ShiftDefinition(id="GS", label="General Shift", start_time="09:00", end_time="18:00", early_in_threshold=30)]
    holidays = [Holiday(date="15-JAN-2024", label="Pongal")]
    punches = [
        RawPunchRecord(employee_number="E1", date="01-JAN-2024", shift="GS", in_time="09:45", out_time="18:00"),
        RawPunchRecord(employee_number="E1", date="02-JAN-2024", shift="GS", in_time="09:20", out_time="18:05"),
        RawPunchRecord(employee_number="E1", date="03-JAN-2024", shift="GS", in_time="09:10", out_time="18:00"),
        RawPunchRecord(employee_number="E1", date="04-JAN-2024", shift="GS", in_time="09:00", out_time="NA"),
        RawPunchRecord(employee_number="E1", date="07-JAN-2024", shift="GS", in_time="NA", out_time="NA"),
        RawPunchRecord(employee_number="E1", date="15-JAN-2024", shift="GS", in_time="NA", out_time="NA"),
    ]

    records = container.classification_service.recalculate(
        employees=employees,
        records=punches,
        shifts=shifts,
        holidays=holidays,
        weekly_offs=settings.DEFAULT_WEEKLY_OFFS,
    )
    for r in records:
        print(f"{r.date}  {r.status.value:<10} {r.total_hours}  {r.deviation}")

    for row in container.summary_service.build(records).rows:
        print(row)


if __name__ == "__main__":
    main()
