from __future__ import annotations

from dataclasses import replace

import pytest

from attendance_audit.attendance.service import AttendanceClassificationService, classify_attendance
from attendance_audit.attendance.waiver import WaiverCounter
from attendance_audit.core.enums import AttendanceStatus


@pytest.fixture
def run(employee, general_shift, pongal):
    def _run(records, *, employees=None, shifts=None, weekly_offs=(0,), holidays=None):
        return classify_attendance(
            employees=[employee] if employees is None else employees,
            records=records,
            shifts=[general_shift] if shifts is None else shifts,
            holidays=[pongal] if holidays is None else holidays,
            weekly_offs=weekly_offs,
        )

    return _run


def test_late_in_first_occasion_with_time_accounting(run, make_punch):
    [rec] = run([make_punch(in_time="09:45", out_time="18:00")])

    assert rec.status == AttendanceStatus.AUDIT
    assert rec.deviation == "Audit Waiver Eligible (Occasion 1/2) - Late In (45m)"
    assert rec.deviation.endswith("Late In (45m)")
    assert rec.late_by == "00:45"
    assert rec.early_by == "00:00"
    assert rec.total_hours == "08:15"
    assert rec.effective_hours == "07:15"
    assert rec.over_time == "00:00"
    assert rec.shift_start == "09:00"
    assert rec.shift_end == "18:00"


def test_waiver_allowance_runs_out_after_cap(run, make_punch):
    out = run(
        [
            make_punch(date="01-JAN-2024", in_time="09:45"),
            make_punch(date="02-JAN-2024", in_time="09:20"),
            make_punch(date="03-JAN-2024", in_time="09:10"),
        ]
    )

    assert [r.deviation for r in out] == [
        "Audit Waiver Eligible (Occasion 1/2) - Late In (45m)",
        "Audit Waiver Eligible (Occasion 2/2) - Late In (20m)",
        "Late In (10m)",
    ]
    assert all(r.status == AttendanceStatus.AUDIT for r in out)


def test_waiver_counter_follows_date_order_not_input_order(run, make_punch):
    out = run(
        [
            make_punch(date="03-JAN-2024", in_time="09:10"),
            make_punch(date="01-JAN-2024", in_time="09:45"),
            make_punch(date="02-JAN-2024", out_time="17:30"),
        ]
    )

    assert [r.date for r in out] == ["01-JAN-2024", "02-JAN-2024", "03-JAN-2024"]
    assert out[1].deviation == "Audit Waiver Eligible (Occasion 2/2) - Early Out (30m)"
    assert out[2].deviation == "Late In (10m)"


def test_waiver_counter_resets_each_month(run, make_punch):
    out = run(
        [
            make_punch(date="01-JAN-2024", in_time="09:05"),
            make_punch(date="02-JAN-2024", in_time="09:05"),
            make_punch(date="03-JAN-2024", in_time="09:05"),
            make_punch(date="01-FEB-2024", in_time="09:05"),
        ]
    )

    assert out[2].deviation == "Late In (5m)"
    assert out[3].deviation == "Audit Waiver Eligible (Occasion 1/2) - Late In (5m)"


def test_monthly_cap_is_never_exceeded(run, make_punch):
    records = [make_punch(date=f"{day:02d}-JAN-2024", in_time="09:30") for day in range(1, 7)]
    out = run(records, weekly_offs=())

    assert sum(1 for r in out if r.is_waiver_eligible) == 2


def test_custom_allowed_late_count(run, make_punch, general_shift):
    shift = replace(general_shift, allowed_late_count=3)
    out = run([make_punch(date=f"0{d}-JAN-2024", in_time="09:01") for d in (1, 2, 3, 4)], shifts=[shift])

    assert out[0].deviation == "Audit Waiver Eligible (Occasion 1/2) - Late In (1m)"
    assert out[2].deviation == "Audit Waiver Eligible (Occasion 3/2) - Late In (1m)"
    assert out[3].deviation == "Late In (1m)"


def test_zero_allowed_late_count_falls_back_to_two(run, make_punch, general_shift):
    shift = replace(general_shift, allowed_late_count=0)
    out = run([make_punch(date=f"0{d}-JAN-2024", in_time="09:01") for d in (1, 2, 3)], shifts=[shift])

    assert sum(1 for r in out if r.is_waiver_eligible) == 2


def test_double_violation_does_not_consume_waiver(run, make_punch):
    out = run(
        [
            make_punch(date="01-JAN-2024", in_time="09:30", out_time="17:00"),
            make_punch(date="02-JAN-2024", in_time="09:30"),
        ]
    )

    assert out[0].deviation == "Double Violation (Late + Early)"
    assert out[0].late_by == "00:30"
    assert out[0].early_by == "01:00"
    assert out[1].deviation == "Audit Waiver Eligible (Occasion 1/2) - Late In (30m)"


def test_shift_deviation_allowed_skips_waiver(run, make_punch, employee):
    flexible = replace(employee, shift_deviation_allowed=True)
    [rec] = run([make_punch(in_time="09:45")], employees=[flexible])

    assert rec.status == AttendanceStatus.AUDIT
    assert rec.deviation == "Late In (45m)"


def test_very_early_in_is_flagged(run, make_punch):
    [rec] = run([make_punch(in_time="08:15", out_time="18:00")])

    assert rec.status == AttendanceStatus.AUDIT
    assert rec.deviation == "Very Early In (45m)"


def test_early_in_within_threshold_is_clean(run, make_punch):
    [rec] = run([make_punch(in_time="08:30", out_time="18:30")])

    assert rec.status == AttendanceStatus.CLEAN
    assert rec.deviation == "On Time"
    assert rec.over_time == "00:30"


def test_on_time_full_day_has_no_shortfall(run, make_punch):
    [rec] = run([make_punch(in_time="09:00", out_time="18:00")])

    assert rec.status == AttendanceStatus.CLEAN
    assert rec.total_hours == "09:00"
    assert rec.effective_hours == "08:00"
    assert rec.short_hours_effective == "00:00"
    assert rec.short_hours_gross == "00:00"


def test_overnight_shift_wraps_midnight(run, make_punch, employee, night_shift):
    [rec] = run([make_punch(shift="NS", in_time="22:00", out_time="06:00")], shifts=[night_shift])

    assert rec.status == AttendanceStatus.CLEAN
    assert rec.total_hours == "08:00"
    assert rec.effective_hours == "07:00"
    assert rec.short_hours_effective == "01:00"
    assert rec.short_hours_gross == "01:00"


def test_inactive_employee_is_id_error_even_when_on_time(run, make_punch, employee):
    inactive = replace(employee, active_status="Terminated")
    [rec] = run([make_punch()], employees=[inactive])

    assert rec.status == AttendanceStatus.ID_ERROR
    assert rec.deviation == "Staff Inactive/Terminated"


def test_unknown_employee_is_id_error(run, make_punch):
    [rec] = run([make_punch(employee_number="X9", employee_name="Walk-in")])

    assert rec.status == AttendanceStatus.ID_ERROR
    assert rec.deviation == "ID Not Found in Master"
    assert rec.employee_name == "Walk-in"
    assert rec.legal_entity == "N/A"


def test_empty_master_marks_every_record_id_error(run, make_punch):
    out = run([make_punch(), make_punch(date="02-JAN-2024")], employees=[])

    assert {r.status for r in out} == {AttendanceStatus.ID_ERROR}


def test_employee_lookup_is_case_insensitive(run, make_punch):
    [rec] = run([make_punch(employee_number="e1")])

    assert rec.status == AttendanceStatus.CLEAN
    assert rec.employee_name == "Asha Rao"


def test_holiday_without_punches(run, make_punch):
    [rec] = run([make_punch(date="15-JAN-2024", in_time="NA", out_time="NA")])

    assert rec.status == AttendanceStatus.HOLIDAY
    assert rec.deviation == "Pongal"
    assert rec.total_hours == "00:00"
    assert rec.effective_hours == "00:00"
    assert rec.late_by is None


def test_holiday_wins_over_weekly_off(run, make_punch, pongal):
    sunday_holiday = replace(pongal, date="14-JAN-2024")
    [rec] = run([make_punch(date="14-jan-2024", in_time="", out_time="")], holidays=[sunday_holiday])

    assert rec.status == AttendanceStatus.HOLIDAY


def test_weekly_off_and_absent(run, make_punch):
    out = run(
        [
            make_punch(date="07-JAN-2024", in_time="00:00", out_time="00:00"),
            make_punch(date="08-JAN-2024", in_time="NA", out_time=""),
        ]
    )

    assert (out[0].status, out[0].deviation) == (AttendanceStatus.WEEKLY_OFF, "Standard Weekly Off")
    assert (out[1].status, out[1].deviation) == (AttendanceStatus.ABSENT, "No Punch Records")


def test_single_punch_is_audit(run, make_punch):
    out = run(
        [
            make_punch(date="01-JAN-2024", in_time="09:00", out_time="NA"),
            make_punch(date="02-JAN-2024", in_time="NA", out_time="18:00"),
        ]
    )

    assert (out[0].status, out[0].deviation) == (AttendanceStatus.AUDIT, "Missing Out Punch")
    assert (out[1].status, out[1].deviation) == (AttendanceStatus.AUDIT, "Missing In Punch")
    assert out[0].total_hours == "00:00"
    assert out[0].over_time is None


def test_single_punch_on_holiday_is_still_audit(run, make_punch):
    [rec] = run([make_punch(date="15-JAN-2024", in_time="09:00", out_time="NA")])

    assert rec.deviation == "Missing Out Punch"


def test_worked_off_days(run, make_punch):
    out = run(
        [
            make_punch(date="07-JAN-2024", in_time="10:00", out_time="14:00"),
            make_punch(date="15-JAN-2024", in_time="10:00", out_time="15:00"),
        ]
    )

    assert (out[0].status, out[0].deviation) == (AttendanceStatus.WORKED_OFF, "Worked on Weekly Off")
    assert (out[1].status, out[1].deviation) == (AttendanceStatus.WORKED_OFF, "Worked on Holiday: Pongal")
    assert out[1].total_hours == "05:00"


def test_undefined_shift(run, make_punch):
    [rec] = run([make_punch(shift="ROT-7", shift_start="07:00", shift_end="16:00")])

    assert rec.status == AttendanceStatus.AUDIT
    assert rec.deviation == "Undefined Shift: ROT-7"
    assert rec.shift_start == "07:00"
    assert rec.late_by == "02:00"


def test_blank_undefined_shift_reports_raw_field(run, make_punch):
    [rec] = run([make_punch(shift="")], shifts=[])

    assert rec.status == AttendanceStatus.AUDIT
    assert rec.deviation == "Undefined Shift: "


def test_shift_resolves_by_label_and_defaults_to_gs(run, make_punch):
    out = run(
        [
            make_punch(date="01-JAN-2024", shift="general shift"),
            make_punch(date="02-JAN-2024", shift=""),
        ]
    )

    assert [r.status for r in out] == [AttendanceStatus.CLEAN, AttendanceStatus.CLEAN]


def test_employee_fields_are_copied(run, make_punch):
    [rec] = run([make_punch(department="Old Dept", business_unit="BU-1")])

    assert rec.department == "Finance"
    assert rec.business_unit == "BU-1"
    assert rec.reporting_manager == "M1"
    assert rec.legal_entity == "N/A"


def test_output_is_sorted_and_same_length(run, make_punch):
    out = run(
        [
            make_punch(employee_number="E2", date="02-JAN-2024"),
            make_punch(employee_number="E1", date="02-JAN-2024"),
            make_punch(employee_number="E1", date="bad-date"),
            make_punch(employee_number="E1", date="01-JAN-2024"),
        ]
    )

    assert len(out) == 4
    assert [(r.employee_number, r.date) for r in out] == [
        ("E1", "bad-date"),
        ("E1", "01-JAN-2024"),
        ("E1", "02-JAN-2024"),
        ("E2", "02-JAN-2024"),
    ]


def test_recalculation_is_deterministic(run, make_punch):
    records = [
        make_punch(date="02-JAN-2024", in_time="09:30"),
        make_punch(date="01-JAN-2024", in_time="09:45"),
        make_punch(employee_number="E2", date="01-JAN-2024"),
        make_punch(date="03-JAN-2024", in_time="NA"),
    ]

    assert run(records) == run(records)


def test_each_pass_starts_with_a_fresh_counter(employee, general_shift, make_punch):
    service = AttendanceClassificationService()
    records = [make_punch(in_time="09:30")]

    first = service.recalculate(employees=[employee], records=records, shifts=[general_shift])
    second = service.recalculate(employees=[employee], records=records, shifts=[general_shift])

    assert first[0].deviation == second[0].deviation == "Audit Waiver Eligible (Occasion 1/2) - Late In (30m)"


def test_seeded_counter_continues_from_previous_run(employee, general_shift, make_punch):
    waivers = WaiverCounter(initial={"E1|JAN-2024": 2})
    [rec] = AttendanceClassificationService().recalculate(
        employees=[employee],
        records=[make_punch(date="20-JAN-2024", in_time="09:30")],
        shifts=[general_shift],
        waivers=waivers,
    )

    assert rec.deviation == "Late In (30m)"
    assert waivers.count("E1|JAN-2024") == 2
