from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from ..accounting.calculator.base import TimeAccountingCalculator
from ..accounting.calculator.standard_calculator import StandardTimeAccountingCalculator
from ..common.datetime_utils import parse_roster_date, roster_weekday
from ..common.time_utils import time_to_minutes
from ..core.constants import DEFAULT_LEGAL_ENTITY, ZERO_TIME
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..shifts.model import ShiftDefinition
from .factory import AttendanceStrategyFactory
from .index import ReferenceIndex
from .model import ClassifiedAttendanceRecord, RawPunchRecord
from .ordering import sort_records
from .strategies.base import ClassificationContext, StatusDecision
from .waiver import WaiverCounter

logger = logging.getLogger(__name__)


class AttendanceClassificationService:
    """Runs a full classification pass over a punch list.

    The pass is a single ordered fold: build the reference index, sort the
    records, then classify each one while threading one ``WaiverCounter``.
    Nothing is kept between calls.
    """

    def __init__(
        self,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: Optional[TimeAccountingCalculator] = None,
    ):
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or StandardTimeAccountingCalculator()

    def recalculate(
        self,
        *,
        employees: Iterable[Employee],
        records: Iterable[RawPunchRecord],
        shifts: Iterable[ShiftDefinition] = (),
        holidays: Iterable[Holiday] = (),
        weekly_offs: Iterable[int] = (),
        waivers: Optional[WaiverCounter] = None,
    ) -> list[ClassifiedAttendanceRecord]:
        index = ReferenceIndex.build(employees=employees, shifts=shifts, holidays=holidays, weekly_offs=weekly_offs)
        waivers = waivers if waivers is not None else WaiverCounter()

        out = [self._classify(record, index, waivers) for record in sort_records(records)]

        if logger.isEnabledFor(logging.INFO):
            counts = Counter(r.status.value for r in out)
            logger.info("Classified %d attendance records: %s", len(out), dict(sorted(counts.items())))
        return out

    def _context(self, record: RawPunchRecord, index: ReferenceIndex) -> ClassificationContext:
        day = parse_roster_date(record.date)
        employee = index.find_employee(record.employee_number)
        if not employee:
            logger.debug("Employee %r not found in master", record.employee_number)
        return ClassificationContext(
            record=record,
            index=index,
            employee=employee,
            holiday=index.find_holiday(record.date),
            is_weekly_off=index.is_weekly_off(roster_weekday(day) if day else None),
            in_minutes=record.in_minutes,
            out_minutes=record.out_minutes,
        )

    def _classify(self, record: RawPunchRecord, index: ReferenceIndex, waivers: WaiverCounter) -> ClassifiedAttendanceRecord:
        ctx = self._context(record, index)
        decision = self._factory.for_record(ctx).decide(ctx, waivers=waivers)

        if decision.shift:
            shift_start, shift_end = decision.shift.start_time, decision.shift.end_time
        else:
            shift_start, shift_end = record.shift_start or ZERO_TIME, record.shift_end or ZERO_TIME

        accounting = self._calculator.compute(
            in_minutes=ctx.in_minutes,
            out_minutes=ctx.out_minutes,
            shift_start=time_to_minutes(shift_start),
            shift_end=time_to_minutes(shift_end),
        )
        return _build_record(record, ctx.employee, decision, shift_start, shift_end, accounting)


def _build_record(record, employee, decision: StatusDecision, shift_start, shift_end, accounting) -> ClassifiedAttendanceRecord:
    def pick(emp_value: Optional[str], raw_value: str) -> str:
        return emp_value or raw_value

    return ClassifiedAttendanceRecord(
        employee_number=record.employee_number,
        date=record.date,
        shift=record.shift,
        in_time=record.in_time,
        out_time=record.out_time,
        employee_name=pick(employee and employee.full_name, record.employee_name),
        job_title=pick(employee and employee.job_title, record.job_title),
        business_unit=pick(employee and employee.business_unit, record.business_unit),
        department=pick(employee and employee.department, record.department),
        sub_department=pick(employee and employee.sub_department, record.sub_department),
        location=pick(employee and employee.location, record.location),
        cost_center=pick(employee and employee.cost_center, record.cost_center),
        reporting_manager=pick(employee and employee.reporting_to, record.reporting_manager),
        legal_entity=pick(employee and employee.legal_entity, record.legal_entity) or DEFAULT_LEGAL_ENTITY,
        shift_start=shift_start,
        shift_end=shift_end,
        status=decision.status,
        deviation=decision.deviation,
        late_by=accounting.late_by,
        early_by=accounting.early_by,
        total_hours=accounting.total_hours,
        effective_hours=accounting.effective_hours,
        over_time=accounting.over_time,
        short_hours_effective=accounting.short_hours_effective,
        short_hours_gross=accounting.short_hours_gross,
    )


def classify_attendance(
    *,
    employees: Iterable[Employee],
    records: Iterable[RawPunchRecord],
    shifts: Iterable[ShiftDefinition] = (),
    holidays: Iterable[Holiday] = (),
    weekly_offs: Iterable[int] = (),
) -> list[ClassifiedAttendanceRecord]:
    """Convenience wrapper: one pass with the standard factory and calculator."""
    return AttendanceClassificationService().recalculate(
        employees=employees,
        records=records,
        shifts=shifts,
        holidays=holidays,
        weekly_offs=weekly_offs,
    )
