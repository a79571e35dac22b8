from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..employees.model import Employee
from ..holidays.model import Holiday
from ..shifts.model import ShiftDefinition


@dataclass(frozen=True)
class ReferenceIndex:
    """Case-insensitive lookups over the reference inputs of one pass.

    Each shift is inserted twice (by id and by label) into the same dict so both
    tokens always resolve to the same object.
    """

    shifts: Mapping[str, ShiftDefinition] = field(default_factory=dict)
    holidays: Mapping[str, Holiday] = field(default_factory=dict)
    weekly_offs: frozenset = frozenset()
    employees: Mapping[str, Employee] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        employees: Iterable[Employee] = (),
        shifts: Iterable[ShiftDefinition] = (),
        holidays: Iterable[Holiday] = (),
        weekly_offs: Iterable[int] = (),
    ) -> "ReferenceIndex":
        shift_map: dict[str, ShiftDefinition] = {}
        for s in shifts:
            shift_map[(s.id or "").lower()] = s
            shift_map[(s.label or "").lower()] = s

        return cls(
            shifts=shift_map,
            holidays={(h.date or "").upper(): h for h in holidays},
            weekly_offs=frozenset(int(d) for d in weekly_offs),
            employees={(e.employee_number or "").upper(): e for e in employees},
        )

    def find_employee(self, employee_number: str) -> Optional[Employee]:
        return self.employees.get((employee_number or "").upper())

    def find_shift(self, token: str) -> Optional[ShiftDefinition]:
        return self.shifts.get((token or "").lower())

    def find_holiday(self, date: str) -> Optional[Holiday]:
        return self.holidays.get((date or "").upper())

    def is_weekly_off(self, weekday: Optional[int]) -> bool:
        return weekday is not None and weekday in self.weekly_offs
