from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import ACTIVE_STATUS


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the employee master."""

    employee_number: str
    full_name: str = ""
    active_status: str = ACTIVE_STATUS
    shift_deviation_allowed: bool = False
    job_title: str = ""
    business_unit: str = ""
    department: str = ""
    sub_department: str = ""
    location: str = ""
    cost_center: str = ""
    reporting_to: str = ""
    legal_entity: str = ""

    @property
    def is_active(self) -> bool:
        return self.active_status == ACTIVE_STATUS
