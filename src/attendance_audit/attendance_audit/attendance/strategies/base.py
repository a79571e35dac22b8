from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ...employees.model import Employee
from ...holidays.model import Holiday
from ...shifts.model import ShiftDefinition
from ..index import ReferenceIndex
from ..model import RawPunchRecord
from ..waiver import WaiverCounter


@dataclass(frozen=True)
class ClassificationContext:
    """Everything a strategy may look at for one record.

    Punches are already normalized: ``None`` means no punch.
    """

    record: RawPunchRecord
    index: ReferenceIndex
    employee: Optional[Employee]
    holiday: Optional[Holiday]
    is_weekly_off: bool
    in_minutes: Optional[int]
    out_minutes: Optional[int]

    @property
    def has_in(self) -> bool:
        return self.in_minutes is not None

    @property
    def has_out(self) -> bool:
        return self.out_minutes is not None

    @property
    def has_full_punch(self) -> bool:
        return self.has_in and self.has_out

    @property
    def has_no_punch(self) -> bool:
        return not self.has_in and not self.has_out


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    deviation: str
    shift: Optional[ShiftDefinition] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one branch of the decision tree classifies a record."""

    @abstractmethod
    def decide(self, ctx: ClassificationContext, *, waivers: WaiverCounter) -> StatusDecision:
        raise NotImplementedError
