from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_SHIFT_TOKEN
from .strategies.base import AttendanceStrategy, ClassificationContext
from .strategies.id_error_strategy import InactiveEmployeeStrategy, UnknownEmployeeStrategy
from .strategies.no_punch_strategy import NoPunchStrategy
from .strategies.single_punch_strategy import SinglePunchStrategy
from .strategies.worked_off_strategy import WorkedOffStrategy
from .strategies.workday_strategy import WorkdayStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: pick the branch of the decision tree for a record.

    Rules are tried in precedence order and the first match wins.
    """

    default_shift_token: str = DEFAULT_SHIFT_TOKEN
    _workday: WorkdayStrategy = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._workday = WorkdayStrategy(self.default_shift_token)

    def for_record(self, ctx: ClassificationContext) -> AttendanceStrategy:
        if not ctx.employee:
            return UnknownEmployeeStrategy()
        if not ctx.employee.is_active:
            return InactiveEmployeeStrategy()
        if ctx.has_no_punch:
            return NoPunchStrategy()
        if not ctx.has_full_punch:
            return SinglePunchStrategy()
        if ctx.holiday or ctx.is_weekly_off:
            return WorkedOffStrategy()
        return self._workday
