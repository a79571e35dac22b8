from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import TimeAccounting


class TimeAccountingCalculator(ABC):
    """Calculator interface (Strategy Pattern for derived durations)."""

    @abstractmethod
    def compute(
        self,
        *,
        in_minutes: Optional[int],
        out_minutes: Optional[int],
        shift_start: int,
        shift_end: int,
    ) -> TimeAccounting:
        raise NotImplementedError
