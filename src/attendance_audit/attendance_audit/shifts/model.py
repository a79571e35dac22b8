from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_ALLOWED_LATE_COUNT


@dataclass(frozen=True)
class ShiftDefinition:
    """Domain entity: a shift from the shift catalogue.

    ``allowed_late_count`` is the number of punctuality occasions per month that
    can be flagged as waiver eligible; 0 falls back to the default of 2.
    """

    id: str
    label: str
    start_time: str
    end_time: str
    early_in_threshold: int = 0
    allowed_late_count: int = DEFAULT_ALLOWED_LATE_COUNT

    @property
    def late_cap(self) -> int:
        return self.allowed_late_count or DEFAULT_ALLOWED_LATE_COUNT
