from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a calendar holiday (date in ``DD-MMM-YYYY``)."""

    date: str
    label: str
