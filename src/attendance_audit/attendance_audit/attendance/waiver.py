from __future__ import annotations

from typing import Mapping, Optional

from ..common.datetime_utils import month_token


def waiver_month_key(employee_number: str, date: str) -> str:
    return f"{(employee_number or '').upper()}|{month_token(date)}"


class WaiverCounter:
    """Per-pass accumulator of waiver occasions, keyed by employee + month.

    Create one per classification pass. Counts only grow; an occasion that is
    later rejected by a reviewer is not given back.
    """

    def __init__(self, initial: Optional[Mapping[str, int]] = None):
        self._counts: dict[str, int] = dict(initial or {})

    def count(self, key: str) -> int:
        return self._counts.get(key, 0)

    def claim(self, key: str, allowed: int) -> Optional[int]:
        """Take the next occasion for ``key``; returns its number or ``None`` if exhausted."""
        current = self.count(key)
        if current >= allowed:
            return None
        self._counts[key] = current + 1
        return current + 1

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)
