from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import EPOCH, parse_roster_date
from .model import RawPunchRecord


def _sort_key(record: RawPunchRecord):
    return (parse_roster_date(record.date) or EPOCH, record.employee_number or "")


def sort_records(records: Iterable[RawPunchRecord]) -> list[RawPunchRecord]:
    """Stable sort by (date, employee number); unparsable dates sort as 1970-01-01.

    The waiver counter relies on seeing each employee's month in date order.
    """
    return sorted(records, key=_sort_key)
