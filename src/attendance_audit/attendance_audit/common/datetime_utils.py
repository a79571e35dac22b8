from __future__ import annotations

from datetime import date, datetime
from typing import Optional

MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")

EPOCH = date(1970, 1, 1)


def parse_roster_date(value: Optional[str]) -> Optional[date]:
    """Parse ``DD-MMM-YYYY`` (e.g. ``15-JAN-2024``); ``None`` when malformed."""
    if not value or not isinstance(value, str):
        return None
    parts = value.strip().split("-")
    if len(parts) != 3:
        return None
    day_s, month_s, year_s = parts
    month_s = month_s.strip().upper()
    if month_s not in MONTHS or not day_s.strip().isdigit() or not year_s.strip().isdigit():
        return None
    try:
        return date(int(year_s), MONTHS.index(month_s) + 1, int(day_s))
    except ValueError:
        return None


def format_roster_date(value: date) -> str:
    return f"{value.day:02d}-{MONTHS[value.month - 1]}-{value.year}"


def roster_weekday(value: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def month_token(value: str) -> str:
    """``MMM-YYYY`` part of a roster date string, uppercased."""
    parts = (value or "").strip().split("-")
    return "-".join(parts[1:3]).upper()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock it easily.
    """
    return datetime.now().date()
