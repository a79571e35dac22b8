from datetime import date

from attendance_audit.common.datetime_utils import (
    format_roster_date,
    month_token,
    parse_roster_date,
    roster_weekday,
)


def test_parse_roster_date_is_case_insensitive():
    assert parse_roster_date("15-JAN-2024") == date(2024, 1, 15)
    assert parse_roster_date("05-feb-2024") == date(2024, 2, 5)


def test_parse_roster_date_falls_back_to_none():
    assert parse_roster_date("") is None
    assert parse_roster_date("2024-01-15") is None
    assert parse_roster_date("15-XYZ-2024") is None
    assert parse_roster_date("31-FEB-2024") is None
    assert parse_roster_date(None) is None


def test_roster_weekday_starts_on_sunday():
    assert roster_weekday(date(2024, 1, 7)) == 0
    assert roster_weekday(date(2024, 1, 1)) == 1
    assert roster_weekday(date(2024, 1, 6)) == 6


def test_month_token_and_format():
    assert month_token("01-jan-2024") == "JAN-2024"
    assert format_roster_date(date(2024, 3, 9)) == "09-MAR-2024"


def test_out_of_range_day_does_not_roll_over():
    assert parse_roster_date("31-FEB-2024") is None
    assert parse_roster_date("29-FEB-2024") == date(2024, 2, 29)
