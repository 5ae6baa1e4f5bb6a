"""Tests for date parsing and reporting periods."""

import pytest
from datetime import date, timedelta

from ledgerkit.utils.date_parser import PERIODS, get_date_range, month_range, parse_date

REFERENCE = date(2024, 3, 14)  # a Thursday


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_written_date():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    assert parse_date("yesterday", today=REFERENCE) == date(2024, 3, 13)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("start of month", date(2024, 3, 1)),
        ("end of month", date(2024, 3, 31)),
        ("Start of Year", date(2024, 1, 1)),
        ("end of year", date(2024, 12, 31)),
    ],
)
def test_parse_period_boundaries(text, expected):
    assert parse_date(text, today=REFERENCE) == expected


def test_parse_unknown_unit():
    with pytest.raises(ValueError, match="unknown unit"):
        parse_date("start of decade", today=REFERENCE)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not-a-date")


def test_month_range_leap_february():
    assert month_range(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


@pytest.mark.parametrize(
    "period,expected",
    [
        ("this-month", (date(2024, 3, 1), date(2024, 3, 31))),
        ("this-year", (date(2024, 1, 1), date(2024, 12, 31))),
        ("this-week", (date(2024, 3, 11), date(2024, 3, 17))),
        ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
        ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
        ("last-week", (date(2024, 3, 4), date(2024, 3, 10))),
    ],
)
def test_get_date_range(period, expected):
    assert get_date_range(period, today=REFERENCE) == expected


def test_last_month_across_year_boundary():
    assert get_date_range("last-month", today=date(2024, 1, 20)) == (
        date(2023, 12, 1),
        date(2023, 12, 31),
    )


def test_every_period_supported():
    for period in PERIODS:
        start, end = get_date_range(period, today=REFERENCE)
        assert start <= end


def test_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-month")
