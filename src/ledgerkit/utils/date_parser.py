"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = (
    "this-month",
    "this-year",
    "this-week",
    "last-month",
    "last-year",
    "last-week",
)


def parse_date(date_str: str, today: date | None = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and a few
    relative forms: "today", "yesterday", and "start of"/"end of" followed by
    "month" or "year".

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    for prefix, pick in (("start of ", 0), ("end of ", 1)):
        if text.startswith(prefix):
            unit = text[len(prefix):]
            if unit == "month":
                return month_range(today)[pick]
            if unit == "year":
                return year_range(today)[pick]
            raise ValueError(f"Could not parse date '{date_str}': unknown unit '{unit}'")

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_range(day: date) -> tuple[date, date]:
    """First and last day of the calendar month containing ``day``."""
    start = day.replace(day=1)
    return start, start + relativedelta(months=1) - timedelta(days=1)


def year_range(day: date) -> tuple[date, date]:
    """First and last day of the calendar year containing ``day``."""
    return day.replace(month=1, day=1), day.replace(month=12, day=31)


def week_range(day: date) -> tuple[date, date]:
    """Monday through Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a reporting period.

    Periods cover whole calendar units: "this-month" runs from the first to
    the last day of the current month, even if that is in the future.

    Args:
        period: One of PERIODS
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return month_range(today)
    if period == "this-year":
        return year_range(today)
    if period == "this-week":
        return week_range(today)
    if period == "last-month":
        return month_range(today.replace(day=1) - timedelta(days=1))
    if period == "last-year":
        return year_range(today.replace(month=1, day=1) - timedelta(days=1))
    if period == "last-week":
        return week_range(today - timedelta(days=7))

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
