"""Report window options shared by the period-based commands."""

from datetime import date
from typing import Callable

import click

from ledgerkit.cli.error_handling import fail
from ledgerkit.utils.date_parser import PERIODS, get_date_range, parse_date

PERIOD_FLAGS = ", ".join(f"--{period}" for period in PERIODS)


def period_options(func: Callable) -> Callable:
    """Add --start-date/--end-date and the period flags to a command."""
    for period in reversed(PERIODS):
        label = period.replace("-", " ")
        func = click.option(f"--{period}", is_flag=True, help=f"Report on {label}")(func)
    func = click.option(
        "--end-date", help="End date, inclusive (YYYY-MM-DD or 'today', 'end of month')"
    )(func)
    func = click.option(
        "--start-date", help="Start date, inclusive (YYYY-MM-DD or 'start of year')"
    )(func)
    return func


def pop_period_flags(kwargs: dict) -> dict[str, bool]:
    """Remove the period flags from command kwargs, keyed by period name."""
    return {period: kwargs.pop(period.replace("-", "_"), False) for period in PERIODS}


def _parse_bound(ctx: click.Context, label: str, value: str | None) -> date | None:
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        fail(ctx, f"Invalid {label} date: {e}")


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Turn the window options of a command into an inclusive date range.

    A period flag wins when given; otherwise the explicit bounds are parsed,
    and when neither bound is given ``default_range`` applies. Either bound
    may stay None for an open-ended window.
    """
    chosen = [period for period, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        fail(ctx, f"Only one period option ({PERIOD_FLAGS}) can be specified at a time.")
    if chosen and (start_date or end_date):
        fail(ctx, "Period options cannot be combined with --start-date or --end-date.")

    if chosen:
        return get_date_range(chosen[0])

    start = _parse_bound(ctx, "start", start_date)
    end = _parse_bound(ctx, "end", end_date)
    if start is None and end is None and default_range is not None:
        return default_range

    if start is not None and end is not None and start > end:
        fail(ctx, "Start date must not be after end date.")
    return start, end
