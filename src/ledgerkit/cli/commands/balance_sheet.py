"""Balance sheet command."""

from datetime import date

import click
from ledgerkit.cli.error_handling import fail, handle_domain_error
from ledgerkit.cli.formatting import WIDTH, echo_row, echo_section, echo_status, money
from ledgerkit.domain.errors import DomainError
from ledgerkit.domain.reports import ReportService
from ledgerkit.utils.date_parser import parse_date


@click.command("balance-sheet")
@click.option("--as-of", help="Position date, inclusive (defaults to today)")
@click.option(
    "--period-start",
    help="Start of the period whose result is shown with equity (defaults to all history)",
)
@click.pass_context
def balance_sheet(ctx, as_of: str | None, period_start: str | None):
    """Show assets, liabilities and equity at a date."""
    db = ctx.obj["db"]

    try:
        position_date = parse_date(as_of) if as_of else date.today()
        start = parse_date(period_start) if period_start else None
    except ValueError as e:
        fail(ctx, f"Invalid date: {e}")
        return

    try:
        sheet, _ = ReportService(db).balance_sheet(as_of=position_date, period_start=start)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nBalance Sheet as of {position_date}")
    click.echo("-" * WIDTH)
    echo_section(sheet.assets)
    if not sheet.contra_assets.is_empty:
        echo_section(sheet.contra_assets, indent=1)
    echo_row("TOTAL ASSETS", sheet.total_assets)
    click.echo()

    echo_section(sheet.liabilities)
    if not sheet.contra_liabilities.is_empty:
        echo_section(sheet.contra_liabilities, indent=1)
    echo_row("TOTAL LIABILITIES", sheet.total_liabilities)
    click.echo()

    echo_section(sheet.equity)
    echo_row("Period Result", sheet.net_period_result, indent=1)
    echo_row("TOTAL LIABILITIES AND EQUITY", sheet.total_liabilities_and_equity)
    click.echo("=" * WIDTH)

    echo_row("Equity (assets - liabilities)", sheet.equity_balance_derived)
    echo_row("Equity (equity accounts)", sheet.equity_book)
    echo_row("Unclosed result", sheet.unclosed_result)
    echo_status(
        sheet.is_balanced,
        "Assets equal liabilities plus equity.",
        f"Balance sheet does not balance (difference {money(sheet.difference)}).",
    )


def register_commands(cli):
    """Register balance sheet command with main CLI."""
    cli.add_command(balance_sheet)
