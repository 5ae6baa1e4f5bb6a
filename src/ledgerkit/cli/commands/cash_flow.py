"""Cash flow statement command."""

from datetime import date

import click
from ledgerkit.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from ledgerkit.cli.error_handling import handle_domain_error
from ledgerkit.cli.formatting import WIDTH, echo_row, echo_status, echo_title, money
from ledgerkit.domain.errors import DomainError
from ledgerkit.domain.reports import ReportService
from ledgerkit.utils.date_parser import month_range


@click.command("cash-flow")
@period_options
@click.pass_context
def cash_flow(ctx, start_date: str, end_date: str, **period_kwargs):
    """Show cash movement for a period (direct method).

    Defaults to the current month.
    """
    db = ctx.obj["db"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=pop_period_flags(period_kwargs),
        default_range=month_range(date.today()),
    )

    try:
        statement = ReportService(db).cash_flow(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_title("Cash Flow Statement", start, end)
    echo_row("Opening Balance", statement.opening_balance)
    click.echo()
    echo_row("Operating Activities", statement.operating_activities)
    echo_row("Cash Inflows", statement.inflows, indent=1)
    echo_row("Cash Outflows", -statement.outflows, indent=1)
    echo_row("Investing Activities", statement.investing_activities)
    click.echo("-" * WIDTH)
    echo_row("Net Cash Flow", statement.net_cash_flow)
    echo_row("Closing Balance", statement.closing_balance)
    echo_status(
        statement.is_reconciled,
        "Closing balance matches the cash accounts.",
        f"Closing balance differs from the cash accounts ({money(statement.expected_closing_balance)}) "
        f"by {money(statement.reconciliation_difference)}.",
    )


def register_commands(cli):
    """Register cash flow command with main CLI."""
    cli.add_command(cash_flow)
