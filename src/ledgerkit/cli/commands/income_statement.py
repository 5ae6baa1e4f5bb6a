"""Income statement (DRE) command."""

from datetime import date

import click
from ledgerkit.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from ledgerkit.cli.error_handling import handle_domain_error
from ledgerkit.cli.formatting import WIDTH, echo_row, echo_section, echo_title
from ledgerkit.domain.errors import DomainError
from ledgerkit.domain.reports import ReportService
from ledgerkit.utils.date_parser import month_range


@click.command("income-statement")
@period_options
@click.option("--detail/--no-detail", default=True, help="Show account lines under each subtotal")
@click.pass_context
def income_statement(ctx, start_date: str, end_date: str, detail: bool, **period_kwargs):
    """Show the income statement waterfall for a period.

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
        statement = ReportService(db).income_statement(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_title("Income Statement", start, end)
    for step in statement.steps():
        if step.section is None:
            click.echo("-" * WIDTH)
            echo_row(step.label.upper(), step.amount)
            click.echo()
        elif detail:
            echo_section(step.section, indent=1)
        else:
            echo_row(step.label, step.amount, indent=1)

    click.echo("=" * WIDTH)
    echo_row("EBITDA", statement.ebitda)


def register_commands(cli):
    """Register income statement command with main CLI."""
    cli.add_command(income_statement)
