"""Trial balance command."""

from datetime import date

import click
from ledgerkit.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from ledgerkit.cli.error_handling import handle_domain_error
from ledgerkit.cli.formatting import WIDTH, echo_status, echo_title, money
from ledgerkit.domain.errors import DomainError
from ledgerkit.domain.reports import ReportService
from ledgerkit.utils.date_parser import month_range


@click.command("trial-balance")
@period_options
@click.pass_context
def trial_balance(ctx, start_date: str, end_date: str, **period_kwargs):
    """Show debit and credit totals per account for a period.

    Defaults to the current month. Accounts without movement are omitted.
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
        report = ReportService(db).trial_balance(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_title("Trial Balance", start, end)
    if not report.rows:
        click.echo("No journal entries found.")
        return

    click.echo(f"{'Code':<12} {'Account':<30} {'Debit':>12} {'Credit':>12} {'Balance':>10}")
    click.echo("-" * WIDTH)
    for row in report.rows:
        account = row.account
        click.echo(
            f"{account.code:<12} {account.name[:30]:<30} {money(row.debit_total):>12} "
            f"{money(row.credit_total):>12} {money(row.signed_balance):>10}"
        )
    click.echo("-" * WIDTH)
    click.echo(
        f"{'TOTAL':<43} {money(report.total_debit):>12} {money(report.total_credit):>12}"
    )
    echo_status(
        report.is_balanced,
        "Total debits equal total credits.",
        f"Trial balance does not balance (difference {money(report.difference)}).",
    )

    for reference in report.unknown_references:
        click.echo(
            f"WARNING: Journal entry {reference.entry_id} references unknown account "
            f"{reference.account_id} and was excluded."
        )


def register_commands(cli):
    """Register trial balance command with main CLI."""
    cli.add_command(trial_balance)
