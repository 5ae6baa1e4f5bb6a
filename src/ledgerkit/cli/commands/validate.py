"""Double-entry validation command."""

import click
from ledgerkit.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from ledgerkit.cli.formatting import WIDTH, money
from ledgerkit.domain.reports import ReportService


@click.command("validate")
@period_options
@click.option(
    "--include-ungrouped", is_flag=True, help="Also report entries without a transaction ID"
)
@click.option("--strict", is_flag=True, help="Exit with status 1 if anything is unbalanced")
@click.pass_context
def validate(
    ctx, start_date: str, end_date: str, include_ungrouped: bool, strict: bool, **period_kwargs
):
    """Check that debits equal credits for every transaction.

    Covers all entries unless a period is given.
    """
    db = ctx.obj["db"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=pop_period_flags(period_kwargs),
    )

    report = ReportService(db).validate_double_entry(
        start_date=start, end_date=end, include_ungrouped=include_ungrouped
    )

    click.echo(f"\nChecked {report.checked_transactions} transaction(s).")
    if report.ungrouped is not None:
        click.echo(
            f"Entries without transaction: {report.ungrouped.count} "
            f"(debits {money(report.ungrouped.debit_sum)}, credits {money(report.ungrouped.credit_sum)})"
        )

    if not report.has_unbalanced:
        click.echo("OK: All transactions are balanced.")
        return

    click.echo(f"WARNING: {report.total_unbalanced} unbalanced transaction(s) found:")
    click.echo("-" * WIDTH)
    click.echo(f"{'Transaction':<20} {'Date':<12} {'Debits':>14} {'Credits':>14} {'Difference':>14}")
    click.echo("-" * WIDTH)
    for check in report.unbalanced:
        click.echo(
            f"{(check.transaction_id or '')[:20]:<20} {str(check.entry_date or ''):<12} "
            f"{money(check.debit_sum):>14} {money(check.credit_sum):>14} {money(check.difference):>14}"
        )
        if check.description:
            click.echo(f"    {check.description}")

    if strict:
        ctx.exit(1)


def register_commands(cli):
    """Register validate command with main CLI."""
    cli.add_command(validate)
