"""Account ledger command."""

import click
from ledgerkit.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from ledgerkit.cli.error_handling import handle_domain_error
from ledgerkit.cli.formatting import WIDTH, money
from ledgerkit.domain.errors import DomainError
from ledgerkit.domain.reports import ReportService


@click.command("ledger")
@click.argument("account_code")
@period_options
@click.pass_context
def ledger(ctx, account_code: str, start_date: str, end_date: str, **period_kwargs):
    """Show an account's entries with a running balance."""
    db = ctx.obj["db"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=pop_period_flags(period_kwargs),
    )

    try:
        account_ledger = ReportService(db).account_ledger(
            account_code, start_date=start, end_date=end
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    account = account_ledger.account
    click.echo(f"\nLedger: {account.code} - {account.name} ({account.nature.value} nature)")
    click.echo("-" * WIDTH)
    click.echo(f"{'Date':<12} {'Description':<28} {'Debit':>12} {'Credit':>12} {'Balance':>12}")
    click.echo("-" * WIDTH)
    click.echo(f"{'':<12} {'Balance brought forward':<28} {'':>12} {'':>12} {money(account_ledger.opening_balance):>12}")
    for line in account_ledger.lines:
        description = (line.description or "")[:28]
        click.echo(
            f"{str(line.entry_date):<12} {description:<28} {money(line.debit):>12} "
            f"{money(line.credit):>12} {money(line.balance):>12}"
        )
    click.echo("-" * WIDTH)
    click.echo(
        f"{'':<12} {'Closing balance':<28} {money(account_ledger.total_debit):>12} "
        f"{money(account_ledger.total_credit):>12} {money(account_ledger.closing_balance):>12}"
    )


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(ledger)
