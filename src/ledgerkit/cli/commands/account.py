"""Chart of accounts commands."""

import click
from ledgerkit.domain.account import AccountService


@click.command("accounts")
@click.option("--all", "show_all", is_flag=True, help="Include inactive accounts")
@click.pass_context
def list_accounts(ctx, show_all: bool):
    """List the chart of accounts ordered by code."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts(active_only=not show_all)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nChart of Accounts:")
    click.echo("-" * 80)
    for acc in accounts:
        role = "" if acc.statement_role.value == "none" else acc.statement_role.value
        inactive = "" if acc.active else " (inactive)"
        click.echo(
            f"{acc.code:<12} {acc.name[:28]:<28} {acc.category.value:<16} "
            f"{acc.nature.value:<6} {role}{inactive}"
        )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(list_accounts)
