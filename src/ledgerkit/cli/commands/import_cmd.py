"""CSV import commands."""

import click
from ledgerkit.cli.error_handling import fail
from ledgerkit.domain.ledger_import import LedgerImportService


def _echo_result(result: dict, noun: str, skipped_label: str) -> None:
    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result['imported']} {noun}")
    click.echo(f"  Skipped: {result['skipped']} {skipped_label}")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


@click.command("import-accounts")
@click.argument("csv_file", type=click.Path(exists=True))
@click.pass_context
def import_accounts(ctx, csv_file: str):
    """Import a chart of accounts from a CSV file.

    Required columns: code, name, category, nature. Optional columns:
    statement_role, active. Accounts whose code already exists are skipped.
    """
    db = ctx.obj["db"]
    service = LedgerImportService(db)

    try:
        result = service.import_accounts(csv_file)
        _echo_result(result, "accounts", "existing codes")
    except (ValueError, FileNotFoundError) as e:
        fail(ctx, str(e))


@click.command("import-entries")
@click.argument("csv_file", type=click.Path(exists=True))
@click.pass_context
def import_entries(ctx, csv_file: str):
    """Import journal entries from a CSV file.

    Required columns: account_code, entry_type, amount, entry_date. Optional
    columns: transaction_id, description. Amounts are non-negative decimals;
    the entry type carries the sign.
    """
    db = ctx.obj["db"]
    service = LedgerImportService(db)

    try:
        result = service.import_entries(csv_file)
        _echo_result(result, "journal entries", "duplicates")
    except (ValueError, FileNotFoundError) as e:
        fail(ctx, str(e))


def register_commands(cli):
    """Register import commands with main CLI."""
    cli.add_command(import_accounts)
    cli.add_command(import_entries)
