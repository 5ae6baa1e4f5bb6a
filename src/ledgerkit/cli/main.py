"""Main CLI entry point."""

import logging

import click
from ledgerkit.database.factories import create_sqlite_database

# Import and register all commands at module level
from ledgerkit.cli.commands import (
    account,
    import_cmd,
    trial_balance,
    income_statement,
    balance_sheet,
    cash_flow,
    validate,
    ledger,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERKIT_DB_PATH environment variable)",
    envvar="LEDGERKIT_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEDGERKIT_LOG_LEVEL",
    help="Logging verbosity for ledger anomalies and diagnostics",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ledgerkit - Double-entry ledger reports.

    Import a chart of accounts and journal entries, then produce a trial
    balance, income statement, balance sheet and cash flow statement.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
import_cmd.register_commands(cli)
trial_balance.register_commands(cli)
income_statement.register_commands(cli)
balance_sheet.register_commands(cli)
cash_flow.register_commands(cli)
validate.register_commands(cli)
ledger.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
