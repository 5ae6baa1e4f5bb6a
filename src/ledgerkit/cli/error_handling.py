"""CLI error reporting helpers."""

import click

from ledgerkit.domain.errors import DomainError


def fail(ctx: click.Context, message: str) -> None:
    """Print an error on stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    fail(ctx, str(error))
