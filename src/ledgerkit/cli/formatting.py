"""Text table helpers shared by report commands."""

from datetime import date
from typing import Optional

import click

from ledgerkit.domain.entities import StatementSection
from ledgerkit.utils.amount_parser import format_minor_units

WIDTH = 80
LABEL_WIDTH = 58
AMOUNT_WIDTH = 20


def money(amount: int) -> str:
    """Format minor units for display; zero renders as a dash."""
    if amount == 0:
        return "-"
    return format_minor_units(amount)


def echo_title(title: str, start: Optional[date], end: Optional[date]) -> None:
    """Print a report title with its period."""
    click.echo(f"\n{title}")
    if start is not None or end is not None:
        click.echo(f"Period: {start or 'beginning'} to {end or 'latest'}")
    click.echo("-" * WIDTH)


def echo_row(label: str, amount: int, indent: int = 0) -> None:
    """Print a label and right-aligned amount."""
    indent_str = " " * (4 * indent)
    width = LABEL_WIDTH - len(indent_str)
    click.echo(f"{indent_str}{label:<{width}} {money(amount):>{AMOUNT_WIDTH}}")


def echo_section(section: StatementSection, indent: int = 0) -> None:
    """Print a subtotal followed by its account lines."""
    echo_row(section.label, section.total, indent)
    for line in section.lines:
        echo_row(f"{line.code} - {line.name}", line.amount, indent + 1)


def echo_status(is_ok: bool, ok_message: str, failure_message: str) -> None:
    """Print a check result line."""
    if is_ok:
        click.echo(f"OK: {ok_message}")
    else:
        click.echo(f"WARNING: {failure_message}")
