"""Amount parsing and formatting utilities.

Amounts live in integer minor units (cents) everywhere in the ledger; these
helpers convert at the edges only.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

MINOR_UNITS_PER_MAJOR = 100


def parse_minor_units(amount_str: str) -> int:
    """Parse a currency amount string into integer minor units.

    Handles "123.45", "$1,234.56", "-12.30" and "(12.30)" (negative in
    parentheses). Fractions of a minor unit are rounded half up.

    Args:
        amount_str: Amount string

    Returns:
        Amount in minor units, e.g. 12345 for "123.45"

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()

    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    text = re.sub(r"[$€£¥R\s]", "", text).replace(",", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")

    minor = int(
        (amount * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )
    return -minor if is_negative else minor


def format_minor_units(amount: int) -> str:
    """Format minor units as a plain two-decimal number with separators.

    >>> format_minor_units(123456)
    '1,234.56'
    """
    major = Decimal(amount) / MINOR_UNITS_PER_MAJOR
    return f"{major:,.2f}"
