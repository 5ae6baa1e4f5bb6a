"""Utility functions for ledgerkit."""

from ledgerkit.utils.date_parser import parse_date, get_date_range
from ledgerkit.utils.amount_parser import parse_minor_units, format_minor_units

__all__ = ["parse_date", "get_date_range", "parse_minor_units", "format_minor_units"]
