"""Tests for amount parsing and formatting."""

import pytest

from ledgerkit.utils.amount_parser import format_minor_units, parse_minor_units


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", 12345),
        ("$1,234.56", 123456),
        ("R$ 1,000.00", 100000),
        ("-12.30", -1230),
        ("(12.30)", -1230),
        ("7", 700),
        ("0.005", 1),
        ("0.004", 0),
    ],
)
def test_parse_minor_units(text, expected):
    assert parse_minor_units(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity"])
def test_parse_minor_units_rejects(text):
    with pytest.raises(ValueError):
        parse_minor_units(text)


def test_format_minor_units():
    assert format_minor_units(123456) == "1,234.56"
    assert format_minor_units(-5) == "-0.05"
    assert format_minor_units(0) == "0.00"
