"""Tests for the balance sheet builder."""

import pytest

from ledgerkit.domain.aggregation import aggregate
from ledgerkit.domain.balance_sheet import BalanceSheetBuilder
from ledgerkit.domain.income_statement import IncomeStatementBuilder
from conftest import make_account, make_entry


@pytest.fixture
def chart():
    return [
        make_account(1, "1.01", "asset", "debit", name="Cash"),
        make_account(2, "1.02", "asset", "debit", name="Equipment"),
        make_account(3, "1.03", "contra_asset", "credit", name="Accumulated Depreciation"),
        make_account(4, "2.01", "liability", "credit", name="Loans"),
        make_account(5, "2.02", "contra_liability", "debit", name="Loan Discount"),
        make_account(6, "3.01", "equity", "credit", name="Capital"),
        make_account(7, "4.01", "revenue", "credit", "operating_revenue", name="Sales"),
        make_account(8, "5.01", "expense", "debit", "admin_expense", name="Rent"),
    ]


def test_contra_asset_netting(chart):
    entries = [
        make_entry(1, 2, "debit", 1000),
        make_entry(2, 3, "credit", 200),
    ]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart))

    assert sheet.assets.total == 1000
    assert sheet.contra_assets.total == 200
    assert sheet.total_assets == 800


def test_contra_liability_netting(chart):
    entries = [make_entry(1, 4, "credit", 1000), make_entry(2, 5, "debit", 150)]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart))

    assert sheet.total_liabilities == 850


def test_balanced_equation(chart):
    entries = [
        make_entry(1, 1, "debit", 5000),
        make_entry(2, 4, "credit", 2000),
        make_entry(3, 6, "credit", 3000),
    ]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart))

    assert sheet.total_assets == 5000
    assert sheet.total_liabilities == 2000
    assert sheet.equity_book == 3000
    assert sheet.equity_balance_derived == 3000
    assert sheet.unclosed_result == 0
    assert sheet.difference == 0
    assert sheet.is_balanced
    assert sheet.total_liabilities_and_equity == 5000


def test_perturbed_asset_unbalances(chart):
    entries = [
        make_entry(1, 1, "debit", 5001),
        make_entry(2, 4, "credit", 2000),
        make_entry(3, 6, "credit", 3000),
    ]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart))

    assert sheet.difference == 1
    assert not sheet.is_balanced


def test_unclosed_result_counted_once(chart):
    entries = [
        make_entry(1, 1, "debit", 5000),
        make_entry(2, 6, "credit", 5000),
        make_entry(3, 1, "debit", 1200),
        make_entry(4, 7, "credit", 1200),
        make_entry(5, 8, "debit", 200),
        make_entry(6, 1, "credit", 200),
    ]
    balances = aggregate(entries, chart)
    result = IncomeStatementBuilder().build(balances).period_result

    sheet = BalanceSheetBuilder().build(balances, net_period_result=result)

    assert result == 1000
    assert sheet.total_assets == 6000
    assert sheet.equity_book == 5000
    assert sheet.equity_balance_derived == 6000
    assert sheet.unclosed_result == 1000
    assert sheet.is_balanced


def test_closed_ledger_with_zero_result(chart):
    # Result already closed into capital: revenue and expense net to zero
    entries = [
        make_entry(1, 1, "debit", 6000),
        make_entry(2, 6, "credit", 6000),
    ]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart), net_period_result=0)

    assert sheet.unclosed_result == 0
    assert sheet.is_balanced


def test_zero_balances_omitted_and_sorted(chart):
    entries = [
        make_entry(1, 2, "debit", 300),
        make_entry(2, 1, "debit", 100),
        make_entry(3, 1, "credit", 100),
    ]

    sheet = BalanceSheetBuilder().build(aggregate(entries, chart))

    assert [line.code for line in sheet.assets.lines] == ["1.02"]


def test_negative_balance_shown_as_absolute(chart):
    sheet = BalanceSheetBuilder().build(aggregate([make_entry(1, 1, "credit", 250)], chart))

    assert sheet.assets.lines[0].amount == 250


def test_inactive_accounts_excluded():
    accounts = [
        make_account(1, "1.01", "asset", "debit"),
        make_account(2, "1.02", "asset", "debit", active=False),
    ]
    entries = [make_entry(1, 1, "debit", 100), make_entry(2, 2, "debit", 900)]

    sheet = BalanceSheetBuilder().build(aggregate(entries, accounts))

    assert sheet.total_assets == 100


def test_empty_ledger_is_balanced(chart):
    sheet = BalanceSheetBuilder().build(aggregate([], chart))

    assert sheet.total_assets == 0
    assert sheet.is_balanced


def test_build_is_idempotent(chart):
    balances = aggregate([make_entry(1, 1, "debit", 10), make_entry(2, 6, "credit", 10)], chart)
    builder = BalanceSheetBuilder()

    assert builder.build(balances, 0) == builder.build(balances, 0)
