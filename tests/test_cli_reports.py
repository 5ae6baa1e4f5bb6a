"""Tests for report commands."""

import pytest

from ledgerkit.cli.main import cli

JANUARY = ["--start-date", "2024-01-01", "--end-date", "2024-01-31"]


@pytest.fixture
def invoke(cli_runner, temp_db):
    def _invoke(*args):
        return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])

    return _invoke


@pytest.mark.parametrize(
    "command",
    [["trial-balance"], ["income-statement"], ["balance-sheet"], ["cash-flow"]],
)
def test_reports_require_chart_of_accounts(invoke, command):
    result = invoke(*command)

    assert result.exit_code == 1
    assert "chart of accounts is empty" in result.output


def test_accounts_list(invoke, sample_chart, account_service):
    account_service.create_account(code="9.99", name="Suspense", category="asset", nature="debit", active=False)

    result = invoke("accounts")
    assert result.exit_code == 0
    assert "1.01" in result.output
    assert "cash_equivalent" in result.output
    assert "Suspense" not in result.output

    result = invoke("accounts", "--all")
    assert "Suspense" in result.output
    assert "(inactive)" in result.output


def test_accounts_list_empty(invoke):
    result = invoke("accounts")

    assert result.exit_code == 0
    assert "No accounts found" in result.output


def test_trial_balance(invoke, sample_ledger):
    result = invoke("trial-balance", *JANUARY)

    assert result.exit_code == 0
    assert "Period: 2024-01-01 to 2024-01-31" in result.output
    assert "Accumulated Depreciation" in result.output
    assert "Accounts Receivable" not in result.output
    assert "7,920.00" in result.output
    assert "OK: Total debits equal total credits." in result.output


def test_trial_balance_default_window_is_current_month(invoke, sample_ledger):
    result = invoke("trial-balance")

    assert result.exit_code == 0
    assert "No journal entries found." in result.output


def test_trial_balance_rejects_two_periods(invoke, sample_ledger):
    result = invoke("trial-balance", "--this-month", "--last-year")

    assert result.exit_code == 1
    assert "Only one period option" in result.output


def test_income_statement(invoke, sample_ledger):
    result = invoke("income-statement", *JANUARY)

    assert result.exit_code == 0
    assert "NET REVENUE" in result.output
    assert "4.01 - Sales" in result.output
    assert "EBITDA" in result.output
    assert "NET PROFIT" in result.output
    assert "280.00" in result.output
    assert "FINAL RESULT" not in result.output


def test_income_statement_without_detail(invoke, sample_ledger):
    result = invoke("income-statement", *JANUARY, "--no-detail")

    assert result.exit_code == 0
    assert "4.01 - Sales" not in result.output
    assert "Gross Revenue" in result.output


def test_balance_sheet(invoke, sample_ledger):
    result = invoke("balance-sheet", "--as-of", "2024-01-31")

    assert result.exit_code == 0
    assert "Balance Sheet as of 2024-01-31" in result.output
    assert "TOTAL ASSETS" in result.output
    assert "5,680.00" in result.output
    assert "OK: Assets equal liabilities plus equity." in result.output


def test_balance_sheet_invalid_date(invoke, sample_ledger):
    result = invoke("balance-sheet", "--as-of", "someday")

    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_cash_flow(invoke, sample_ledger):
    result = invoke("cash-flow", *JANUARY)

    assert result.exit_code == 0
    assert "Investing Activities" in result.output
    assert "-1,200.00" in result.output
    assert "4,500.00" in result.output
    assert "OK: Closing balance matches the cash accounts." in result.output


def test_validate_balanced(invoke, sample_ledger):
    result = invoke("validate")

    assert result.exit_code == 0
    assert "Checked 7 transaction(s)." in result.output
    assert "OK: All transactions are balanced." in result.output


def test_validate_reports_unbalanced(invoke, sample_chart, fixtures_dir):
    invoke("import-entries", str(fixtures_dir / "unbalanced_entries.csv"))

    result = invoke("validate", "--include-ungrouped")
    assert result.exit_code == 0
    assert "1 unbalanced transaction(s)" in result.output
    assert "T9" in result.output
    assert "Half posted" in result.output
    assert "Entries without transaction: 0" in result.output

    result = invoke("validate", "--strict")
    assert result.exit_code == 1


def test_ledger(invoke, sample_ledger):
    result = invoke("ledger", "1.01", "--start-date", "2024-01-11")

    assert result.exit_code == 0
    assert "Ledger: 1.01 - Cash (debit nature)" in result.output
    assert "Balance brought forward" in result.output
    assert "3,800.00" in result.output
    assert "Cash sale" in result.output
    assert "Capital contribution" not in result.output


def test_ledger_unknown_account(invoke, sample_ledger):
    result = invoke("ledger", "7.77")

    assert result.exit_code == 1
    assert "Account with code '7.77' not found" in result.output
