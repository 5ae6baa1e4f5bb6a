"""Shared pytest fixtures for ledgerkit tests."""

import tempfile
import os
from datetime import date
from pathlib import Path
import pytest

from ledgerkit.database.factories import create_sqlite_database
from ledgerkit.domain.account import AccountService
from ledgerkit.domain.entities import Account, AccountCategory, EntryType, JournalEntry, Nature, StatementRole
from ledgerkit.domain.ledger_import import LedgerImportService
from ledgerkit.domain.reports import ReportService

# (code, name, category, nature, statement role)
SAMPLE_CHART = [
    ("1.01", "Cash", "asset", "debit", "cash_equivalent"),
    ("1.02", "Accounts Receivable", "asset", "debit", "none"),
    ("1.03", "Equipment", "asset", "debit", "investing_activity"),
    ("1.04", "Accumulated Depreciation", "contra_asset", "credit", "none"),
    ("2.01", "Suppliers", "liability", "credit", "none"),
    ("3.01", "Share Capital", "equity", "credit", "none"),
    ("4.01", "Sales", "revenue", "credit", "operating_revenue"),
    ("4.02", "Sales Taxes", "revenue", "debit", "revenue_deduction"),
    ("5.01", "Cost of Goods Sold", "expense", "debit", "cogs"),
    ("5.02", "Salaries", "expense", "debit", "admin_expense"),
    ("5.03", "Depreciation", "expense", "debit", "depreciation_amortization"),
]

# (transaction id, date, debit code, credit code, amount in cents, description)
SAMPLE_TRANSACTIONS = [
    ("T1", date(2024, 1, 2), "1.01", "3.01", 500000, "Capital contribution"),
    ("T2", date(2024, 1, 10), "1.03", "1.01", 120000, "Equipment purchase"),
    ("T3", date(2024, 1, 15), "1.01", "4.01", 100000, "Cash sale"),
    ("T4", date(2024, 1, 15), "4.02", "1.01", 10000, "Sales tax on cash sale"),
    ("T5", date(2024, 1, 20), "5.01", "2.01", 40000, "Goods bought on credit"),
    ("T6", date(2024, 1, 25), "5.02", "1.01", 20000, "January salaries"),
    ("T7", date(2024, 1, 31), "5.03", "1.04", 2000, "Monthly depreciation"),
]


def make_account(account_id, code, category, nature, role=StatementRole.NONE, active=True, name=None):
    """Build an Account entity for pure builder tests."""
    return Account(
        id=account_id,
        code=code,
        name=name or f"Account {code}",
        category=AccountCategory(category),
        nature=Nature(nature),
        active=active,
        statement_role=StatementRole(role),
    )


def make_entry(entry_id, account_id, entry_type, amount, entry_date=date(2024, 1, 15), transaction_id=None, description=None):
    """Build a JournalEntry entity for pure builder tests."""
    return JournalEntry(
        id=entry_id,
        account_id=account_id,
        entry_type=EntryType(entry_type),
        amount=amount,
        entry_date=entry_date,
        transaction_id=transaction_id,
        description=description,
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a LedgerImportService with a temporary database."""
    return LedgerImportService(temp_db)


@pytest.fixture
def sample_chart(account_service):
    """Create the sample chart of accounts and return account IDs by code."""
    account_ids = {}
    for code, name, category, nature, role in SAMPLE_CHART:
        account_ids[code] = account_service.create_account(
            code=code, name=name, category=category, nature=nature, statement_role=role
        )
    return account_ids


@pytest.fixture
def sample_ledger(temp_db, sample_chart):
    """Post the sample January 2024 transactions and return account IDs by code."""
    for transaction_id, entry_date, debit_code, credit_code, amount, description in SAMPLE_TRANSACTIONS:
        temp_db.create_journal_entry(
            account_id=sample_chart[debit_code],
            entry_type=EntryType.DEBIT,
            amount=amount,
            entry_date=entry_date,
            transaction_id=transaction_id,
            description=description,
        )
        temp_db.create_journal_entry(
            account_id=sample_chart[credit_code],
            entry_type=EntryType.CREDIT,
            amount=amount,
            entry_date=entry_date,
            transaction_id=transaction_id,
            description=description,
        )
    return sample_chart


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
