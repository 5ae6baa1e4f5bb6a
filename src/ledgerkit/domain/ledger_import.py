"""CSV import of the chart of accounts and journal entries."""

import csv
import logging
from typing import Any, Callable
from pathlib import Path

from ledgerkit.database.base import Database
from ledgerkit.domain.account import AccountService, parse_choice
from ledgerkit.domain.entities import EntryType
from ledgerkit.utils.amount_parser import parse_minor_units
from ledgerkit.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

ACCOUNT_COLUMNS = {"code", "name", "category", "nature"}
ENTRY_COLUMNS = {"account_code", "entry_type", "amount", "entry_date"}

TRUE_VALUES = {"1", "true", "yes", "y"}
FALSE_VALUES = {"0", "false", "no", "n"}


def parse_flag(value: str | None, default: bool = True) -> bool:
    """Parse a CSV boolean column; empty means ``default``."""
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Could not parse boolean '{value}'")


class LedgerImportService:
    """Service for loading a ledger from CSV files."""

    def __init__(self, db: Database):
        """Initialize ledger import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)

    def _read_rows(
        self,
        csv_file_path: str,
        required_columns: set[str],
        handle_row: Callable[[dict[str, str | None]], bool],
    ) -> dict[str, Any]:
        """Feed each CSV row to ``handle_row`` and collect statistics.

        ``handle_row`` returns True when the row was imported and False when it
        was skipped; a ValueError marks the row as an error.

        Raises:
            ValueError: If the file has no header or misses required columns
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        imported = 0
        skipped = 0
        errors = []

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)

            csv_columns = reader.fieldnames
            if csv_columns is None:
                raise ValueError("CSV file has no columns")

            normalized = {column.strip().lower() for column in csv_columns}
            missing_columns = required_columns - normalized
            if missing_columns:
                raise ValueError(
                    f"CSV file missing required columns: {', '.join(sorted(missing_columns))}"
                )

            for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is row 1)
                values = {
                    (key or "").strip().lower(): (value.strip() if value else None)
                    for key, value in row.items()
                }
                try:
                    if handle_row(values):
                        imported += 1
                    else:
                        skipped += 1
                except ValueError as e:
                    errors.append(f"Row {row_num}: {e}")

        if errors:
            logger.warning("%d rows of %s could not be imported", len(errors), csv_path.name)

        return {
            "imported": imported,
            "skipped": skipped,
            "errors": errors,
        }

    def import_accounts(self, csv_file_path: str) -> dict[str, Any]:
        """Import a chart of accounts.

        Columns: code, name, category, nature (required); statement_role and
        active (optional). Rows whose code already exists are skipped.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            Dict with import statistics:
            - imported: number of accounts created
            - skipped: number of existing codes
            - errors: list of error messages
        """

        def handle_row(values: dict[str, str | None]) -> bool:
            code = values.get("code")
            if not code:
                raise ValueError("Missing code")
            if self.db.get_account_by_code(code) is not None:
                return False

            self.account_service.create_account(
                code=code,
                name=values.get("name") or "",
                category=values.get("category") or "",
                nature=values.get("nature") or "",
                statement_role=values.get("statement_role") or "none",
                active=parse_flag(values.get("active")),
            )
            return True

        return self._read_rows(csv_file_path, ACCOUNT_COLUMNS, handle_row)

    def import_entries(self, csv_file_path: str) -> dict[str, Any]:
        """Import journal entries.

        Columns: account_code, entry_type, amount, entry_date (required);
        transaction_id and description (optional). Amounts are decimal
        currency values and are stored as integer minor units.

        A row repeating an entry already in the store (same transaction id,
        account, entry type, amount and date) is skipped as a duplicate. Rows
        repeated within one file are all imported.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            Dict with import statistics (imported, skipped, errors)
        """
        accounts = {account.code: account for account in self.db.list_accounts()}
        existing = {
            (entry.transaction_id, entry.account_id, entry.entry_type, entry.amount, entry.entry_date)
            for entry in self.db.list_journal_entries()
        }

        def handle_row(values: dict[str, str | None]) -> bool:
            account_code = values.get("account_code")
            if not account_code:
                raise ValueError("Missing account_code")
            account = accounts.get(account_code)
            if account is None:
                raise ValueError(f"Unknown account code '{account_code}'")

            entry_type = parse_choice(EntryType, "entry type", values.get("entry_type") or "")

            amount_str = values.get("amount")
            if not amount_str:
                raise ValueError("Missing amount")
            amount = parse_minor_units(amount_str)
            if amount < 0:
                raise ValueError(
                    f"Negative amount '{amount_str}'; use the entry type for the sign"
                )

            date_str = values.get("entry_date")
            if not date_str:
                raise ValueError("Missing entry_date")

            entry_date = parse_date(date_str)
            transaction_id = values.get("transaction_id")

            # Check for duplicate
            if (transaction_id, account.id, entry_type, amount, entry_date) in existing:
                return False

            self.db.create_journal_entry(
                account_id=account.id,
                entry_type=entry_type,
                amount=amount,
                entry_date=entry_date,
                transaction_id=transaction_id,
                description=values.get("description"),
            )
            return True

        return self._read_rows(csv_file_path, ENTRY_COLUMNS, handle_row)
