"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerkit.domain.entities import (
    Account,
    AccountCategory,
    EntryType,
    JournalEntry,
    Nature,
    StatementRole,
)


class Database(ABC):
    """Abstract ledger store for ledgerkit."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Chart of accounts operations
    @abstractmethod
    def create_account(
        self,
        code: str,
        name: str,
        category: AccountCategory,
        nature: Nature,
        statement_role: StatementRole = StatementRole.NONE,
        active: bool = True,
    ) -> int:
        """Create a chart-of-accounts entry. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_code(self, code: str) -> Optional[Account]:
        """Get account by its dotted code."""
        pass

    @abstractmethod
    def list_accounts(self, active_only: bool = False) -> list[Account]:
        """List accounts ordered by code."""
        pass

    # Journal entry operations
    @abstractmethod
    def create_journal_entry(
        self,
        account_id: int,
        entry_type: EntryType,
        amount: int,
        entry_date: date,
        transaction_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Create a journal entry. Returns entry ID."""
        pass

    @abstractmethod
    def list_journal_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        before_date: Optional[date] = None,
        account_id: Optional[int] = None,
    ) -> list[JournalEntry]:
        """List journal entries with optional filters, oldest first.

        Args:
            start_date: Optional inclusive lower bound on entry_date
            end_date: Optional inclusive upper bound on entry_date
            before_date: Optional exclusive upper bound on entry_date
            account_id: Optional account ID filter
        """
        pass
