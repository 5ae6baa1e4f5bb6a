"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic: the store keeps enumerations as
plain strings, the domain works with their Enum types.
"""

from ledgerkit.domain import entities as domain
from ledgerkit.database.models import (
    Account as ORMAccount,
    JournalEntry as ORMJournalEntry,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        code=orm_account.code,
        name=orm_account.name,
        category=domain.AccountCategory(orm_account.category),
        nature=domain.Nature(orm_account.nature),
        active=orm_account.is_active,
        statement_role=domain.StatementRole(orm_account.statement_role or "none"),
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        account_id=orm_entry.account_id,
        entry_type=domain.EntryType(orm_entry.entry_type),
        amount=orm_entry.amount,
        entry_date=orm_entry.entry_date,
        transaction_id=orm_entry.transaction_id,
        description=orm_entry.description,
    )
