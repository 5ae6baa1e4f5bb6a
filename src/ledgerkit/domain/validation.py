"""Double-entry validation of journal entries grouped by transaction."""

import logging
from typing import Iterable, Optional

from ledgerkit.domain.aggregation import check_entry
from ledgerkit.domain.entities import (
    DoubleEntryReport,
    EntryType,
    JournalEntry,
    TransactionBalanceCheck,
    UngroupedEntries,
)

logger = logging.getLogger(__name__)


class DoubleEntryValidator:
    """Flag transactions whose debits and credits do not match.

    The result is advisory: entries are never filtered or changed, so an
    unbalanced transaction still shows up downstream (for example as a trial
    balance that does not balance).
    """

    def __init__(self, include_ungrouped: bool = False):
        """Initialize validator.

        Args:
            include_ungrouped: If True, report entries without a transaction
                ID as a separate bucket
        """
        self.include_ungrouped = include_ungrouped

    def check_transaction(
        self, transaction_id: Optional[str], entries: list[JournalEntry]
    ) -> TransactionBalanceCheck:
        """Compare debit and credit sums for one transaction's entries."""
        debit_sum = sum(e.amount for e in entries if e.entry_type == EntryType.DEBIT)
        credit_sum = sum(e.amount for e in entries if e.entry_type == EntryType.CREDIT)
        first = entries[0] if entries else None
        return TransactionBalanceCheck(
            transaction_id=transaction_id,
            debit_sum=debit_sum,
            credit_sum=credit_sum,
            is_balanced=debit_sum == credit_sum,
            description=first.description if first else None,
            entry_date=first.entry_date if first else None,
        )

    def validate(self, entries: Iterable[JournalEntry]) -> DoubleEntryReport:
        """Validate that each transaction's entries balance.

        Args:
            entries: Journal entries to check

        Returns:
            DoubleEntryReport listing only the unbalanced transactions, in
            order of first appearance

        Raises:
            ValidationError: If an entry has a negative amount
        """
        groups: dict[str, list[JournalEntry]] = {}
        ungrouped: list[JournalEntry] = []

        for entry in entries:
            check_entry(entry)
            if entry.transaction_id is None:
                ungrouped.append(entry)
                continue
            groups.setdefault(entry.transaction_id, []).append(entry)

        unbalanced = []
        for transaction_id, group in groups.items():
            check = self.check_transaction(transaction_id, group)
            if check.is_balanced:
                continue
            logger.warning(
                "Unbalanced transaction %s: debits=%s credits=%s difference=%s",
                transaction_id,
                check.debit_sum,
                check.credit_sum,
                check.difference,
            )
            unbalanced.append(check)

        ungrouped_bucket = None
        if self.include_ungrouped:
            ungrouped_bucket = UngroupedEntries(
                count=len(ungrouped),
                debit_sum=sum(e.amount for e in ungrouped if e.entry_type == EntryType.DEBIT),
                credit_sum=sum(e.amount for e in ungrouped if e.entry_type == EntryType.CREDIT),
            )

        return DoubleEntryReport(
            unbalanced=tuple(unbalanced),
            checked_transactions=len(groups),
            ungrouped=ungrouped_bucket,
        )


def validate(entries: Iterable[JournalEntry], include_ungrouped: bool = False) -> DoubleEntryReport:
    """Validate entries with a default-configured validator."""
    return DoubleEntryValidator(include_ungrouped=include_ungrouped).validate(entries)
