"""Account ledger builder: one account's entries with a running balance."""

from typing import Iterable

from ledgerkit.domain.aggregation import check_entry
from ledgerkit.domain.entities import (
    Account,
    AccountLedger,
    AccountLedgerLine,
    EntryType,
    JournalEntry,
    Nature,
)


class AccountLedgerBuilder:
    """Build the chronological ledger of a single account."""

    def build(
        self,
        entries: Iterable[JournalEntry],
        account: Account,
        opening_balance: int = 0,
    ) -> AccountLedger:
        """Build the ledger.

        Entries for other accounts are ignored. Entries are ordered by date;
        entries on the same date keep their input order.

        Args:
            entries: Journal entries, typically for one period
            account: Account to list
            opening_balance: Nature-signed balance before the first entry

        Returns:
            AccountLedger with one line per entry
        """
        own_entries = [entry for entry in entries if entry.account_id == account.id]
        own_entries.sort(key=lambda entry: entry.entry_date)

        lines = []
        balance = opening_balance
        for entry in own_entries:
            check_entry(entry)
            debit = entry.amount if entry.entry_type == EntryType.DEBIT else 0
            credit = entry.amount if entry.entry_type == EntryType.CREDIT else 0
            if account.nature == Nature.DEBIT:
                balance += debit - credit
            else:
                balance += credit - debit
            lines.append(
                AccountLedgerLine(
                    entry_id=entry.id,
                    entry_date=entry.entry_date,
                    description=entry.description,
                    transaction_id=entry.transaction_id,
                    debit=debit,
                    credit=credit,
                    balance=balance,
                )
            )

        return AccountLedger(account=account, opening_balance=opening_balance, lines=tuple(lines))
