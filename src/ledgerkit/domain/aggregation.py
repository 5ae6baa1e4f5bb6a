"""Ledger aggregation: per-account debit/credit totals.

The reduction is associative and commutative per account, so an entry set can
be folded in one pass or split into partitions whose partial results are
merged by addition. Both paths produce identical ``LedgerBalances``.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Sequence

from ledgerkit.domain.entities import (
    Account,
    AccountBalance,
    AccountCategory,
    EntryType,
    JournalEntry,
    StatementRole,
    UnknownAccountReference,
)
from ledgerkit.domain.errors import (
    ValidationError,
    duplicate_account_id,
    negative_amount,
)

logger = logging.getLogger(__name__)


class AccountIndex:
    """Lookup table of accounts by ID, built once per call."""

    def __init__(self, accounts: Iterable[Account]):
        self._accounts: dict[int, Account] = {}
        for account in accounts:
            if account.id in self._accounts:
                raise ValidationError(duplicate_account_id(account.id))
            self._accounts[account.id] = account

    def get(self, account_id: int) -> Optional[Account]:
        return self._accounts.get(account_id)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountIndex):
            return NotImplemented
        return self._accounts == other._accounts

    def active(self) -> list[Account]:
        """Active accounts in chart order."""
        return [account for account in self._accounts.values() if account.active]

    def by_category(self, *categories: AccountCategory) -> list[Account]:
        """Active accounts in any of the given categories."""
        return [account for account in self.active() if account.category in categories]

    def by_role(self, role: StatementRole) -> list[Account]:
        """Active accounts tagged with a statement role."""
        return [account for account in self.active() if account.statement_role == role]


@dataclass(frozen=True)
class LedgerBalances:
    """Aggregated balances for every account in a chart.

    Attributes:
        index: Account lookup table the balances were computed against
        balances: Map of account ID to its balance, zero totals included
        unknown_references: Entries skipped because their account is unknown
    """

    index: AccountIndex
    balances: dict[int, AccountBalance]
    unknown_references: tuple[UnknownAccountReference, ...] = ()

    def __getitem__(self, account_id: int) -> AccountBalance:
        return self.balances[account_id]

    def get(self, account_id: int) -> Optional[AccountBalance]:
        return self.balances.get(account_id)

    def __iter__(self) -> Iterator[int]:
        return iter(self.balances)

    def __len__(self) -> int:
        return len(self.balances)

    def for_accounts(self, accounts: Iterable[Account]) -> list[AccountBalance]:
        """Balances of the given accounts, in the given order."""
        return [self.balances[account.id] for account in accounts]


def check_entry(entry: JournalEntry) -> None:
    """Reject entries that violate the input contract.

    Raises:
        ValidationError: If the amount is negative
    """
    if entry.amount < 0:
        raise ValidationError(negative_amount(entry.id, entry.amount))


def _fold(
    entries: Iterable[JournalEntry], index: AccountIndex
) -> tuple[dict[int, tuple[int, int]], list[UnknownAccountReference]]:
    """Fold entries into (debit, credit) pairs for the accounts they touch."""
    totals: dict[int, tuple[int, int]] = {}
    unknown: list[UnknownAccountReference] = []

    for entry in entries:
        check_entry(entry)
        if entry.account_id not in index:
            logger.warning(
                "Journal entry %s references unknown account %s; excluded from totals",
                entry.id,
                entry.account_id,
            )
            unknown.append(
                UnknownAccountReference(
                    entry_id=entry.id,
                    account_id=entry.account_id,
                    amount=entry.amount,
                    entry_type=entry.entry_type,
                )
            )
            continue

        debit, credit = totals.get(entry.account_id, (0, 0))
        if entry.entry_type == EntryType.DEBIT:
            debit += entry.amount
        else:
            credit += entry.amount
        totals[entry.account_id] = (debit, credit)

    return totals, unknown


def _build(
    index: AccountIndex,
    totals: dict[int, tuple[int, int]],
    unknown: Sequence[UnknownAccountReference],
) -> LedgerBalances:
    balances = {}
    for account in index:
        debit, credit = totals.get(account.id, (0, 0))
        balances[account.id] = AccountBalance(
            account=account, debit_total=debit, credit_total=credit
        )
    return LedgerBalances(index=index, balances=balances, unknown_references=tuple(unknown))


def aggregate(
    entries: Iterable[JournalEntry], accounts: Iterable[Account] | AccountIndex
) -> LedgerBalances:
    """Reduce journal entries into per-account balances.

    Every account in the chart appears in the result, including accounts
    without entries. Entries referencing unknown accounts are excluded from
    totals and recorded as anomalies.

    Args:
        entries: Journal entries to aggregate
        accounts: Chart of accounts, or an already built index

    Returns:
        LedgerBalances for the whole chart

    Raises:
        ValidationError: If an entry has a negative amount or the chart
            repeats an account ID
    """
    index = accounts if isinstance(accounts, AccountIndex) else AccountIndex(accounts)
    totals, unknown = _fold(entries, index)
    return _build(index, totals, unknown)


def merge_balances(left: LedgerBalances, right: LedgerBalances) -> LedgerBalances:
    """Combine two partial aggregations over the same chart by addition."""
    balances = dict(left.balances)
    for account_id, balance in right.balances.items():
        current = balances.get(account_id)
        if current is None:
            balances[account_id] = balance
            continue
        balances[account_id] = replace(
            current,
            debit_total=current.debit_total + balance.debit_total,
            credit_total=current.credit_total + balance.credit_total,
        )
    return LedgerBalances(
        index=left.index,
        balances=balances,
        unknown_references=left.unknown_references + right.unknown_references,
    )


def partition(entries: Sequence[JournalEntry], count: int) -> list[Sequence[JournalEntry]]:
    """Split entries into ``count`` contiguous slices of near-equal size."""
    if count < 1:
        raise ValidationError(f"Partition count must be positive, got {count}")
    size, remainder = divmod(len(entries), count)
    slices = []
    start = 0
    for i in range(count):
        end = start + size + (1 if i < remainder else 0)
        slices.append(entries[start:end])
        start = end
    return slices


def aggregate_partitioned(
    entries: Sequence[JournalEntry],
    accounts: Iterable[Account] | AccountIndex,
    partitions: int = 4,
    max_workers: Optional[int] = None,
) -> LedgerBalances:
    """Aggregate entries in parallel partitions and merge the partial results.

    Args:
        entries: Journal entries to aggregate
        accounts: Chart of accounts, or an already built index
        partitions: Number of contiguous slices to fold independently
        max_workers: Thread pool size (defaults to ``partitions``)

    Returns:
        LedgerBalances equal to ``aggregate(entries, accounts)``
    """
    index = accounts if isinstance(accounts, AccountIndex) else AccountIndex(accounts)
    slices = partition(entries, partitions)

    with ThreadPoolExecutor(max_workers=max_workers or partitions) as executor:
        partials = list(executor.map(lambda chunk: aggregate(chunk, index), slices))

    result = _build(index, {}, ())
    for partial in partials:
        result = merge_balances(result, partial)
    return result
