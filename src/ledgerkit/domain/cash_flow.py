"""Cash flow statement builder (direct method)."""

import logging
from typing import Iterable, Optional

from ledgerkit.domain.aggregation import LedgerBalances
from ledgerkit.domain.entities import (
    Account,
    AccountBalance,
    CashFlowStatement,
    JournalEntry,
    Nature,
    StatementRole,
)

logger = logging.getLogger(__name__)


def _increase(balance: AccountBalance) -> int:
    if balance.account.nature == Nature.DEBIT:
        return balance.debit_total
    return balance.credit_total


def _decrease(balance: AccountBalance) -> int:
    if balance.account.nature == Nature.DEBIT:
        return balance.credit_total
    return balance.debit_total


def _cash_effect(entry: JournalEntry, account: Account) -> int:
    if entry.entry_type.value == account.nature.value:
        return entry.amount
    return -entry.amount


class CashFlowBuilder:
    """Reconstruct cash movement for a period and cross-check it."""

    def cash_accounts(
        self, balances: LedgerBalances, cash_accounts: Optional[Iterable[int]] = None
    ) -> list[Account]:
        """Resolve the accounts treated as cash.

        Args:
            balances: Aggregated balances whose index is searched
            cash_accounts: Explicit account IDs; when None, active accounts
                tagged ``cash_equivalent`` are used
        """
        if cash_accounts is None:
            return balances.index.by_role(StatementRole.CASH_EQUIVALENT)
        wanted = set(cash_accounts)
        return [account for account in balances.index.active() if account.id in wanted]

    def sum_cash(self, balances: Optional[LedgerBalances], accounts: list[Account]) -> int:
        """Sum the nature-signed balances of cash accounts in a snapshot."""
        if balances is None:
            return 0
        total = 0
        for account in accounts:
            balance = balances.get(account.id)
            if balance is not None:
                total += balance.signed_balance
        return total

    def investing_cash(
        self,
        entries: Iterable[JournalEntry],
        balances: LedgerBalances,
        cash_accounts: list[Account],
    ) -> int:
        """Net cash moved by transactions that touch an investing account.

        Only the cash legs count: an investment bought on credit, or income
        added straight to an investment, moves no cash. Entries without a
        transaction id cannot be matched to an investment and stay operating.
        """
        cash = {account.id: account for account in cash_accounts}
        investing_ids = {
            account.id
            for account in balances.index.by_role(StatementRole.INVESTING_ACTIVITY)
            if account.id not in cash
        }
        if not investing_ids:
            return 0

        transactions: dict[str, list[JournalEntry]] = {}
        for entry in entries:
            if entry.transaction_id is not None:
                transactions.setdefault(entry.transaction_id, []).append(entry)

        total = 0
        for group in transactions.values():
            if not any(entry.account_id in investing_ids for entry in group):
                continue
            for entry in group:
                account = cash.get(entry.account_id)
                if account is not None:
                    total += _cash_effect(entry, account)
        return total

    def build(
        self,
        balances: LedgerBalances,
        opening_balances: Optional[LedgerBalances] = None,
        closing_balances: Optional[LedgerBalances] = None,
        cash_accounts: Optional[Iterable[int]] = None,
        entries: Optional[Iterable[JournalEntry]] = None,
    ) -> CashFlowStatement:
        """Build the cash flow statement.

        Investing activities are the cash legs of transactions that also post
        to an account tagged ``investing_activity``. Operating activities are
        the remaining cash movement.

        Args:
            balances: Aggregated balances for entries within the period
            opening_balances: Balances for entries strictly before the period;
                None means an opening balance of zero
            closing_balances: Balances for entries through the period end, used
                to cross-check the computed closing balance; when None the
                expected closing is opening plus the period's cash balances
            cash_accounts: Explicit cash account IDs overriding role tags
            entries: The period's journal entries, needed to find investing
                transactions; without them all cash movement is operating

        Returns:
            CashFlowStatement with reconciliation result
        """
        accounts = self.cash_accounts(balances, cash_accounts)
        period = balances.for_accounts(accounts)

        opening_balance = self.sum_cash(opening_balances, accounts)
        inflows = sum(_increase(balance) for balance in period)
        outflows = sum(_decrease(balance) for balance in period)

        investing_activities = 0
        if entries is not None:
            investing_activities = self.investing_cash(entries, balances, accounts)

        operating_activities = (inflows - outflows) - investing_activities
        net_cash_flow = operating_activities + investing_activities
        closing_balance = opening_balance + net_cash_flow

        if closing_balances is None:
            expected_closing = opening_balance + sum(balance.signed_balance for balance in period)
        else:
            expected_closing = self.sum_cash(closing_balances, accounts)

        difference = closing_balance - expected_closing
        if difference != 0:
            logger.warning(
                "Cash flow does not reconcile: computed closing %s, expected %s",
                closing_balance,
                expected_closing,
            )

        return CashFlowStatement(
            opening_balance=opening_balance,
            inflows=inflows,
            outflows=outflows,
            operating_activities=operating_activities,
            investing_activities=investing_activities,
            net_cash_flow=net_cash_flow,
            closing_balance=closing_balance,
            expected_closing_balance=expected_closing,
            reconciliation_difference=difference,
            is_reconciled=difference == 0,
        )
