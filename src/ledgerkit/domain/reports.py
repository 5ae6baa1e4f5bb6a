"""Report domain service.

Loads a snapshot of the chart of accounts and the journal entries for a date
window from the store, then hands it to the pure builders. Windows are
inclusive on both ends.
"""

import logging
from datetime import date
from typing import Optional

from ledgerkit.database.base import Database
from ledgerkit.domain.account import AccountService
from ledgerkit.domain.account_ledger import AccountLedgerBuilder
from ledgerkit.domain.aggregation import AccountIndex, LedgerBalances, aggregate
from ledgerkit.domain.balance_sheet import BalanceSheetBuilder
from ledgerkit.domain.cash_flow import CashFlowBuilder
from ledgerkit.domain.entities import (
    AccountLedger,
    BalanceSheet,
    CashFlowStatement,
    DoubleEntryReport,
    IncomeStatement,
    TrialBalance,
)
from ledgerkit.domain.errors import EmptyChartOfAccountsError, empty_chart_of_accounts
from ledgerkit.domain.income_statement import IncomeStatementBuilder
from ledgerkit.domain.trial_balance import TrialBalanceBuilder
from ledgerkit.domain.validation import DoubleEntryValidator

logger = logging.getLogger(__name__)


class ReportService:
    """Service for building accounting reports from the ledger store."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)

    def load_index(self) -> AccountIndex:
        """Load the chart of accounts.

        Inactive accounts are included so that their entries are not reported
        as unknown references; the builders leave them out of the reports.

        Raises:
            EmptyChartOfAccountsError: If there are no active accounts
        """
        accounts = self.db.list_accounts()
        if not any(account.active for account in accounts):
            raise EmptyChartOfAccountsError(empty_chart_of_accounts())
        return AccountIndex(accounts)

    def balances(
        self,
        index: AccountIndex,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> LedgerBalances:
        """Aggregate entries in ``[start_date, end_date]``."""
        entries = self.db.list_journal_entries(start_date=start_date, end_date=end_date)
        logger.debug(
            "Aggregating %d journal entries between %s and %s", len(entries), start_date, end_date
        )
        return aggregate(entries, index)

    def opening_balances(self, index: AccountIndex, start_date: Optional[date]) -> Optional[LedgerBalances]:
        """Aggregate entries strictly before ``start_date``; None without a start."""
        if start_date is None:
            return None
        return aggregate(self.db.list_journal_entries(before_date=start_date), index)

    def trial_balance(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> TrialBalance:
        """Build the trial balance for a period."""
        index = self.load_index()
        return TrialBalanceBuilder().build(self.balances(index, start_date, end_date))

    def income_statement(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> IncomeStatement:
        """Build the income statement for a period."""
        index = self.load_index()
        return IncomeStatementBuilder().build(
            self.balances(index, start_date, end_date), start_date, end_date
        )

    def balance_sheet(
        self, as_of: Optional[date] = None, period_start: Optional[date] = None
    ) -> tuple[BalanceSheet, IncomeStatement]:
        """Build the balance sheet at a date.

        The position uses every entry up to ``as_of``. The period result shown
        next to equity comes from the income statement over
        ``[period_start, as_of]``; without a period start it covers the whole
        history, which is the unclosed result of a ledger that never posted
        closing entries.

        Returns:
            Tuple of (balance sheet, income statement supplying the result)
        """
        index = self.load_index()
        position = self.balances(index, end_date=as_of)
        if period_start is None:
            period = position
        else:
            period = self.balances(index, period_start, as_of)

        income_statement = IncomeStatementBuilder().build(period, period_start, as_of)
        balance_sheet = BalanceSheetBuilder().build(
            position, net_period_result=income_statement.period_result
        )
        if not balance_sheet.is_balanced:
            logger.warning(
                "Balance sheet does not balance at %s: difference %s",
                as_of,
                balance_sheet.difference,
            )
        return balance_sheet, income_statement

    def cash_flow(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> CashFlowStatement:
        """Build the cash flow statement for a period."""
        index = self.load_index()
        entries = self.db.list_journal_entries(start_date=start_date, end_date=end_date)
        return CashFlowBuilder().build(
            aggregate(entries, index),
            opening_balances=self.opening_balances(index, start_date),
            closing_balances=self.balances(index, end_date=end_date),
            entries=entries,
        )

    def validate_double_entry(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        include_ungrouped: bool = False,
    ) -> DoubleEntryReport:
        """Check that every transaction in the period balances."""
        entries = self.db.list_journal_entries(start_date=start_date, end_date=end_date)
        return DoubleEntryValidator(include_ungrouped=include_ungrouped).validate(entries)

    def account_ledger(
        self,
        account_code: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> AccountLedger:
        """Build one account's ledger with its balance brought forward.

        Raises:
            NotFoundError: If no account has the code
        """
        account = self.account_service.get_account_by_code(account_code)

        opening_balance = 0
        if start_date is not None:
            earlier = self.db.list_journal_entries(
                before_date=start_date, account_id=account.id
            )
            opening_balance = aggregate(earlier, [account])[account.id].signed_balance

        entries = self.db.list_journal_entries(
            start_date=start_date, end_date=end_date, account_id=account.id
        )
        return AccountLedgerBuilder().build(entries, account, opening_balance)
