"""Domain model entities for ledgerkit.

These are pure data classes representing accounting concepts, independent of
the database schema. Input entities (accounts and journal entries) are owned by
the ledger store; every other entity here is derived by a builder and is
recomputed on each call.

All amounts are integers in minor currency units (cents).
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterator, Optional


class AccountCategory(str, Enum):
    """Statement placement of an account."""

    ASSET = "asset"
    CONTRA_ASSET = "contra_asset"
    LIABILITY = "liability"
    CONTRA_LIABILITY = "contra_liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"


class Nature(str, Enum):
    """Entry type that increases an account's balance."""

    DEBIT = "debit"
    CREDIT = "credit"


class EntryType(str, Enum):
    """Side of a journal entry."""

    DEBIT = "debit"
    CREDIT = "credit"


class StatementRole(str, Enum):
    """Classification tag used by the income statement and cash flow builders."""

    OPERATING_REVENUE = "operating_revenue"
    REVENUE_DEDUCTION = "revenue_deduction"
    COGS = "cogs"
    SALES_EXPENSE = "sales_expense"
    ADMIN_EXPENSE = "admin_expense"
    FINANCIAL_REVENUE = "financial_revenue"
    FINANCIAL_EXPENSE = "financial_expense"
    INCOME_TAX = "income_tax"
    OTHER_REVENUE = "other_revenue"
    OTHER_EXPENSE = "other_expense"
    DEPRECIATION_AMORTIZATION = "depreciation_amortization"
    CASH_EQUIVALENT = "cash_equivalent"
    INVESTING_ACTIVITY = "investing_activity"
    NONE = "none"


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry."""

    id: int
    code: str
    name: str
    category: AccountCategory
    nature: Nature
    active: bool = True
    statement_role: StatementRole = StatementRole.NONE


@dataclass(frozen=True)
class JournalEntry:
    """A single debit or credit line in the ledger."""

    id: int
    account_id: int
    entry_type: EntryType
    amount: int
    entry_date: date
    transaction_id: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class UnknownAccountReference:
    """A journal entry pointing at an account that is not in the chart."""

    entry_id: int
    account_id: int
    amount: int
    entry_type: EntryType


@dataclass(frozen=True)
class AccountBalance:
    """Debit and credit totals of one account."""

    account: Account
    debit_total: int = 0
    credit_total: int = 0

    @property
    def signed_balance(self) -> int:
        """Balance signed by the account's nature."""
        if self.account.nature == Nature.DEBIT:
            return self.debit_total - self.credit_total
        return self.credit_total - self.debit_total

    @property
    def has_movement(self) -> bool:
        return self.debit_total != 0 or self.credit_total != 0


@dataclass(frozen=True)
class TrialBalance:
    """Verification listing of account balances."""

    rows: tuple[AccountBalance, ...]
    total_debit: int
    total_credit: int
    difference: int
    is_balanced: bool
    unknown_references: tuple[UnknownAccountReference, ...] = ()


@dataclass(frozen=True)
class StatementLine:
    """A single account line under a statement subtotal."""

    code: str
    name: str
    amount: int


@dataclass(frozen=True)
class StatementSection:
    """A subtotal with its itemized account lines."""

    label: str
    lines: tuple[StatementLine, ...] = ()

    @property
    def total(self) -> int:
        return sum(line.amount for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class WaterfallStep:
    """One row of the income statement waterfall for presentation.

    ``section`` is None for computed results (Net Revenue, EBIT, ...).
    """

    label: str
    amount: int
    section: Optional[StatementSection] = None


@dataclass(frozen=True)
class IncomeStatement:
    """Cascading revenue-to-result waterfall (DRE)."""

    period_start: Optional[date]
    period_end: Optional[date]
    gross_revenue: StatementSection
    revenue_deductions: StatementSection
    net_revenue: int
    cogs: StatementSection
    gross_profit: int
    sales_expenses: StatementSection
    admin_expenses: StatementSection
    depreciation_amortization: StatementSection
    sales_and_admin_expenses: int
    # Sales plus admin plus D&A, so EBIT is after depreciation
    operating_expenses: int
    ebit: int
    financial_revenue: StatementSection
    financial_expense: StatementSection
    financial_result: int
    profit_before_taxes: int
    income_taxes: StatementSection
    net_profit: int
    other_revenue: StatementSection
    other_expense: StatementSection
    other_result: int
    final_result: Optional[int]
    ebitda: int

    @property
    def period_result(self) -> int:
        """Final Result when reported, otherwise Net Profit."""
        if self.final_result is None:
            return self.net_profit
        return self.final_result

    def steps(self) -> Iterator[WaterfallStep]:
        """Yield the waterfall rows in display order."""
        yield WaterfallStep("Gross Revenue", self.gross_revenue.total, self.gross_revenue)
        yield WaterfallStep(
            "Revenue Deductions", self.revenue_deductions.total, self.revenue_deductions
        )
        yield WaterfallStep("Net Revenue", self.net_revenue)
        yield WaterfallStep("Cost of Goods Sold", self.cogs.total, self.cogs)
        yield WaterfallStep("Gross Profit", self.gross_profit)
        yield WaterfallStep("Sales Expenses", self.sales_expenses.total, self.sales_expenses)
        yield WaterfallStep(
            "Administrative Expenses", self.admin_expenses.total, self.admin_expenses
        )
        yield WaterfallStep(
            "Depreciation & Amortization",
            self.depreciation_amortization.total,
            self.depreciation_amortization,
        )
        yield WaterfallStep("Operating Expenses", self.operating_expenses)
        yield WaterfallStep("EBIT", self.ebit)
        yield WaterfallStep(
            "Financial Revenue", self.financial_revenue.total, self.financial_revenue
        )
        yield WaterfallStep(
            "Financial Expenses", self.financial_expense.total, self.financial_expense
        )
        yield WaterfallStep("Financial Result", self.financial_result)
        yield WaterfallStep("Profit Before Taxes", self.profit_before_taxes)
        yield WaterfallStep("Income Taxes", self.income_taxes.total, self.income_taxes)
        yield WaterfallStep("Net Profit", self.net_profit)
        if self.final_result is not None:
            yield WaterfallStep("Other Revenues", self.other_revenue.total, self.other_revenue)
            yield WaterfallStep("Other Expenses", self.other_expense.total, self.other_expense)
            yield WaterfallStep("Other Revenues/Expenses", self.other_result)
            yield WaterfallStep("Final Result", self.final_result)


@dataclass(frozen=True)
class BalanceSheet:
    """Statement of financial position."""

    assets: StatementSection
    contra_assets: StatementSection
    liabilities: StatementSection
    contra_liabilities: StatementSection
    equity: StatementSection
    total_assets: int
    total_liabilities: int
    equity_balance_derived: int
    equity_book: int
    unclosed_result: int
    net_period_result: int
    difference: int
    is_balanced: bool

    @property
    def total_liabilities_and_equity(self) -> int:
        return self.total_liabilities + self.equity_book + self.net_period_result


@dataclass(frozen=True)
class CashFlowStatement:
    """Direct-method cash flow statement."""

    opening_balance: int
    inflows: int
    outflows: int
    operating_activities: int
    investing_activities: int
    net_cash_flow: int
    closing_balance: int
    expected_closing_balance: int
    reconciliation_difference: int
    is_reconciled: bool


@dataclass(frozen=True)
class TransactionBalanceCheck:
    """Debit/credit comparison for one transaction."""

    transaction_id: Optional[str]
    debit_sum: int
    credit_sum: int
    is_balanced: bool
    description: Optional[str] = None
    entry_date: Optional[date] = None

    @property
    def difference(self) -> int:
        return self.debit_sum - self.credit_sum


@dataclass(frozen=True)
class UngroupedEntries:
    """Entries with no transaction id, reported separately on request."""

    count: int
    debit_sum: int
    credit_sum: int


@dataclass(frozen=True)
class DoubleEntryReport:
    """Unbalanced transactions found by the double-entry validator."""

    unbalanced: tuple[TransactionBalanceCheck, ...]
    checked_transactions: int
    ungrouped: Optional[UngroupedEntries] = None

    @property
    def total_unbalanced(self) -> int:
        return len(self.unbalanced)

    @property
    def has_unbalanced(self) -> bool:
        return self.total_unbalanced > 0


@dataclass(frozen=True)
class AccountLedgerLine:
    """One entry of an account ledger with the running balance after it."""

    entry_id: int
    entry_date: date
    description: Optional[str]
    transaction_id: Optional[str]
    debit: int
    credit: int
    balance: int


@dataclass(frozen=True)
class AccountLedger:
    """Chronological listing of one account's entries."""

    account: Account
    opening_balance: int
    lines: tuple[AccountLedgerLine, ...] = field(default_factory=tuple)

    @property
    def closing_balance(self) -> int:
        if not self.lines:
            return self.opening_balance
        return self.lines[-1].balance

    @property
    def total_debit(self) -> int:
        return sum(line.debit for line in self.lines)

    @property
    def total_credit(self) -> int:
        return sum(line.credit for line in self.lines)
