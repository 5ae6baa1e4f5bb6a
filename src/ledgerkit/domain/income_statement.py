"""Income statement (DRE) builder."""

from datetime import date
from typing import Optional

from ledgerkit.domain.aggregation import LedgerBalances
from ledgerkit.domain.entities import (
    Account,
    AccountCategory,
    IncomeStatement,
    StatementLine,
    StatementRole,
    StatementSection,
)

INCOME_STATEMENT_ROLES = frozenset(
    {
        StatementRole.OPERATING_REVENUE,
        StatementRole.REVENUE_DEDUCTION,
        StatementRole.COGS,
        StatementRole.SALES_EXPENSE,
        StatementRole.ADMIN_EXPENSE,
        StatementRole.FINANCIAL_REVENUE,
        StatementRole.FINANCIAL_EXPENSE,
        StatementRole.INCOME_TAX,
        StatementRole.OTHER_REVENUE,
        StatementRole.OTHER_EXPENSE,
        StatementRole.DEPRECIATION_AMORTIZATION,
    }
)

# Bucket for revenue/expense accounts without an income statement role
DEFAULT_ROLES = {
    AccountCategory.REVENUE: StatementRole.OPERATING_REVENUE,
    AccountCategory.EXPENSE: StatementRole.ADMIN_EXPENSE,
}

SECTION_LABELS = {
    StatementRole.OPERATING_REVENUE: "Gross Revenue",
    StatementRole.REVENUE_DEDUCTION: "Revenue Deductions",
    StatementRole.COGS: "Cost of Goods Sold",
    StatementRole.SALES_EXPENSE: "Sales Expenses",
    StatementRole.ADMIN_EXPENSE: "Administrative Expenses",
    StatementRole.DEPRECIATION_AMORTIZATION: "Depreciation & Amortization",
    StatementRole.FINANCIAL_REVENUE: "Financial Revenue",
    StatementRole.FINANCIAL_EXPENSE: "Financial Expenses",
    StatementRole.INCOME_TAX: "Income Taxes",
    StatementRole.OTHER_REVENUE: "Other Revenues",
    StatementRole.OTHER_EXPENSE: "Other Expenses",
}


def classify(account: Account) -> StatementRole:
    """Return the income statement bucket of a revenue or expense account."""
    if account.statement_role in INCOME_STATEMENT_ROLES:
        return account.statement_role
    return DEFAULT_ROLES[account.category]


class IncomeStatementBuilder:
    """Fold revenue and expense balances into the DRE waterfall."""

    def classify_balances(self, balances: LedgerBalances) -> dict[StatementRole, StatementSection]:
        """Group revenue and expense accounts with movement by statement role."""
        lines: dict[StatementRole, list[StatementLine]] = {role: [] for role in SECTION_LABELS}

        accounts = balances.index.by_category(AccountCategory.REVENUE, AccountCategory.EXPENSE)
        for balance in balances.for_accounts(accounts):
            if not balance.has_movement:
                continue
            account = balance.account
            lines[classify(account)].append(
                StatementLine(code=account.code, name=account.name, amount=balance.signed_balance)
            )

        return {
            role: StatementSection(
                label=SECTION_LABELS[role],
                lines=tuple(sorted(items, key=lambda line: line.code)),
            )
            for role, items in lines.items()
        }

    def build(
        self,
        balances: LedgerBalances,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> IncomeStatement:
        """Build the income statement.

        The balances must already be restricted to the period; the dates are
        carried through for display only.

        Args:
            balances: Aggregated balances for entries within the period
            period_start: First day of the period
            period_end: Last day of the period

        Returns:
            IncomeStatement with every waterfall step and its line items
        """
        sections = self.classify_balances(balances)

        gross_revenue = sections[StatementRole.OPERATING_REVENUE]
        deductions = sections[StatementRole.REVENUE_DEDUCTION]
        net_revenue = gross_revenue.total - deductions.total

        cogs = sections[StatementRole.COGS]
        gross_profit = net_revenue - cogs.total

        sales = sections[StatementRole.SALES_EXPENSE]
        admin = sections[StatementRole.ADMIN_EXPENSE]
        depreciation = sections[StatementRole.DEPRECIATION_AMORTIZATION]
        operating_expenses = sales.total + admin.total + depreciation.total
        ebit = gross_profit - operating_expenses

        financial_revenue = sections[StatementRole.FINANCIAL_REVENUE]
        financial_expense = sections[StatementRole.FINANCIAL_EXPENSE]
        financial_result = financial_revenue.total - financial_expense.total
        profit_before_taxes = ebit + financial_result

        income_taxes = sections[StatementRole.INCOME_TAX]
        net_profit = profit_before_taxes - income_taxes.total

        other_revenue = sections[StatementRole.OTHER_REVENUE]
        other_expense = sections[StatementRole.OTHER_EXPENSE]
        other_result = other_revenue.total - other_expense.total
        final_result = None
        if not (other_revenue.is_empty and other_expense.is_empty):
            final_result = net_profit + other_result

        return IncomeStatement(
            period_start=period_start,
            period_end=period_end,
            gross_revenue=gross_revenue,
            revenue_deductions=deductions,
            net_revenue=net_revenue,
            cogs=cogs,
            gross_profit=gross_profit,
            sales_expenses=sales,
            admin_expenses=admin,
            depreciation_amortization=depreciation,
            sales_and_admin_expenses=sales.total + admin.total,
            operating_expenses=operating_expenses,
            ebit=ebit,
            financial_revenue=financial_revenue,
            financial_expense=financial_expense,
            financial_result=financial_result,
            profit_before_taxes=profit_before_taxes,
            income_taxes=income_taxes,
            net_profit=net_profit,
            other_revenue=other_revenue,
            other_expense=other_expense,
            other_result=other_result,
            final_result=final_result,
            ebitda=ebit + depreciation.total,
        )
