"""Balance sheet builder."""

from ledgerkit.domain.aggregation import LedgerBalances
from ledgerkit.domain.entities import (
    AccountCategory,
    BalanceSheet,
    StatementLine,
    StatementSection,
)
from ledgerkit.domain.trial_balance import EPSILON

SECTION_LABELS = {
    AccountCategory.ASSET: "Assets",
    AccountCategory.CONTRA_ASSET: "Contra Assets",
    AccountCategory.LIABILITY: "Liabilities",
    AccountCategory.CONTRA_LIABILITY: "Contra Liabilities",
    AccountCategory.EQUITY: "Equity",
}


class BalanceSheetBuilder:
    """Build a balance sheet and check the fundamental equation."""

    def section(self, balances: LedgerBalances, category: AccountCategory) -> StatementSection:
        """Collect non-zero balances of one category as absolute amounts."""
        lines = [
            StatementLine(
                code=balance.account.code,
                name=balance.account.name,
                amount=abs(balance.signed_balance),
            )
            for balance in balances.for_accounts(balances.index.by_category(category))
            if balance.signed_balance != 0
        ]
        lines.sort(key=lambda line: line.code)
        return StatementSection(label=SECTION_LABELS[category], lines=tuple(lines))

    def build(self, balances: LedgerBalances, net_period_result: int = 0) -> BalanceSheet:
        """Build the balance sheet.

        Equity is reported two ways. The balance-derived figure (assets minus
        liabilities) already contains any result not yet closed into equity;
        the book figure is the sum of equity accounts only. Their difference is
        the unclosed result. The equation check uses book equity plus the
        supplied period result, so a result is counted once whether or not it
        has been closed.

        Args:
            balances: Aggregated balances up to the reporting date
            net_period_result: Period result shown alongside equity, typically
                ``IncomeStatement.period_result``; pass 0 for a closed ledger

        Returns:
            BalanceSheet with totals, both equity figures and balanced flag
        """
        assets = self.section(balances, AccountCategory.ASSET)
        contra_assets = self.section(balances, AccountCategory.CONTRA_ASSET)
        liabilities = self.section(balances, AccountCategory.LIABILITY)
        contra_liabilities = self.section(balances, AccountCategory.CONTRA_LIABILITY)
        equity = self.section(balances, AccountCategory.EQUITY)

        total_assets = assets.total - contra_assets.total
        total_liabilities = liabilities.total - contra_liabilities.total
        equity_balance_derived = total_assets - total_liabilities
        equity_book = equity.total
        difference = total_assets - (total_liabilities + equity_book + net_period_result)

        return BalanceSheet(
            assets=assets,
            contra_assets=contra_assets,
            liabilities=liabilities,
            contra_liabilities=contra_liabilities,
            equity=equity,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            equity_balance_derived=equity_balance_derived,
            equity_book=equity_book,
            unclosed_result=equity_balance_derived - equity_book,
            net_period_result=net_period_result,
            difference=difference,
            is_balanced=abs(difference) < EPSILON,
        )
