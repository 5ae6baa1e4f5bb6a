"""Trial balance builder."""

from ledgerkit.domain.aggregation import LedgerBalances
from ledgerkit.domain.entities import TrialBalance

# One minor unit. Totals are integers, so this only admits exact equality.
EPSILON = 1


class TrialBalanceBuilder:
    """Build a trial balance from aggregated balances."""

    def build(self, balances: LedgerBalances) -> TrialBalance:
        """Build the trial balance.

        Rows are the active accounts with any debit or credit movement, sorted
        by account code using plain string comparison. That order is
        lexicographic, not dotted-numeric: "1.10" sorts before "1.2".

        Args:
            balances: Aggregated ledger balances

        Returns:
            TrialBalance with totals, difference and balanced flag
        """
        rows = [
            balance
            for balance in balances.for_accounts(balances.index.active())
            if balance.has_movement
        ]
        rows.sort(key=lambda balance: balance.account.code)

        total_debit = sum(row.debit_total for row in rows)
        total_credit = sum(row.credit_total for row in rows)
        difference = total_debit - total_credit

        return TrialBalance(
            rows=tuple(rows),
            total_debit=total_debit,
            total_credit=total_credit,
            difference=difference,
            is_balanced=abs(difference) < EPSILON,
            unknown_references=balances.unknown_references,
        )
