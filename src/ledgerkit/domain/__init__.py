"""Domain layer for ledgerkit application."""

__all__ = [
    "AccountService",
    "LedgerImportService",
    "ReportService",
]


# Services import the database layer, which imports entities from here, so
# they are loaded on first access.
def __getattr__(name):
    if name == "AccountService":
        from ledgerkit.domain.account import AccountService
        return AccountService
    if name == "LedgerImportService":
        from ledgerkit.domain.ledger_import import LedgerImportService
        return LedgerImportService
    if name == "ReportService":
        from ledgerkit.domain.reports import ReportService
        return ReportService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
