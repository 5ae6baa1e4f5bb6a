"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class EmptyChartOfAccountsError(DomainError):
    """No active accounts exist, so no report can be produced."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account by ID."""
    return f"Account {account_id} not found"


def account_code_not_found(code: str) -> str:
    """Return message for missing account by code."""
    return f"Account with code '{code}' not found"


def duplicate_account_code(code: str) -> str:
    """Return message for an account code that already exists."""
    return f"Account with code '{code}' already exists"


def duplicate_account_id(account_id: int) -> str:
    """Return message for a chart of accounts with a repeated ID."""
    return f"Account ID {account_id} appears more than once in the chart of accounts"


def negative_amount(entry_id: int, amount: int) -> str:
    """Return message for a journal entry with a negative amount."""
    return (
        f"Journal entry {entry_id} has negative amount {amount}; "
        "the sign must be carried by the entry type"
    )


def empty_chart_of_accounts() -> str:
    """Return message when the chart of accounts has no active accounts."""
    return (
        "The chart of accounts is empty. "
        "Import a chart of accounts before generating reports."
    )


def invalid_choice(field: str, value: str, choices: list[str]) -> str:
    """Return message for a value outside an enumeration."""
    return f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"
