"""Chart-of-accounts domain service."""

from typing import Optional
from ledgerkit.database.base import Database
from ledgerkit.domain.entities import (
    Account as AccountEntity,
    AccountCategory,
    Nature,
    StatementRole,
)
from ledgerkit.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_code_not_found,
    duplicate_account_code,
    invalid_choice,
)


def parse_choice(enum_type, field: str, value: str):
    """Convert a raw string to an enumeration member.

    Raises:
        ValidationError: If value is not a member of the enumeration
    """
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        raise ValidationError(invalid_choice(field, value, [m.value for m in enum_type]))


class AccountService:
    """Service for reading and registering chart-of-accounts entries."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        code: str,
        name: str,
        category: AccountCategory | str,
        nature: Nature | str,
        statement_role: StatementRole | str = StatementRole.NONE,
        active: bool = True,
    ) -> int:
        """Register a new account.

        Args:
            code: Dotted account code
            name: Display name
            category: Account category
            nature: Entry type that increases the balance
            statement_role: Classification tag for the DRE and cash flow
            active: Whether the account appears in reports

        Returns:
            Account ID

        Raises:
            ValidationError: If a field is empty or not a known value
            ConflictError: If the code already exists
        """
        code = code.strip()
        name = name.strip()
        if not code:
            raise ValidationError("Account code cannot be empty")
        if not name:
            raise ValidationError("Account name cannot be empty")

        if isinstance(category, str) and not isinstance(category, AccountCategory):
            category = parse_choice(AccountCategory, "category", category)
        if isinstance(nature, str) and not isinstance(nature, Nature):
            nature = parse_choice(Nature, "nature", nature)
        if isinstance(statement_role, str) and not isinstance(statement_role, StatementRole):
            statement_role = parse_choice(StatementRole, "statement role", statement_role)

        if self.db.get_account_by_code(code) is not None:
            raise ConflictError(duplicate_account_code(code))

        return self.db.create_account(
            code=code,
            name=name,
            category=category,
            nature=nature,
            statement_role=statement_role,
            active=active,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID."""
        return self.db.get_account(account_id)

    def get_account_by_code(self, code: str) -> AccountEntity:
        """Get account by code.

        Raises:
            NotFoundError: If no account has the code
        """
        account = self.db.get_account_by_code(code.strip())
        if account is None:
            raise NotFoundError(account_code_not_found(code))
        return account

    def list_accounts(self, active_only: bool = False) -> list[AccountEntity]:
        """List accounts ordered by code."""
        return self.db.list_accounts(active_only=active_only)
