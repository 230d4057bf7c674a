"""Account domain service."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.database.base import DocumentStore
from fintrack.database.mappers import account_from_document, to_document
from fintrack.domain.balance import balances_by_type, sum_balances
from fintrack.domain.entities import Account as AccountEntity, AccountType
from fintrack.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    account_delete_blocked,
    account_not_found,
)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize account service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id

    def create_account(
        self,
        name: str,
        account_type: AccountType | str = AccountType.CASH,
        balance: Decimal = Decimal("0"),
    ) -> str:
        """Create a new account.

        Args:
            name: Account name
            account_type: One of cash, bank, credit_card, investment, savings
            balance: Opening balance; may be negative

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is empty or already used, or the type
                is unknown
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name cannot be empty")

        try:
            account_type = AccountType(account_type)
        except ValueError:
            raise ValidationError(f"Unknown account type '{account_type}'")

        for acc in self.store.list_accounts(self.owner_id):
            if acc.name.casefold() == name.casefold():
                raise ValidationError(f"Account with name '{name}' already exists")

        return self.store.insert(
            "accounts",
            self.owner_id,
            to_document(
                {
                    "name": name,
                    "type": account_type,
                    "balance": balance,
                    "created_at": datetime.now(UTC),
                }
            ),
        )

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID.

        Returns:
            Account entity or None if not found or owned by someone else
        """
        found = self.store.get("accounts", account_id)
        if found is None:
            return None
        doc_id, owner_id, data = found
        if owner_id != self.owner_id:
            return None
        return account_from_document(doc_id, data, owner_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts of the owner."""
        return self.store.list_accounts(self.owner_id)

    def total_balance(self) -> Decimal:
        """Return the sum of all account balances."""
        return sum_balances(self.list_accounts())

    def balances_by_type(self) -> dict[AccountType, Decimal]:
        """Return balance subtotals per account type."""
        return balances_by_type(self.list_accounts())

    def delete_account(self, account_id: str) -> None:
        """Delete an account.

        Raises:
            NotFoundError: If the account does not exist
            DependencyError: If transactions still reference the account
        """
        if self.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        transaction_count = sum(
            1
            for txn in self.store.list_transactions(self.owner_id)
            if txn.account_id == account_id
        )
        if transaction_count > 0:
            raise DependencyError(account_delete_blocked(account_id, transaction_count))

        self.store.delete("accounts", account_id)
