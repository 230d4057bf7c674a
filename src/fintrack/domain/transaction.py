"""Transaction domain service."""

from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.database.base import DocumentStore
from fintrack.database.mappers import to_document, transaction_from_document
from fintrack.domain.account import AccountService
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import (
    Transaction as TransactionEntity,
    TransactionFilter,
    TransactionType,
)
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    category_not_found,
    transaction_not_found,
)
from fintrack.domain.periods import filter_transactions

RECENT_TRANSACTION_LIMIT = 5


class TransactionService:
    """Service for recording and searching transactions."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize transaction service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id
        self.accounts = AccountService(store, owner_id)
        self.categories = CategoryService(store, owner_id)

    def create_transaction(
        self,
        account_id: str,
        category_id: str,
        amount: Decimal,
        transaction_type: TransactionType | str,
        date: Optional[datetime] = None,
        note: Optional[str] = None,
        receipt_url: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> str:
        """Record a transaction.

        Args:
            account_id: Account the money moved through
            category_id: Category of the transaction; its type must match
            amount: Positive amount; direction comes from ``transaction_type``
            transaction_type: income or expense
            date: When it happened (defaults to now)
            note: Optional free-text note
            receipt_url: Optional link to a stored receipt
            tags: Optional tags

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is not positive, the type is unknown
                or does not match the category type
            NotFoundError: If the account or category does not exist
        """
        if amount <= 0:
            raise ValidationError("Please enter a valid amount greater than zero")

        try:
            transaction_type = TransactionType(transaction_type)
        except ValueError:
            raise ValidationError(f"Unknown transaction type '{transaction_type}'")

        if self.accounts.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        category = self.categories.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        if category.type != transaction_type:
            raise ValidationError(
                f"Category '{category.name}' is an {category.type.value} category, "
                f"not {transaction_type.value}"
            )

        fields = {
            "account_id": account_id,
            "category_id": category_id,
            "amount": amount,
            "type": transaction_type,
            "date": date if date is not None else datetime.now(UTC),
            "tags": tuple(tags),
        }
        note = (note or "").strip()
        if note:
            fields["note"] = note
        if receipt_url:
            fields["receipt_url"] = receipt_url

        return self.store.insert("transactions", self.owner_id, to_document(fields))

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID, or None if not found or owned by someone else."""
        found = self.store.get("transactions", transaction_id)
        if found is None:
            return None
        doc_id, owner_id, data = found
        if owner_id != self.owner_id:
            return None
        return transaction_from_document(doc_id, data, owner_id)

    def update_note(self, transaction_id: str, note: Optional[str]) -> None:
        """Replace the note of a transaction. None or blank clears it.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        if self.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.store.update("transactions", transaction_id, {"note": (note or "").strip() or None})

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        if self.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.store.delete("transactions", transaction_id)

    def list_transactions(
        self,
        criteria: Optional[TransactionFilter] = None,
        now: Optional[datetime] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first, matching ``criteria``.

        The search text matches notes as well as category and account names.
        """
        transactions = self.store.list_transactions(self.owner_id, order_by_date_desc=True)
        if criteria is None:
            return transactions

        category_names = {cat.id: cat.name for cat in self.categories.list_categories()}
        account_names = {acc.id: acc.name for acc in self.accounts.list_accounts()}
        return filter_transactions(
            transactions,
            criteria,
            now=now,
            category_names=category_names,
            account_names=account_names,
        )

    def recent_transactions(self, limit: int = RECENT_TRANSACTION_LIMIT) -> list[TransactionEntity]:
        """Return the newest transactions."""
        return self.store.list_transactions(
            self.owner_id, order_by_date_desc=True, limit=limit
        )
