"""Abstract document store interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Optional, TypeVar

from fintrack.database.mappers import (
    account_from_document,
    budget_from_document,
    category_from_document,
    goal_from_document,
    transaction_from_document,
)
from fintrack.domain.entities import Account, Budget, Category, Goal, Transaction
from fintrack.utils.coercion import as_utc

T = TypeVar("T")

StoredDocument = tuple[str, dict[str, Any]]


class DocumentStore(ABC):
    """Abstract document store holding per-owner collections of records.

    Implementations provide the raw document operations; the typed list
    methods map documents to domain entities through
    ``fintrack.database.mappers``. Read failures raise FetchError and write
    failures raise StoreError.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create whatever the store needs before first use."""
        pass

    # Raw document operations
    @abstractmethod
    def insert(self, collection: str, owner_id: str, data: Mapping[str, Any]) -> str:
        """Insert a document. Returns the new document ID."""
        pass

    @abstractmethod
    def update(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        """Merge ``data`` into an existing document."""
        pass

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document."""
        pass

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[tuple[str, str, dict[str, Any]]]:
        """Get a document as ``(id, owner_id, data)``, or None if missing."""
        pass

    @abstractmethod
    def find(self, collection: str, owner_id: str) -> list[StoredDocument]:
        """List ``(id, data)`` pairs of all documents owned by ``owner_id``."""
        pass

    # Typed reads
    def _list(
        self,
        collection: str,
        owner_id: str,
        mapper: Callable[[str, Mapping[str, Any], Optional[str]], T],
    ) -> list[T]:
        return [mapper(doc_id, data, owner_id) for doc_id, data in self.find(collection, owner_id)]

    def list_accounts(self, owner_id: str) -> list[Account]:
        """List all accounts of an owner."""
        return self._list("accounts", owner_id, account_from_document)

    def list_categories(self, owner_id: str) -> list[Category]:
        """List all categories of an owner."""
        return self._list("categories", owner_id, category_from_document)

    def list_budgets(self, owner_id: str) -> list[Budget]:
        """List all budgets of an owner."""
        return self._list("budgets", owner_id, budget_from_document)

    def list_goals(self, owner_id: str) -> list[Goal]:
        """List all savings goals of an owner."""
        return self._list("goals", owner_id, goal_from_document)

    def list_transactions(
        self,
        owner_id: str,
        since: Optional[datetime] = None,
        order_by_date_desc: bool = False,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions of an owner.

        Args:
            owner_id: Owner identifier
            since: Optional inclusive lower bound on the transaction date
            order_by_date_desc: If True, newest transactions come first
            limit: Optional maximum number of transactions to return
        """
        transactions = self._list("transactions", owner_id, transaction_from_document)

        if since is not None:
            since = as_utc(since)
            transactions = [txn for txn in transactions if txn.date >= since]

        if order_by_date_desc:
            transactions.sort(key=lambda txn: txn.date, reverse=True)

        if limit is not None:
            transactions = transactions[:limit]

        return transactions
