"""Budget domain service."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.database.base import DocumentStore
from fintrack.database.mappers import budget_from_document, to_document
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Budget as BudgetEntity, BudgetProgress, Recurrence
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    budget_not_found,
    category_not_found,
)
from fintrack.domain.progress import budget_progress


class BudgetService:
    """Service for managing budgets and reporting their progress."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize budget service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id
        self.categories = CategoryService(store, owner_id)

    def create_budget(
        self,
        category_id: str,
        amount: Decimal,
        spent: Decimal = Decimal("0"),
        recurrence: Recurrence | str = Recurrence.MONTHLY,
        start_date: Optional[datetime] = None,
    ) -> str:
        """Create a budget for a category.

        Raises:
            ValidationError: If amount is not positive, spent is negative or
                the recurrence is unknown
            NotFoundError: If the category does not exist
        """
        if amount <= 0:
            raise ValidationError("Budget amount must be greater than zero")
        if spent < 0:
            raise ValidationError("Budget spent amount cannot be negative")
        try:
            recurrence = Recurrence(recurrence)
        except ValueError:
            raise ValidationError(f"Unknown recurrence '{recurrence}'")

        if self.categories.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        return self.store.insert(
            "budgets",
            self.owner_id,
            to_document(
                {
                    "category_id": category_id,
                    "amount": amount,
                    "spent": spent,
                    "recurrence": recurrence,
                    "start_date": start_date if start_date is not None else datetime.now(UTC),
                }
            ),
        )

    def get_budget(self, budget_id: str) -> Optional[BudgetEntity]:
        """Get budget by ID, or None if not found or owned by someone else."""
        found = self.store.get("budgets", budget_id)
        if found is None:
            return None
        doc_id, owner_id, data = found
        if owner_id != self.owner_id:
            return None
        return budget_from_document(doc_id, data, owner_id)

    def record_spending(self, budget_id: str, amount: Decimal) -> Decimal:
        """Add ``amount`` to a budget's spent total.

        Returns:
            The new spent total

        Raises:
            NotFoundError: If the budget does not exist
            ValidationError: If amount is not positive
        """
        if amount <= 0:
            raise ValidationError("Spending amount must be greater than zero")
        budget = self.get_budget(budget_id)
        if budget is None:
            raise NotFoundError(budget_not_found(budget_id))

        spent = budget.spent + amount
        self.store.update("budgets", budget_id, to_document({"spent": spent}))
        return spent

    def delete_budget(self, budget_id: str) -> None:
        """Delete a budget.

        Raises:
            NotFoundError: If the budget does not exist
        """
        if self.get_budget(budget_id) is None:
            raise NotFoundError(budget_not_found(budget_id))
        self.store.delete("budgets", budget_id)

    def list_budgets(self) -> list[BudgetEntity]:
        """List all budgets of the owner."""
        return self.store.list_budgets(self.owner_id)

    def list_progress(self) -> list[BudgetProgress]:
        """Return progress for every budget."""
        return [budget_progress(budget) for budget in self.list_budgets()]
