"""Category domain service."""

from typing import Optional

from fintrack.database.base import DocumentStore
from fintrack.database.mappers import category_from_document, to_document
from fintrack.domain.entities import Category as CategoryEntity, TransactionType
from fintrack.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
)

DEFAULT_ICON = "🍔"
DEFAULT_COLOR = "#ef4444"


def _transaction_type(value: TransactionType | str) -> TransactionType:
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError(f"Unknown category type '{value}'")


class CategoryService:
    """Service for managing categories."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize category service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id

    def create_category(
        self,
        name: str,
        category_type: TransactionType | str = TransactionType.EXPENSE,
        icon: str = DEFAULT_ICON,
        color: str = DEFAULT_COLOR,
    ) -> str:
        """Create a category.

        Args:
            name: Category name
            category_type: income or expense
            icon: Display icon
            color: Display color

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty or already used for the same
                type, or the type is unknown
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        category_type = _transaction_type(category_type)

        for cat in self.store.list_categories(self.owner_id):
            if cat.type == category_type and cat.name.casefold() == name.casefold():
                raise ValidationError(
                    f"{category_type.value.capitalize()} category '{name}' already exists"
                )

        return self.store.insert(
            "categories",
            self.owner_id,
            to_document({"name": name, "type": category_type, "icon": icon, "color": color}),
        )

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
    ) -> None:
        """Update display fields of a category. None leaves a field unchanged.

        Raises:
            NotFoundError: If the category does not exist
            ValidationError: If the new name is empty
        """
        if self.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        changes = {}
        if name is not None:
            if not name.strip():
                raise ValidationError("Category name cannot be empty")
            changes["name"] = name.strip()
        if icon is not None:
            changes["icon"] = icon
        if color is not None:
            changes["color"] = color

        if changes:
            self.store.update("categories", category_id, changes)

    def get_category(self, category_id: str) -> Optional[CategoryEntity]:
        """Get category by ID, or None if not found or owned by someone else."""
        found = self.store.get("categories", category_id)
        if found is None:
            return None
        doc_id, owner_id, data = found
        if owner_id != self.owner_id:
            return None
        return category_from_document(doc_id, data, owner_id)

    def list_categories(
        self, category_type: Optional[TransactionType | str] = None
    ) -> list[CategoryEntity]:
        """List categories, optionally only those of one type."""
        categories = self.store.list_categories(self.owner_id)
        if category_type is None:
            return categories
        category_type = _transaction_type(category_type)
        return [cat for cat in categories if cat.type == category_type]

    def get_category_index(self) -> dict[str, CategoryEntity]:
        """Return a map of category ID to category."""
        return {cat.id: cat for cat in self.store.list_categories(self.owner_id)}

    def delete_category(self, category_id: str) -> None:
        """Delete a category.

        Raises:
            NotFoundError: If the category does not exist
            DependencyError: If transactions or budgets still reference it
        """
        if self.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        transaction_count = sum(
            1
            for txn in self.store.list_transactions(self.owner_id)
            if txn.category_id == category_id
        )
        budget_count = sum(
            1
            for budget in self.store.list_budgets(self.owner_id)
            if budget.category_id == category_id
        )
        if transaction_count > 0 or budget_count > 0:
            raise DependencyError(
                category_delete_blocked(category_id, transaction_count, budget_count)
            )

        self.store.delete("categories", category_id)
