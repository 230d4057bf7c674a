"""Savings goal domain service."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.database.base import DocumentStore
from fintrack.database.mappers import goal_from_document, to_document
from fintrack.domain.entities import Goal as GoalEntity, GoalProgress
from fintrack.domain.errors import NotFoundError, ValidationError, goal_not_found
from fintrack.domain.progress import goal_progress


class GoalService:
    """Service for managing savings goals and reporting their progress."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize goal service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id

    def create_goal(
        self,
        name: str,
        target_amount: Decimal,
        target_date: datetime,
        current_amount: Decimal = Decimal("0"),
    ) -> str:
        """Create a savings goal.

        Raises:
            ValidationError: If the name is empty, the target is not positive
                or the current amount is negative
        """
        name = name.strip()
        if not name:
            raise ValidationError("Goal name cannot be empty")
        if target_amount <= 0:
            raise ValidationError("Goal target amount must be greater than zero")
        if current_amount < 0:
            raise ValidationError("Goal current amount cannot be negative")

        return self.store.insert(
            "goals",
            self.owner_id,
            to_document(
                {
                    "name": name,
                    "target_amount": target_amount,
                    "current_amount": current_amount,
                    "target_date": target_date,
                    "created_at": datetime.now(UTC),
                }
            ),
        )

    def get_goal(self, goal_id: str) -> Optional[GoalEntity]:
        """Get goal by ID, or None if not found or owned by someone else."""
        found = self.store.get("goals", goal_id)
        if found is None:
            return None
        doc_id, owner_id, data = found
        if owner_id != self.owner_id:
            return None
        return goal_from_document(doc_id, data, owner_id)

    def contribute(self, goal_id: str, amount: Decimal) -> Decimal:
        """Add money to a goal.

        Returns:
            The new current amount

        Raises:
            NotFoundError: If the goal does not exist
            ValidationError: If amount is not positive
        """
        if amount <= 0:
            raise ValidationError("Contribution must be greater than zero")
        goal = self.get_goal(goal_id)
        if goal is None:
            raise NotFoundError(goal_not_found(goal_id))

        current = goal.current_amount + amount
        self.store.update("goals", goal_id, to_document({"current_amount": current}))
        return current

    def delete_goal(self, goal_id: str) -> None:
        """Delete a goal.

        Raises:
            NotFoundError: If the goal does not exist
        """
        if self.get_goal(goal_id) is None:
            raise NotFoundError(goal_not_found(goal_id))
        self.store.delete("goals", goal_id)

    def list_goals(self) -> list[GoalEntity]:
        """List all goals of the owner."""
        return self.store.list_goals(self.owner_id)

    def list_progress(self, now: Optional[datetime] = None) -> list[GoalProgress]:
        """Return progress for every goal, evaluated at a single instant."""
        now = now if now is not None else datetime.now(UTC)
        return [goal_progress(goal, now) for goal in self.list_goals()]
