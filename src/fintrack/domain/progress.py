"""Budget and savings goal progress."""

import math
from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain.entities import (
    Budget,
    BudgetProgress,
    BudgetStatus,
    Goal,
    GoalProgress,
    GoalStatus,
)
from fintrack.utils.coercion import as_utc

WARNING_THRESHOLD = 80.0
OVER_THRESHOLD = 100.0

_SECONDS_PER_DAY = 24 * 60 * 60


def ratio_percentage(actual: Decimal, target: Decimal) -> float:
    """Return ``actual / target * 100``, or 0 when the target is not positive."""
    if target <= 0:
        return 0.0
    return float(actual / target * 100)


def progress_percentage(actual: Decimal, target: Decimal) -> float:
    """Return the display percentage, clamped to ``[0, 100]``."""
    return min(max(ratio_percentage(actual, target), 0.0), 100.0)


def budget_status(spent: Decimal, amount: Decimal) -> BudgetStatus:
    """Classify a budget as good, warning (80%+) or over (100%+)."""
    percentage = ratio_percentage(spent, amount)
    if percentage >= OVER_THRESHOLD:
        return BudgetStatus.OVER
    if percentage >= WARNING_THRESHOLD:
        return BudgetStatus.WARNING
    return BudgetStatus.GOOD


def budget_progress(budget: Budget) -> BudgetProgress:
    """Compute display progress for a budget.

    ``remaining`` is negative when the budget is overspent; callers pick the
    "remaining" or "over budget" phrasing from its sign.
    """
    return BudgetProgress(
        budget=budget,
        percentage=progress_percentage(budget.spent, budget.amount),
        over_budget=budget.spent > budget.amount,
        status=budget_status(budget.spent, budget.amount),
        remaining=budget.amount - budget.spent,
    )


def days_until(target: datetime, now: datetime) -> int:
    """Whole days until ``target``, rounded up; negative once it has passed."""
    delta = as_utc(target) - as_utc(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def goal_progress(goal: Goal, now: Optional[datetime] = None) -> GoalProgress:
    """Compute display progress for a savings goal.

    A completed goal is never reported as overdue, whatever its target date.
    """
    now = as_utc(now) if now is not None else datetime.now(UTC)

    completed = goal.current_amount >= goal.target_amount
    overdue = now > as_utc(goal.target_date) and not completed

    if completed:
        status = GoalStatus.COMPLETED
    elif overdue:
        status = GoalStatus.OVERDUE
    else:
        status = GoalStatus.ACTIVE

    return GoalProgress(
        goal=goal,
        percentage=progress_percentage(goal.current_amount, goal.target_amount),
        completed=completed,
        days_remaining=days_until(goal.target_date, now),
        overdue=overdue,
        status=status,
        remaining=max(goal.target_amount - goal.current_amount, Decimal("0")),
    )
