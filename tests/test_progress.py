"""Tests for budget and savings goal progress."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from fintrack.domain.entities import BudgetStatus, GoalStatus
from fintrack.domain.progress import (
    budget_progress,
    budget_status,
    days_until,
    goal_progress,
    progress_percentage,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


class TestBudgetProgress:
    """Test budget_progress."""

    def test_over_budget(self, make_budget):
        progress = budget_progress(make_budget(amount="1000", spent="1200"))

        assert progress.percentage == 100.0
        assert progress.over_budget is True
        assert progress.status == BudgetStatus.OVER
        assert progress.overage == Decimal("200")
        assert progress.remaining == Decimal("-200")

    def test_within_budget(self, make_budget):
        progress = budget_progress(make_budget(amount="400", spent="100"))

        assert progress.percentage == 25.0
        assert progress.over_budget is False
        assert progress.status == BudgetStatus.GOOD
        assert progress.remaining == Decimal("300")
        assert progress.overage == Decimal("0")

    @pytest.mark.parametrize(
        "spent, expected",
        [
            ("0", BudgetStatus.GOOD),
            ("79.99", BudgetStatus.GOOD),
            ("80", BudgetStatus.WARNING),
            ("99.99", BudgetStatus.WARNING),
            ("100", BudgetStatus.OVER),
            ("250", BudgetStatus.OVER),
        ],
    )
    def test_status_thresholds(self, spent, expected):
        assert budget_status(Decimal(spent), Decimal("100")) == expected

    def test_exactly_spent_is_over_but_not_overspent(self, make_budget):
        progress = budget_progress(make_budget(amount="100", spent="100"))

        assert progress.percentage == 100.0
        assert progress.status == BudgetStatus.OVER
        assert progress.over_budget is False

    def test_zero_amount_yields_zero_percentage(self, make_budget):
        progress = budget_progress(make_budget(amount="0", spent="50"))

        assert progress.percentage == 0.0
        assert progress.status == BudgetStatus.GOOD

    def test_percentage_stays_within_bounds(self, make_budget):
        for amount in ("0.01", "1", "100", "12345.67"):
            for spent in ("0", "0.005", "50", "100", "99999"):
                budget = make_budget(amount=amount, spent=spent)
                progress = budget_progress(budget)

                assert 0.0 <= progress.percentage <= 100.0
                if budget.spent >= budget.amount:
                    assert progress.percentage == 100.0

    def test_negative_spent_clamps_to_zero(self):
        assert progress_percentage(Decimal("-10"), Decimal("100")) == 0.0


class TestGoalProgress:
    """Test goal_progress."""

    def test_active_goal(self, make_goal):
        goal = make_goal(target="10000", current="2500", target_date=NOW + timedelta(days=365))

        progress = goal_progress(goal, NOW)

        assert progress.percentage == 25.0
        assert progress.completed is False
        assert progress.overdue is False
        assert progress.days_remaining == 365
        assert progress.status == GoalStatus.ACTIVE
        assert progress.remaining == Decimal("7500")

    def test_completion_overrides_lateness(self, make_goal):
        goal = make_goal(target="500", current="500", target_date=NOW - timedelta(days=1))

        progress = goal_progress(goal, NOW)

        assert progress.completed is True
        assert progress.overdue is False
        assert progress.status == GoalStatus.COMPLETED
        assert progress.remaining == Decimal("0")

    def test_overdue_goal(self, make_goal):
        goal = make_goal(target="500", current="100", target_date=NOW - timedelta(days=3))

        progress = goal_progress(goal, NOW)

        assert progress.overdue is True
        assert progress.status == GoalStatus.OVERDUE
        assert progress.days_remaining == -3

    def test_exceeding_target_clamps_percentage(self, make_goal):
        progress = goal_progress(make_goal(target="100", current="150"), NOW)

        assert progress.percentage == 100.0
        assert progress.completed is True
        assert progress.remaining == Decimal("0")

    def test_zero_target_yields_zero_percentage(self, make_goal):
        progress = goal_progress(make_goal(target="0", current="0"), NOW)

        assert progress.percentage == 0.0

    def test_naive_target_date_is_taken_as_utc(self, make_goal):
        goal = make_goal(target_date=datetime(2024, 6, 25, 12, 0))

        assert goal_progress(goal, NOW).days_remaining == 10


def test_days_until_rounds_up():
    assert days_until(NOW + timedelta(hours=1), NOW) == 1
    assert days_until(NOW + timedelta(days=2, hours=1), NOW) == 3
    assert days_until(NOW, NOW) == 0
    assert days_until(NOW - timedelta(days=1, hours=12), NOW) == -1
