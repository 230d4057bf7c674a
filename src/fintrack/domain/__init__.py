"""Domain layer for fintrack.

The aggregation functions are pure: they take already fetched records and
never touch the document store. Services live in their own modules and are
imported from there.
"""

from fintrack.domain.balance import balances_by_type, sum_balances
from fintrack.domain.periods import filter_by_period, filter_transactions, period_start
from fintrack.domain.progress import budget_progress, goal_progress
from fintrack.domain.ranking import rank_categories
from fintrack.domain.summary import monthly_breakdown, summarize

__all__ = [
    "balances_by_type",
    "sum_balances",
    "filter_by_period",
    "filter_transactions",
    "period_start",
    "budget_progress",
    "goal_progress",
    "rank_categories",
    "monthly_breakdown",
    "summarize",
]
