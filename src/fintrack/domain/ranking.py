"""Top spending category ranking."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Optional, Union

from fintrack.domain.entities import Category, CategorySpending, Transaction, TransactionType

UNKNOWN_CATEGORY_NAME = "Unknown Category"
UNKNOWN_CATEGORY_COLOR = "#6b7280"
UNKNOWN_CATEGORY_ICON = "❓"

TOP_CATEGORY_LIMIT = 5


def _category_index(
    categories: Union[Iterable[Category], Mapping[str, Category]],
) -> Mapping[str, Category]:
    if isinstance(categories, Mapping):
        return categories
    return {category.id: category for category in categories}


def rank_categories(
    expenses: Iterable[Transaction],
    categories: Union[Iterable[Category], Mapping[str, Category]],
    limit: Optional[int] = None,
) -> list[CategorySpending]:
    """Rank expense categories by total amount spent.

    Transactions are grouped by ``category_id`` and sorted by total,
    highest first. The sort is stable, so ties keep the order in which
    their categories were first encountered. Categories that cannot be
    resolved are reported under a sentinel name, color and icon.

    Args:
        expenses: Expense transactions; other types are ignored
        categories: Category records, or a mapping of ID to category
        limit: Keep only the top N entries when given

    Returns:
        List of CategorySpending, descending by amount
    """
    index = _category_index(categories)

    totals: dict[str, Decimal] = {}
    for txn in expenses:
        if txn.type != TransactionType.EXPENSE:
            continue
        totals[txn.category_id] = totals.get(txn.category_id, Decimal("0")) + txn.amount

    ranking = []
    for category_id, amount in totals.items():
        category = index.get(category_id)
        ranking.append(
            CategorySpending(
                category_id=category_id,
                name=category.name if category else UNKNOWN_CATEGORY_NAME,
                color=category.color if category else UNKNOWN_CATEGORY_COLOR,
                icon=category.icon if category else UNKNOWN_CATEGORY_ICON,
                amount=amount,
            )
        )

    ranking.sort(key=lambda entry: entry.amount, reverse=True)

    if limit is not None:
        return ranking[: max(limit, 0)]
    return ranking
