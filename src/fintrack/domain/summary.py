"""Income and expense summaries."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import UTC
from decimal import Decimal

from fintrack.domain.entities import (
    IncomeExpenseSummary,
    MonthlySummary,
    Transaction,
    TransactionType,
)
from fintrack.utils.coercion import as_utc


def savings_rate(income: Decimal, net: Decimal) -> float:
    """Return net income as a percentage of income, or 0 without income."""
    if income <= 0:
        return 0.0
    return float(net / income * 100)


def summarize(transactions: Iterable[Transaction]) -> IncomeExpenseSummary:
    """Split transactions into income and expense totals.

    Returns:
        IncomeExpenseSummary where ``net = income - expenses``. Since amounts
        are never negative, ``savings_rate`` can never exceed 100.
    """
    income = Decimal("0")
    expenses = Decimal("0")
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            expenses += txn.amount

    net = income - expenses
    return IncomeExpenseSummary(
        income=income,
        expenses=expenses,
        net=net,
        savings_rate=savings_rate(income, net),
    )


def month_key(txn: Transaction) -> str:
    """Return the UTC ``YYYY-MM`` bucket key for a transaction."""
    return as_utc(txn.date).astimezone(UTC).strftime("%Y-%m")


def group_transactions_by_month(
    transactions: Iterable[Transaction],
) -> dict[str, list[Transaction]]:
    """Group transactions by ``YYYY-MM``."""
    grouped: dict[str, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        grouped[month_key(txn)].append(txn)
    return dict(grouped)


def monthly_breakdown(transactions: Iterable[Transaction]) -> list[MonthlySummary]:
    """Bucket transactions into monthly income/expense sums.

    Anything that is not income counts as an expense. Months are returned in
    ascending order.
    """
    results = []
    for month, month_transactions in sorted(group_transactions_by_month(transactions).items()):
        income = sum(
            (txn.amount for txn in month_transactions if txn.type == TransactionType.INCOME),
            Decimal("0"),
        )
        expenses = sum(
            (txn.amount for txn in month_transactions if txn.type != TransactionType.INCOME),
            Decimal("0"),
        )
        results.append(
            MonthlySummary(month=month, income=income, expenses=expenses, net=income - expenses)
        )
    return results
