"""Period and predicate filtering of transactions."""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Optional, Union

from fintrack.domain.entities import Period, Transaction, TransactionFilter
from fintrack.domain.ranking import UNKNOWN_CATEGORY_NAME
from fintrack.utils.coercion import as_utc

UNKNOWN_ACCOUNT_NAME = "Unknown Account"

ALL = "all"


def _resolve_now(now: Optional[datetime]) -> datetime:
    return as_utc(now) if now is not None else datetime.now(UTC)


def period_start(period: Union[Period, str], now: datetime) -> Optional[datetime]:
    """Return the inclusive lower bound of ``period`` relative to ``now``.

    Args:
        period: Period selector (week, month, year or all)
        now: Reference instant; calendar boundaries use its time zone

    Returns:
        Start of the window, or None for the unbounded "all" period

    Raises:
        ValueError: If ``period`` is not a known period
    """
    period = Period(period)
    now = as_utc(now)

    if period == Period.WEEK:
        return now - timedelta(days=7)
    if period == Period.MONTH:
        return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if period == Period.YEAR:
        return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return None


def in_period(
    transaction: Transaction, period: Union[Period, str], now: datetime
) -> bool:
    """Check whether a transaction falls within ``[period_start, now]``."""
    start = period_start(period, now)
    if start is None:
        return True
    return start <= as_utc(transaction.date) <= as_utc(now)


def filter_by_period(
    transactions: Iterable[Transaction],
    period: Union[Period, str],
    now: Optional[datetime] = None,
) -> list[Transaction]:
    """Select transactions dated within the period ending at ``now``.

    Both bounds are inclusive and naive dates are taken as UTC. ``now`` is
    captured once for the whole call so every transaction is compared against
    the same instant.
    """
    now = _resolve_now(now)
    start = period_start(period, now)
    if start is None:
        return list(transactions)
    return [txn for txn in transactions if start <= as_utc(txn.date) <= now]


def _is_active(value: Optional[str]) -> bool:
    return value is not None and value != "" and value != ALL


def _matches_search(
    txn: Transaction,
    needle: str,
    category_names: Optional[Mapping[str, str]],
    account_names: Optional[Mapping[str, str]],
) -> bool:
    if txn.note and needle in txn.note.lower():
        return True
    if category_names is not None:
        name = category_names.get(txn.category_id, UNKNOWN_CATEGORY_NAME)
        if needle in name.lower():
            return True
    if account_names is not None:
        name = account_names.get(txn.account_id, UNKNOWN_ACCOUNT_NAME)
        if needle in name.lower():
            return True
    return False


def filter_transactions(
    transactions: Iterable[Transaction],
    criteria: TransactionFilter,
    now: Optional[datetime] = None,
    category_names: Optional[Mapping[str, str]] = None,
    account_names: Optional[Mapping[str, str]] = None,
) -> list[Transaction]:
    """Apply every active predicate of ``criteria``, preserving input order.

    Args:
        transactions: Transactions to filter
        criteria: Predicates to apply; inactive ones are skipped
        now: Reference instant for the period predicate
        category_names: Optional category ID to name map; when given, the
            search text also matches category names
        account_names: Optional account ID to name map; when given, the
            search text also matches account names

    Returns:
        Matching transactions
    """
    selected = filter_by_period(transactions, criteria.period, now)

    if _is_active(criteria.type):
        selected = [txn for txn in selected if txn.type == criteria.type]

    if _is_active(criteria.category_id):
        selected = [txn for txn in selected if txn.category_id == criteria.category_id]

    if _is_active(criteria.account_id):
        selected = [txn for txn in selected if txn.account_id == criteria.account_id]

    if criteria.search and criteria.search.strip():
        needle = criteria.search.strip().lower()
        selected = [
            txn
            for txn in selected
            if _matches_search(txn, needle, category_names, account_names)
        ]

    return selected
