"""Dashboard and report composition.

Each source collection is fetched independently. When a fetch fails the
error is logged and the aggregates built from that collection keep their
default (zero or empty) values, so a broken read degrades the view instead
of failing it. Failed fetches are not retried; refreshing runs the whole
fetch-and-aggregate cycle again.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Optional, TypeVar, Union

from fintrack.database.base import DocumentStore
from fintrack.domain.balance import sum_balances
from fintrack.domain.entities import (
    DashboardSnapshot,
    Period,
    PeriodReport,
)
from fintrack.domain.errors import FetchError
from fintrack.domain.periods import filter_by_period, period_start
from fintrack.domain.ranking import TOP_CATEGORY_LIMIT, rank_categories
from fintrack.domain.summary import monthly_breakdown, summarize
from fintrack.domain.transaction import RECENT_TRANSACTION_LIMIT

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReportService:
    """Service building the dashboard and period reports for one owner."""

    def __init__(self, store: DocumentStore, owner_id: str):
        """Initialize report service.

        Args:
            store: Document store instance
            owner_id: Identifier of the signed-in user
        """
        self.store = store
        self.owner_id = owner_id

    def _fetch(self, what: str, fetch: Callable[[], T], default: T) -> T:
        try:
            return fetch()
        except FetchError as e:
            logger.error("Error loading %s for owner %s: %s", what, self.owner_id, e)
            return default

    def dashboard(self, now: Optional[datetime] = None) -> DashboardSnapshot:
        """Build the dashboard snapshot.

        Shows the total balance across accounts, income and expenses for the
        current calendar month, the most recent transactions and the top
        spending categories of the month.
        """
        now = now if now is not None else datetime.now(UTC)

        accounts = self._fetch("accounts", lambda: self.store.list_accounts(self.owner_id), [])
        month_transactions = self._fetch(
            "transactions",
            lambda: filter_by_period(
                self.store.list_transactions(
                    self.owner_id, since=period_start(Period.MONTH, now)
                ),
                Period.MONTH,
                now,
            ),
            [],
        )
        recent = self._fetch(
            "recent transactions",
            lambda: self.store.list_transactions(
                self.owner_id, order_by_date_desc=True, limit=RECENT_TRANSACTION_LIMIT
            ),
            [],
        )
        categories = self._fetch(
            "categories", lambda: self.store.list_categories(self.owner_id), []
        )

        return DashboardSnapshot(
            owner_id=self.owner_id,
            generated_at=now,
            total_balance=sum_balances(accounts),
            accounts=tuple(accounts),
            month_summary=summarize(month_transactions),
            recent_transactions=tuple(recent),
            top_categories=tuple(
                rank_categories(month_transactions, categories, limit=TOP_CATEGORY_LIMIT)
            ),
        )

    def report(
        self,
        period: Union[Period, str] = Period.ALL,
        now: Optional[datetime] = None,
        top: int = TOP_CATEGORY_LIMIT,
    ) -> PeriodReport:
        """Build the report for a period: totals, monthly buckets and top categories."""
        period = Period(period)
        now = now if now is not None else datetime.now(UTC)

        transactions = self._fetch(
            "transactions",
            lambda: filter_by_period(
                self.store.list_transactions(self.owner_id, since=period_start(period, now)),
                period,
                now,
            ),
            [],
        )
        categories = self._fetch(
            "categories", lambda: self.store.list_categories(self.owner_id), []
        )

        return PeriodReport(
            owner_id=self.owner_id,
            period=period,
            generated_at=now,
            summary=summarize(transactions),
            monthly=tuple(monthly_breakdown(transactions)),
            top_categories=tuple(rank_categories(transactions, categories, limit=top)),
            transaction_count=len(transactions),
        )
