"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
how the document store lays records out. Raw documents are converted into
these entities once, at the fetch boundary (see ``fintrack.database.mappers``),
so the aggregation functions can assume well-typed input.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Kind of money container an account represents."""

    CASH = "cash"
    BANK = "bank"
    CREDIT_CARD = "credit_card"
    INVESTMENT = "investment"
    SAVINGS = "savings"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class TransactionType(str, Enum):
    """Direction of a transaction; also the type of a category."""

    INCOME = "income"
    EXPENSE = "expense"


class Recurrence(str, Enum):
    """Renewal cadence of a budget. Display only."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Period(str, Enum):
    """Date window used to bound aggregation."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class BudgetStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    OVER = "over"


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class Account:
    """Account domain entity. Balance is signed (credit card debt is negative)."""

    id: str
    owner_id: str
    name: str
    type: AccountType
    balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity with display metadata."""

    id: str
    owner_id: str
    name: str
    icon: str
    color: str
    type: TransactionType


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is never negative; the direction is carried by ``type``.
    """

    id: str
    owner_id: str
    account_id: str
    category_id: str
    amount: Decimal
    type: TransactionType
    date: datetime
    note: Optional[str] = None
    receipt_url: Optional[str] = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Budget:
    """Budget domain entity. ``spent`` is stored, not derived from transactions."""

    id: str
    owner_id: str
    category_id: str
    amount: Decimal
    spent: Decimal
    recurrence: Recurrence
    start_date: datetime


@dataclass(frozen=True)
class Goal:
    """Savings goal domain entity."""

    id: str
    owner_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: datetime
    created_at: datetime


@dataclass(frozen=True)
class TransactionFilter:
    """Predicates for selecting transactions.

    ``None`` or ``"all"`` disables a predicate. All predicates AND together.
    """

    type: Optional[str] = None
    category_id: Optional[str] = None
    account_id: Optional[str] = None
    search: Optional[str] = None
    period: Period = Period.ALL


@dataclass(frozen=True)
class IncomeExpenseSummary:
    """Income and expense totals for a set of transactions."""

    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    net: Decimal = Decimal("0")
    savings_rate: float = 0.0


@dataclass(frozen=True)
class MonthlySummary:
    """Income and expense totals for a single ``YYYY-MM`` month."""

    month: str
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Total spent in one category, with its display metadata."""

    category_id: str
    name: str
    color: str
    icon: str
    amount: Decimal


@dataclass(frozen=True)
class BudgetProgress:
    """Derived progress values for a budget."""

    budget: Budget
    percentage: float
    over_budget: bool
    status: BudgetStatus
    remaining: Decimal

    @property
    def overage(self) -> Decimal:
        """Amount spent beyond the budget, zero when within it."""
        return max(-self.remaining, Decimal("0"))


@dataclass(frozen=True)
class GoalProgress:
    """Derived progress values for a savings goal."""

    goal: Goal
    percentage: float
    completed: bool
    days_remaining: int
    overdue: bool
    status: GoalStatus
    remaining: Decimal


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard displays for one owner."""

    owner_id: str
    generated_at: datetime
    total_balance: Decimal = Decimal("0")
    accounts: tuple[Account, ...] = ()
    month_summary: IncomeExpenseSummary = field(default_factory=IncomeExpenseSummary)
    recent_transactions: tuple[Transaction, ...] = ()
    top_categories: tuple[CategorySpending, ...] = ()


@dataclass(frozen=True)
class PeriodReport:
    """Aggregates shown on the reports view for one period."""

    owner_id: str
    period: Period
    generated_at: datetime
    summary: IncomeExpenseSummary = field(default_factory=IncomeExpenseSummary)
    monthly: tuple[MonthlySummary, ...] = ()
    top_categories: tuple[CategorySpending, ...] = ()
    transaction_count: int = 0
