"""Shared pytest fixtures for fintrack tests."""

import itertools
import os
import tempfile
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from fintrack.database.factories import create_sqlite_store
from fintrack.domain.account import AccountService
from fintrack.domain.budget import BudgetService
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import (
    Account,
    AccountType,
    Budget,
    Category,
    Goal,
    Recurrence,
    Transaction,
    TransactionType,
)
from fintrack.domain.goal import GoalService
from fintrack.domain.report import ReportService
from fintrack.domain.transaction import TransactionService

OWNER = "user-1"
OTHER_OWNER = "user-2"

# Fixed reference instant used across tests
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def temp_store():
    """Create a temporary SQLite document store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_store):
    return AccountService(temp_store, OWNER)


@pytest.fixture
def category_service(temp_store):
    return CategoryService(temp_store, OWNER)


@pytest.fixture
def transaction_service(temp_store):
    return TransactionService(temp_store, OWNER)


@pytest.fixture
def budget_service(temp_store):
    return BudgetService(temp_store, OWNER)


@pytest.fixture
def goal_service(temp_store):
    return GoalService(temp_store, OWNER)


@pytest.fixture
def report_service(temp_store):
    return ReportService(temp_store, OWNER)


@pytest.fixture
def sample_accounts(account_service):
    """Create three accounts whose balances add up to 120."""
    return {
        "Wallet": account_service.create_account("Wallet", AccountType.CASH, Decimal("100")),
        "Visa": account_service.create_account("Visa", AccountType.CREDIT_CARD, Decimal("-30")),
        "Savings": account_service.create_account("Savings", AccountType.SAVINGS, Decimal("50")),
    }


@pytest.fixture
def sample_categories(category_service):
    """Create one income and two expense categories."""
    return {
        "Salary": category_service.create_category(
            "Salary", TransactionType.INCOME, icon="💼", color="#10b981"
        ),
        "Groceries": category_service.create_category(
            "Groceries", TransactionType.EXPENSE, icon="🛒", color="#f59e0b"
        ),
        "Rent": category_service.create_category(
            "Rent", TransactionType.EXPENSE, icon="🏠", color="#3b82f6"
        ),
    }


@pytest.fixture
def sample_transactions(transaction_service, sample_accounts, sample_categories):
    """Record June income/expenses and one May expense, relative to NOW."""
    wallet = sample_accounts["Wallet"]
    ids = [
        transaction_service.create_transaction(
            wallet, sample_categories["Salary"], Decimal("500"), "income",
            date=datetime(2024, 6, 1, 9, 0, tzinfo=UTC), note="June salary",
        ),
        transaction_service.create_transaction(
            wallet, sample_categories["Rent"], Decimal("200"), "expense",
            date=datetime(2024, 6, 3, 9, 0, tzinfo=UTC), note="Rent",
        ),
        transaction_service.create_transaction(
            sample_accounts["Visa"], sample_categories["Groceries"], Decimal("50"), "expense",
            date=datetime(2024, 6, 10, 18, 0, tzinfo=UTC), note="Weekly shop",
        ),
        transaction_service.create_transaction(
            wallet, sample_categories["Groceries"], Decimal("80"), "expense",
            date=datetime(2024, 5, 20, 18, 0, tzinfo=UTC), note="May shop",
        ),
    ]
    return ids


@pytest.fixture
def make_account():
    counter = itertools.count(1)

    def _make(balance="0", account_type=AccountType.BANK, name=None):
        index = next(counter)
        return Account(
            id=f"acc-{index}",
            owner_id=OWNER,
            name=name or f"Account {index}",
            type=AccountType(account_type),
            balance=Decimal(str(balance)),
            created_at=NOW,
        )

    return _make


@pytest.fixture
def make_category():
    def _make(category_id, name, category_type=TransactionType.EXPENSE, icon="🍔", color="#ef4444"):
        return Category(
            id=category_id,
            owner_id=OWNER,
            name=name,
            icon=icon,
            color=color,
            type=TransactionType(category_type),
        )

    return _make


@pytest.fixture
def make_transaction():
    counter = itertools.count(1)

    def _make(
        amount="10",
        transaction_type=TransactionType.EXPENSE,
        date=NOW - timedelta(days=1),
        category_id="cat-1",
        account_id="acc-1",
        note=None,
    ):
        return Transaction(
            id=f"txn-{next(counter)}",
            owner_id=OWNER,
            account_id=account_id,
            category_id=category_id,
            amount=Decimal(str(amount)),
            type=TransactionType(transaction_type),
            date=date,
            note=note,
        )

    return _make


@pytest.fixture
def make_budget():
    def _make(amount="1000", spent="0", category_id="cat-1"):
        return Budget(
            id="budget-1",
            owner_id=OWNER,
            category_id=category_id,
            amount=Decimal(str(amount)),
            spent=Decimal(str(spent)),
            recurrence=Recurrence.MONTHLY,
            start_date=NOW,
        )

    return _make


@pytest.fixture
def make_goal():
    def _make(target="10000", current="0", target_date=NOW + timedelta(days=365), name="Emergency Fund"):
        return Goal(
            id="goal-1",
            owner_id=OWNER,
            name=name,
            target_amount=Decimal(str(target)),
            current_amount=Decimal(str(current)),
            target_date=target_date,
            created_at=NOW - timedelta(days=30),
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, temp_store):
    """Invoke the CLI against the temporary store as OWNER."""
    from fintrack.cli.main import cli

    def _run(*args, input=None):
        return cli_runner.invoke(
            cli,
            ["--db-path", temp_store.database_path, "--owner", OWNER, *args],
            input=input,
        )

    return _run
