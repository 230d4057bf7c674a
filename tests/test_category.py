"""Tests for category service and commands."""

from decimal import Decimal

import pytest

from fintrack.domain.category import DEFAULT_COLOR, DEFAULT_ICON
from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import DependencyError, NotFoundError, ValidationError


def test_create_category_defaults(category_service):
    category_id = category_service.create_category("Dining")

    category = category_service.get_category(category_id)
    assert category.type == TransactionType.EXPENSE
    assert category.icon == DEFAULT_ICON
    assert category.color == DEFAULT_COLOR


def test_same_name_allowed_for_different_types(category_service):
    category_service.create_category("Refunds", TransactionType.INCOME)
    category_service.create_category("Refunds", TransactionType.EXPENSE)

    with pytest.raises(ValidationError, match="already exists"):
        category_service.create_category("refunds", TransactionType.EXPENSE)


def test_create_category_unknown_type(category_service):
    with pytest.raises(ValidationError, match="Unknown category type"):
        category_service.create_category("Transfers", "transfer")


def test_list_categories_by_type(category_service, sample_categories):
    income = category_service.list_categories(TransactionType.INCOME)
    expense = category_service.list_categories("expense")

    assert [cat.name for cat in income] == ["Salary"]
    assert [cat.name for cat in expense] == ["Groceries", "Rent"]
    assert len(category_service.list_categories()) == 3


def test_update_category(category_service, sample_categories):
    category_id = sample_categories["Groceries"]

    category_service.update_category(category_id, name="Food", color="#000000")

    category = category_service.get_category(category_id)
    assert category.name == "Food"
    assert category.color == "#000000"
    assert category.icon == "🛒"


def test_update_category_validation(category_service, sample_categories):
    with pytest.raises(NotFoundError):
        category_service.update_category("missing", name="x")
    with pytest.raises(ValidationError):
        category_service.update_category(sample_categories["Rent"], name="  ")


def test_delete_category(category_service, sample_categories):
    category_service.delete_category(sample_categories["Rent"])

    assert category_service.get_category(sample_categories["Rent"]) is None


def test_delete_category_in_use(category_service, budget_service, sample_categories):
    budget_service.create_budget(sample_categories["Rent"], Decimal("1200"))

    with pytest.raises(DependencyError, match="1 budget"):
        category_service.delete_category(sample_categories["Rent"])


def test_category_add_command(run_cli):
    result = run_cli("category", "add", "Salary", "--type", "income", "--icon", "💼")

    assert result.exit_code == 0
    assert "Created income category 'Salary'" in result.output


def test_category_list_command(run_cli, sample_categories):
    result = run_cli("category", "list", "--type", "expense")

    assert result.exit_code == 0
    assert "Groceries" in result.output
    assert "Salary" not in result.output


def test_category_edit_command(run_cli, category_service, sample_categories):
    result = run_cli("category", "edit", "Groceries", "--name", "Food")

    assert result.exit_code == 0
    category_service.store.disconnect()
    assert category_service.get_category(sample_categories["Groceries"]).name == "Food"


def test_category_delete_blocked_command(run_cli, sample_transactions):
    result = run_cli("category", "delete", "Groceries", "--yes")

    assert result.exit_code == 1
    assert "Cannot delete category" in result.output
