"""Tests for account service and commands."""

from decimal import Decimal

import pytest

from fintrack.domain.account import AccountService
from fintrack.domain.entities import AccountType
from fintrack.domain.errors import DependencyError, NotFoundError, ValidationError


def test_create_account(account_service):
    account_id = account_service.create_account("  Checking ", AccountType.BANK, Decimal("1500"))

    account = account_service.get_account(account_id)
    assert account.name == "Checking"
    assert account.type == AccountType.BANK
    assert account.balance == Decimal("1500")
    assert account.created_at.tzinfo is not None


def test_create_account_validation(account_service):
    with pytest.raises(ValidationError, match="empty"):
        account_service.create_account("   ")
    with pytest.raises(ValidationError, match="Unknown account type"):
        account_service.create_account("Wallet", "piggy_bank")


def test_create_duplicate_account(account_service):
    account_service.create_account("Wallet")

    with pytest.raises(ValidationError, match="already exists"):
        account_service.create_account("wallet")


def test_accounts_are_scoped_to_owner(temp_store, account_service):
    other = AccountService(temp_store, "someone-else")
    other_id = other.create_account("Wallet")

    assert account_service.list_accounts() == []
    assert account_service.get_account(other_id) is None
    # Same name is fine for a different owner
    account_service.create_account("Wallet")


def test_total_balance(account_service, sample_accounts):
    assert account_service.total_balance() == Decimal("120")
    assert account_service.balances_by_type() == {
        AccountType.CASH: Decimal("100"),
        AccountType.CREDIT_CARD: Decimal("-30"),
        AccountType.SAVINGS: Decimal("50"),
    }


def test_delete_account(account_service):
    account_id = account_service.create_account("Old")

    account_service.delete_account(account_id)

    assert account_service.get_account(account_id) is None
    with pytest.raises(NotFoundError):
        account_service.delete_account(account_id)


def test_delete_account_with_transactions(account_service, sample_accounts, sample_transactions):
    with pytest.raises(DependencyError, match="3 transactions"):
        account_service.delete_account(sample_accounts["Wallet"])


def test_account_add_command(run_cli):
    result = run_cli("account", "add", "Checking", "--type", "bank", "--balance", "1500")

    assert result.exit_code == 0
    assert "Created account 'Checking'" in result.output
    assert "ID:" in result.output


def test_account_add_duplicate_command(run_cli):
    assert run_cli("account", "add", "Wallet").exit_code == 0

    result = run_cli("account", "add", "Wallet")

    assert result.exit_code == 1
    assert "already exists" in result.output.lower()


def test_account_add_invalid_balance(run_cli):
    result = run_cli("account", "add", "Wallet", "--balance", "lots")

    assert result.exit_code == 1
    assert "Invalid balance" in result.output


def test_account_list_empty(run_cli):
    result = run_cli("account", "list")

    assert result.exit_code == 0
    assert "No accounts found" in result.output


def test_account_list_with_data(run_cli, sample_accounts):
    result = run_cli("account", "list")

    assert result.exit_code == 0
    assert "Wallet" in result.output
    assert "Credit Card" in result.output
    assert "-$30.00" in result.output
    assert "Total balance" in result.output
    assert "$120.00" in result.output


def test_account_list_uses_currency_option(cli_runner, temp_store, sample_accounts):
    from fintrack.cli.main import cli

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_store.database_path, "--owner", "user-1", "--currency", "eur",
         "account", "list"],
    )

    assert result.exit_code == 0
    assert "€120.00" in result.output


def test_account_delete_command(run_cli, sample_accounts):
    result = run_cli("account", "delete", "savings", "--yes")

    assert result.exit_code == 0
    assert "Deleted account 'Savings'" in result.output


def test_account_delete_cancelled(run_cli, sample_accounts):
    result = run_cli("account", "delete", "Savings", input="n\n")

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output


def test_account_delete_blocked(run_cli, sample_accounts, sample_transactions):
    result = run_cli("account", "delete", "Wallet", "--yes")

    assert result.exit_code == 1
    assert "Cannot delete account" in result.output


def test_account_delete_unknown(run_cli):
    result = run_cli("account", "delete", "Nope", "--yes")

    assert result.exit_code == 1
    assert "Account 'Nope' not found" in result.output
