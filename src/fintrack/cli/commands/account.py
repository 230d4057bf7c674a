"""Account management commands."""

import click

from fintrack.cli.date_filters import resolve_cli_amount
from fintrack.cli.error_handling import exit_on_domain_error, handle_domain_error
from fintrack.cli.record_resolution import resolve_record_or_exit
from fintrack.domain.account import AccountService
from fintrack.domain.balance import balances_by_type, sum_balances
from fintrack.domain.entities import AccountType
from fintrack.domain.errors import DomainError
from fintrack.utils.formatting import format_currency

ACCOUNT_TYPES = [account_type.value for account_type in AccountType]


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("add")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(ACCOUNT_TYPES),
    default=AccountType.CASH.value,
    show_default=True,
    help="Kind of account",
)
@click.option("--balance", default="0", help="Opening balance (may be negative)")
@click.pass_context
@exit_on_domain_error
def add_account(ctx, name: str, account_type: str, balance: str):
    """Create a new account.

    Examples:
        fintrack account add "Wallet"
        fintrack account add "Checking" --type bank --balance 1500
        fintrack account add "Visa" --type credit_card --balance -320.50
    """
    settings = ctx.obj["settings"]
    service = AccountService(ctx.obj["store"], settings.owner_id)
    opening_balance = resolve_cli_amount(ctx, balance, "balance")

    try:
        account_id = service.create_account(
            name=name, account_type=account_type, balance=opening_balance
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created account '{name.strip()}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
@exit_on_domain_error
def list_accounts(ctx):
    """List all accounts with their balances and the total."""
    settings = ctx.obj["settings"]
    service = AccountService(ctx.obj["store"], settings.owner_id)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    click.echo(f"{'ID':<34} {'Name':<20} {'Type':<12} {'Balance':>12}")
    click.echo("-" * 80)
    for acc in accounts:
        balance = format_currency(acc.balance, settings.currency)
        click.echo(f"{acc.id:<34} {acc.name:<20} {acc.type.label:<12} {balance:>12}")
    click.echo("-" * 80)

    subtotals = balances_by_type(accounts)
    if len(subtotals) > 1:
        for account_type, subtotal in subtotals.items():
            click.echo(
                f"{account_type.label + ' total':<67} "
                f"{format_currency(subtotal, settings.currency):>12}"
            )
    total = format_currency(sum_balances(accounts), settings.currency)
    click.echo(f"{'Total balance':<67} {total:>12}")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@exit_on_domain_error
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID. The account can only be deleted if
    no transactions reference it.
    """
    settings = ctx.obj["settings"]
    service = AccountService(ctx.obj["store"], settings.owner_id)
    account_id = resolve_record_or_exit(ctx, service.list_accounts(), account, "account")
    account_obj = service.get_account(account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}'?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted account '{account_obj.name}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
