"""Transaction commands."""

import click

from fintrack.cli.date_filters import period_option, resolve_cli_amount, resolve_cli_datetime
from fintrack.cli.error_handling import exit_on_domain_error, handle_domain_error
from fintrack.cli.record_resolution import resolve_record_or_exit
from fintrack.domain.entities import Period, TransactionFilter, TransactionType
from fintrack.domain.errors import DomainError
from fintrack.domain.periods import UNKNOWN_ACCOUNT_NAME
from fintrack.domain.ranking import UNKNOWN_CATEGORY_NAME
from fintrack.domain.summary import summarize
from fintrack.domain.transaction import TransactionService
from fintrack.utils.formatting import format_currency

TYPE_CHOICES = [transaction_type.value for transaction_type in TransactionType]


@click.group()
def transaction_group():
    """Record and search transactions."""
    pass


@transaction_group.command("add")
@click.argument("amount")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TYPE_CHOICES),
    help="income or expense (defaults to the category's type)",
)
@click.option("--date", "date_str", help="Transaction date (YYYY-MM-DD, 'yesterday', ...); defaults to now")
@click.option("--note", help="Optional note")
@click.option("--tag", "tags", multiple=True, help="Tag (can be repeated)")
@click.pass_context
@exit_on_domain_error
def add_transaction(
    ctx,
    amount: str,
    account: str,
    category: str,
    transaction_type: str | None,
    date_str: str | None,
    note: str | None,
    tags: tuple[str, ...],
):
    """Record a transaction.

    AMOUNT is always positive; whether money came in or went out is given by
    the type.

    Examples:
        fintrack transaction add 42.50 --account Wallet --category Groceries
        fintrack transaction add 3000 --account Checking --category Salary --date 2024-01-31
    """
    settings = ctx.obj["settings"]
    service = TransactionService(ctx.obj["store"], settings.owner_id)

    value = resolve_cli_amount(ctx, amount)
    when = resolve_cli_datetime(ctx, date_str, "date")
    account_id = resolve_record_or_exit(ctx, service.accounts.list_accounts(), account, "account")
    category_id = resolve_record_or_exit(
        ctx, service.categories.list_categories(), category, "category"
    )
    if transaction_type is None:
        transaction_type = service.categories.get_category(category_id).type

    try:
        transaction_id = service.create_transaction(
            account_id=account_id,
            category_id=category_id,
            amount=value,
            transaction_type=transaction_type,
            date=when,
            note=note,
            tags=tags,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Transaction added successfully (ID: {transaction_id})")


@transaction_group.command("list")
@period_option()
@click.option("--type", "transaction_type", type=click.Choice(TYPE_CHOICES), help="Only income or only expenses")
@click.option("--category", help="Category name or ID")
@click.option("--account", help="Account name or ID")
@click.option("--search", help="Text to look for in notes, category and account names")
@click.option("--as-of", "as_of", help="Reference date for the period (defaults to now)")
@click.pass_context
@exit_on_domain_error
def list_transactions(
    ctx,
    period: str,
    transaction_type: str | None,
    category: str | None,
    account: str | None,
    search: str | None,
    as_of: str | None,
):
    """List transactions, newest first."""
    settings = ctx.obj["settings"]
    service = TransactionService(ctx.obj["store"], settings.owner_id)

    accounts = service.accounts.list_accounts()
    categories = service.categories.list_categories()
    account_id = resolve_record_or_exit(ctx, accounts, account, "account") if account else None
    category_id = (
        resolve_record_or_exit(ctx, categories, category, "category") if category else None
    )
    now = resolve_cli_datetime(ctx, as_of, "reference date")

    criteria = TransactionFilter(
        type=transaction_type,
        category_id=category_id,
        account_id=account_id,
        search=search,
        period=Period(period),
    )
    transactions = service.list_transactions(criteria, now=now)

    if not transactions:
        click.echo("No transactions found.")
        return

    account_names = {acc.id: acc.name for acc in accounts}
    category_names = {cat.id: cat.name for cat in categories}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<34} {'Date':<12} {'Amount':>14} {'Account':<16} {'Category':<16} {'Note':<14}"
    )
    click.echo("-" * 110)
    for txn in transactions:
        sign = "+" if txn.type == TransactionType.INCOME else "-"
        amount_str = sign + format_currency(txn.amount, settings.currency)
        account_name = account_names.get(txn.account_id, UNKNOWN_ACCOUNT_NAME)[:16]
        category_name = category_names.get(txn.category_id, UNKNOWN_CATEGORY_NAME)[:16]
        click.echo(
            f"{txn.id:<34} {txn.date.strftime('%Y-%m-%d'):<12} {amount_str:>14} "
            f"{account_name:<16} {category_name:<16} {(txn.note or '')[:14]:<14}"
        )

    totals = summarize(transactions)
    click.echo("-" * 110)
    click.echo(
        f"Income: {format_currency(totals.income, settings.currency)}   "
        f"Expenses: {format_currency(totals.expenses, settings.currency)}   "
        f"Net: {format_currency(totals.net, settings.currency)}"
    )


@transaction_group.command("note")
@click.argument("transaction_id")
@click.argument("note", required=False)
@click.pass_context
@exit_on_domain_error
def set_note(ctx, transaction_id: str, note: str | None):
    """Set or clear (when NOTE is omitted) the note of a transaction."""
    settings = ctx.obj["settings"]
    service = TransactionService(ctx.obj["store"], settings.owner_id)

    try:
        service.update_note(transaction_id, note)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Note updated" if note else "Note cleared")


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
@exit_on_domain_error
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction."""
    settings = ctx.obj["settings"]
    service = TransactionService(ctx.obj["store"], settings.owner_id)

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
