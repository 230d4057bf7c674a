"""Budget commands."""

import click

from fintrack.cli.date_filters import resolve_cli_amount, resolve_cli_datetime
from fintrack.cli.error_handling import exit_on_domain_error, handle_domain_error
from fintrack.cli.record_resolution import resolve_record_or_exit
from fintrack.domain.budget import BudgetService
from fintrack.domain.entities import BudgetStatus, Recurrence
from fintrack.domain.errors import DomainError
from fintrack.domain.ranking import UNKNOWN_CATEGORY_NAME
from fintrack.utils.formatting import format_currency, format_percentage

STATUS_MARKERS = {
    BudgetStatus.GOOD: "",
    BudgetStatus.WARNING: "!",
    BudgetStatus.OVER: "!!",
}


@click.group()
def budget_group():
    """Manage budgets."""
    pass


@budget_group.command("add")
@click.argument("category", metavar="CATEGORY")
@click.argument("amount")
@click.option("--spent", default="0", help="Amount already spent")
@click.option(
    "--recurrence",
    type=click.Choice([recurrence.value for recurrence in Recurrence]),
    default=Recurrence.MONTHLY.value,
    show_default=True,
)
@click.option("--start-date", help="Start date (defaults to now)")
@click.pass_context
@exit_on_domain_error
def add_budget(
    ctx, category: str, amount: str, spent: str, recurrence: str, start_date: str | None
):
    """Create a budget of AMOUNT for CATEGORY (name or ID).

    Examples:
        fintrack budget add "Food & Dining" 400
        fintrack budget add Travel 2000 --recurrence yearly --spent 350
    """
    settings = ctx.obj["settings"]
    service = BudgetService(ctx.obj["store"], settings.owner_id)

    category_id = resolve_record_or_exit(
        ctx, service.categories.list_categories(), category, "category"
    )
    budget_amount = resolve_cli_amount(ctx, amount)
    spent_amount = resolve_cli_amount(ctx, spent, "spent amount")
    start = resolve_cli_datetime(ctx, start_date, "start date")

    try:
        budget_id = service.create_budget(
            category_id=category_id,
            amount=budget_amount,
            spent=spent_amount,
            recurrence=recurrence,
            start_date=start,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created {recurrence} budget (ID: {budget_id})")


@budget_group.command("spend")
@click.argument("budget_id")
@click.argument("amount")
@click.pass_context
@exit_on_domain_error
def record_spending(ctx, budget_id: str, amount: str):
    """Add AMOUNT to what has been spent against a budget."""
    settings = ctx.obj["settings"]
    service = BudgetService(ctx.obj["store"], settings.owner_id)
    value = resolve_cli_amount(ctx, amount)

    try:
        spent = service.record_spending(budget_id, value)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Spent so far: {format_currency(spent, settings.currency)}")


@budget_group.command("list")
@click.pass_context
@exit_on_domain_error
def list_budgets(ctx):
    """Show every budget with its progress."""
    settings = ctx.obj["settings"]
    service = BudgetService(ctx.obj["store"], settings.owner_id)

    progress_list = service.list_progress()
    if not progress_list:
        click.echo("No budgets found.")
        return

    categories = service.categories.get_category_index()
    click.echo("\nBudgets:")
    click.echo("-" * 100)
    for progress in progress_list:
        budget = progress.budget
        category = categories.get(budget.category_id)
        name = category.name if category else UNKNOWN_CATEGORY_NAME
        spent = format_currency(budget.spent, settings.currency)
        limit = format_currency(budget.amount, settings.currency)
        if progress.over_budget:
            remaining = f"{format_currency(progress.overage, settings.currency)} over budget"
        else:
            remaining = f"{format_currency(progress.remaining, settings.currency)} remaining"
        marker = STATUS_MARKERS[progress.status]
        click.echo(
            f"{budget.id:<34} {name:<20} {spent:>12} of {limit:<12} "
            f"{format_percentage(progress.percentage):>5} {progress.status.value:<8}{marker:<3} {remaining}"
        )


@budget_group.command("delete")
@click.argument("budget_id")
@click.pass_context
@exit_on_domain_error
def delete_budget(ctx, budget_id: str):
    """Delete a budget."""
    settings = ctx.obj["settings"]
    service = BudgetService(ctx.obj["store"], settings.owner_id)

    try:
        service.delete_budget(budget_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted budget {budget_id}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
