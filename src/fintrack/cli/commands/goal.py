"""Savings goal commands."""

import click

from fintrack.cli.date_filters import resolve_cli_amount, resolve_cli_datetime
from fintrack.cli.error_handling import exit_on_domain_error, handle_domain_error
from fintrack.cli.record_resolution import resolve_record_or_exit
from fintrack.domain.errors import DomainError
from fintrack.domain.goal import GoalService
from fintrack.utils.formatting import format_currency, format_percentage


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("add")
@click.argument("name", metavar="GOAL_NAME")
@click.argument("target")
@click.option("--by", "target_date", required=True, help="Target date (YYYY-MM-DD, 'in 1 year', ...)")
@click.option("--current", default="0", help="Amount already saved")
@click.pass_context
@exit_on_domain_error
def add_goal(ctx, name: str, target: str, target_date: str, current: str):
    """Create a savings goal of TARGET.

    Examples:
        fintrack goal add "Emergency Fund" 10000 --by "in 1 year" --current 2500
    """
    settings = ctx.obj["settings"]
    service = GoalService(ctx.obj["store"], settings.owner_id)

    target_amount = resolve_cli_amount(ctx, target, "target amount")
    current_amount = resolve_cli_amount(ctx, current, "current amount")
    deadline = resolve_cli_datetime(ctx, target_date, "target date")

    try:
        goal_id = service.create_goal(
            name=name,
            target_amount=target_amount,
            target_date=deadline,
            current_amount=current_amount,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created goal '{name.strip()}' (ID: {goal_id})")


@goal_group.command("contribute")
@click.argument("goal", metavar="GOAL")
@click.argument("amount")
@click.pass_context
@exit_on_domain_error
def contribute(ctx, goal: str, amount: str):
    """Add AMOUNT to a goal (name or ID)."""
    settings = ctx.obj["settings"]
    service = GoalService(ctx.obj["store"], settings.owner_id)

    goal_id = resolve_record_or_exit(ctx, service.list_goals(), goal, "goal")
    value = resolve_cli_amount(ctx, amount)

    try:
        current = service.contribute(goal_id, value)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Saved so far: {format_currency(current, settings.currency)}")


@goal_group.command("list")
@click.option("--as-of", "as_of", help="Reference date (defaults to now)")
@click.pass_context
@exit_on_domain_error
def list_goals(ctx, as_of: str | None):
    """Show every goal with its progress."""
    settings = ctx.obj["settings"]
    service = GoalService(ctx.obj["store"], settings.owner_id)
    now = resolve_cli_datetime(ctx, as_of, "reference date")

    progress_list = service.list_progress(now)
    if not progress_list:
        click.echo("No goals found.")
        return

    click.echo("\nGoals:")
    click.echo("-" * 100)
    for progress in progress_list:
        goal = progress.goal
        saved = format_currency(goal.current_amount, settings.currency)
        target = format_currency(goal.target_amount, settings.currency)
        if progress.completed:
            timing = "Completed"
        elif progress.overdue:
            timing = f"{abs(progress.days_remaining)} days overdue"
        else:
            timing = f"{progress.days_remaining} days left"
        click.echo(
            f"{goal.id:<34} {goal.name:<20} {saved:>12} of {target:<12} "
            f"{format_percentage(progress.percentage):>5}  {timing}"
        )
        if not progress.completed:
            click.echo(f"{'':<35}{format_currency(progress.remaining, settings.currency)} remaining")


@goal_group.command("delete")
@click.argument("goal", metavar="GOAL")
@click.pass_context
@exit_on_domain_error
def delete_goal(ctx, goal: str):
    """Delete a goal (name or ID)."""
    settings = ctx.obj["settings"]
    service = GoalService(ctx.obj["store"], settings.owner_id)
    goal_id = resolve_record_or_exit(ctx, service.list_goals(), goal, "goal")

    try:
        service.delete_goal(goal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted goal {goal_id}")


def register_commands(cli):
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
