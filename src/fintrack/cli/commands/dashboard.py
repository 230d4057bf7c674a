"""Dashboard command."""

import click

from fintrack.cli.date_filters import resolve_cli_datetime
from fintrack.cli.error_handling import exit_on_domain_error
from fintrack.domain.entities import TransactionType
from fintrack.domain.report import ReportService
from fintrack.utils.formatting import format_currency


def _greeting(hour: int) -> str:
    if hour < 12:
        return "Good morning"
    if hour < 18:
        return "Good afternoon"
    return "Good evening"


@click.command("dashboard")
@click.option("--as-of", "as_of", help="Reference date (defaults to now)")
@click.pass_context
@exit_on_domain_error
def dashboard(ctx, as_of: str | None):
    """Show balance, this month's cash flow and recent activity."""
    settings = ctx.obj["settings"]
    service = ReportService(ctx.obj["store"], settings.owner_id)
    now = resolve_cli_datetime(ctx, as_of, "reference date")

    snapshot = service.dashboard(now)
    summary = snapshot.month_summary

    def money(amount):
        return format_currency(amount, settings.currency)

    click.echo(f"{_greeting(snapshot.generated_at.hour)}, {settings.owner_id}")
    click.echo("=" * 60)
    click.echo(f"{'Total balance':<30} {money(snapshot.total_balance):>20}")
    click.echo(f"{'Accounts':<30} {len(snapshot.accounts):>20}")
    click.echo()
    click.echo("This month")
    click.echo("-" * 60)
    click.echo(f"{'Income':<30} {money(summary.income):>20}")
    click.echo(f"{'Expenses':<30} {money(summary.expenses):>20}")
    click.echo(f"{'Net income':<30} {money(summary.net):>20}")
    click.echo(f"{'Savings rate':<30} {summary.savings_rate:>19.1f}%")

    if snapshot.top_categories:
        click.echo()
        click.echo("Top spending")
        click.echo("-" * 60)
        for entry in snapshot.top_categories:
            click.echo(f"{entry.icon} {entry.name:<27} {money(entry.amount):>20}")

    click.echo()
    click.echo("Recent transactions")
    click.echo("-" * 60)
    if not snapshot.recent_transactions:
        click.echo("No transactions yet.")
    for txn in snapshot.recent_transactions:
        sign = "+" if txn.type == TransactionType.INCOME else "-"
        label = txn.note or txn.type.value.capitalize()
        click.echo(
            f"{txn.date.strftime('%Y-%m-%d'):<12} {label[:17]:<17} {sign + money(txn.amount):>20}"
        )


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
