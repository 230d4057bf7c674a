"""Report command."""

import click

from fintrack.cli.date_filters import period_option, resolve_cli_datetime
from fintrack.cli.error_handling import exit_on_domain_error
from fintrack.domain.ranking import TOP_CATEGORY_LIMIT
from fintrack.domain.report import ReportService
from fintrack.utils.formatting import format_currency


@click.command("report")
@period_option()
@click.option("--as-of", "as_of", help="Reference date for the period (defaults to now)")
@click.option("--top", default=TOP_CATEGORY_LIMIT, show_default=True, help="Number of top categories to show")
@click.pass_context
@exit_on_domain_error
def report(ctx, period: str, as_of: str | None, top: int):
    """Show income, expenses, monthly breakdown and top spending categories."""
    settings = ctx.obj["settings"]
    service = ReportService(ctx.obj["store"], settings.owner_id)
    now = resolve_cli_datetime(ctx, as_of, "reference date")

    result = service.report(period=period, now=now, top=top)

    def money(amount):
        return format_currency(amount, settings.currency)

    click.echo(f"\nReport ({result.period.value}): {result.transaction_count} transaction(s)")
    click.echo("=" * 60)
    click.echo(f"{'Total income':<30} {money(result.summary.income):>20}")
    click.echo(f"{'Total expenses':<30} {money(result.summary.expenses):>20}")
    click.echo(f"{'Net income':<30} {money(result.summary.net):>20}")
    click.echo(f"{'Savings rate':<30} {result.summary.savings_rate:>19.1f}%")

    if not result.transaction_count:
        click.echo("\nNo data available. Add some transactions to see reports.")
        return

    click.echo("\nMonthly")
    click.echo("-" * 60)
    click.echo(f"{'Month':<10} {'Income':>15} {'Expenses':>15} {'Net':>15}")
    for month in result.monthly:
        click.echo(
            f"{month.month:<10} {money(month.income):>15} "
            f"{money(month.expenses):>15} {money(month.net):>15}"
        )

    if result.top_categories:
        click.echo("\nTop spending categories")
        click.echo("-" * 60)
        for rank, entry in enumerate(result.top_categories, start=1):
            click.echo(f"{rank}. {entry.icon} {entry.name:<25} {money(entry.amount):>20}")


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
