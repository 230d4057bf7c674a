"""CLI helpers for dates, amounts and periods."""

from datetime import datetime
from decimal import Decimal

import click

from fintrack.domain.entities import Period
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_datetime

PERIOD_CHOICES = [period.value for period in Period]


def period_option(default: str = Period.ALL.value):
    """Shared --period option for commands that aggregate over a window."""
    return click.option(
        "--period",
        type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
        default=default,
        show_default=True,
        help="Date window: last 7 days, this calendar month, this year or everything",
    )


def resolve_cli_datetime(
    ctx: click.Context, value: str | None, label: str, now: datetime | None = None
) -> datetime | None:
    """Parse a date option, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_datetime(value, now=now)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_cli_amount(ctx: click.Context, value: str, label: str = "amount") -> Decimal:
    """Parse an amount argument, or exit with a CLI error."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
