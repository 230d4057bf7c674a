"""Main CLI entry point."""

import click

from fintrack.config import configure_logging, load_settings
from fintrack.database.factories import create_sqlite_store

# Import and register all commands at module level
from fintrack.cli.commands import (
    account,
    budget,
    category,
    dashboard,
    goal,
    report,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--owner",
    help="User whose records to work with (defaults to FINTRACK_OWNER or 'local')",
    envvar="FINTRACK_OWNER",
)
@click.option(
    "--currency",
    help="ISO currency code used for display (defaults to FINTRACK_CURRENCY or USD)",
    envvar="FINTRACK_CURRENCY",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="FINTRACK_LOG_LEVEL",
    help="Logging verbosity (defaults to WARNING)",
)
@click.pass_context
def cli(ctx, db_path: str | None, owner: str | None, currency: str | None, log_level: str | None):
    """Fintrack - Personal finance tracking.

    Record income and expenses against accounts, organize them by category,
    track budgets and savings goals, and view dashboard and period reports.
    """
    ctx.ensure_object(dict)
    settings = load_settings(
        db_path=db_path, owner_id=owner, currency=currency, log_level=log_level
    )
    ctx.obj["settings"] = settings

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(settings.log_level)
        store = create_sqlite_store(database_path=settings.db_path)
        store.connect()
        store.initialize_schema()
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
goal.register_commands(cli)
dashboard.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
