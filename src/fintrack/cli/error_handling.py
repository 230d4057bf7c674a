"""Rendering of domain and store errors on the command line."""

import functools

import click

from fintrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Print ``error`` to stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def exit_on_domain_error(command):
    """Turn a DomainError escaping a command into a CLI error.

    Covers reads outside a command's own ``try`` block (listing records,
    resolving names), so a failed fetch ends in the usual
    "Error: ..." message instead of a traceback. Apply below
    ``@click.pass_context``.
    """

    @functools.wraps(command)
    def wrapper(ctx: click.Context, *args, **kwargs):
        try:
            return command(ctx, *args, **kwargs)
        except DomainError as e:
            handle_domain_error(ctx, e)

    return wrapper
