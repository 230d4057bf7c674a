"""CLI helpers for record resolution and error handling."""

from __future__ import annotations

from collections.abc import Iterable

import click

from fintrack.domain.errors import DomainError
from fintrack.utils.record_resolver import NamedRecord, resolve_record


def resolve_record_or_exit(
    ctx: click.Context, records: Iterable[NamedRecord], reference: str, kind: str
) -> str:
    """Resolve a record name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_record(records, reference, kind)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
