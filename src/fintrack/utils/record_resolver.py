"""Utility for resolving record names to IDs."""

from collections.abc import Iterable
from typing import Protocol

from fintrack.domain.errors import NotFoundError, ValidationError, record_not_found


class NamedRecord(Protocol):
    id: str
    name: str


def resolve_record(records: Iterable[NamedRecord], reference: str, kind: str) -> str:
    """Resolve a record ID or name to a record ID.

    An exact ID match wins; otherwise the name is compared case-insensitively.

    Args:
        records: Candidate records (accounts, categories, goals, ...)
        reference: Record ID or name as typed by the user
        kind: Record kind used in error messages (e.g. "account")

    Returns:
        Record ID

    Raises:
        NotFoundError: If no record matches
        ValidationError: If the name matches more than one record
    """
    records = list(records)
    for record in records:
        if record.id == reference:
            return record.id

    wanted = reference.strip().casefold()
    matches = [record for record in records if record.name.casefold() == wanted]
    if len(matches) > 1:
        raise ValidationError(
            f"{kind.capitalize()} name '{reference}' is ambiguous; use the ID instead"
        )
    if matches:
        return matches[0].id

    raise NotFoundError(record_not_found(kind, reference))
