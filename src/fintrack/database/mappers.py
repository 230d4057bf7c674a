"""Mapper functions between stored documents and domain entities.

Documents arrive loosely typed: numbers may be strings, timestamps may be
ISO strings, epoch values or backend timestamp objects, and optional fields
may be missing. This layer canonicalizes them once so the aggregation code can
rely on the strict domain model.
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, TypeVar

from fintrack.domain import entities as domain
from fintrack.utils.coercion import coerce_date, coerce_number, coerce_string

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _coerce_enum(value: Any, enum_type: type[E], default: E) -> E:
    try:
        return enum_type(value)
    except ValueError:
        logger.warning(
            "Unknown %s value %r, using %r", enum_type.__name__, value, default.value
        )
        return default


def _optional_string(value: Any) -> Optional[str]:
    text = coerce_string(value)
    return text or None


def _owner(data: Mapping[str, Any], owner_id: Optional[str]) -> str:
    # Documents written by older clients carry the owner as "user_id"
    if owner_id is not None:
        return owner_id
    return coerce_string(data.get("owner_id", data.get("user_id")))


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def to_document(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Convert domain field values into JSON-compatible document data."""
    return {key: _serialize_value(value) for key, value in fields.items()}


def account_from_document(
    doc_id: str, data: Mapping[str, Any], owner_id: Optional[str] = None
) -> domain.Account:
    """Convert an account document to a domain Account entity."""
    return domain.Account(
        id=doc_id,
        owner_id=_owner(data, owner_id),
        name=coerce_string(data.get("name")),
        type=_coerce_enum(data.get("type"), domain.AccountType, domain.AccountType.CASH),
        balance=coerce_number(data.get("balance")),
        created_at=coerce_date(data.get("created_at")),
    )


def category_from_document(
    doc_id: str, data: Mapping[str, Any], owner_id: Optional[str] = None
) -> domain.Category:
    """Convert a category document to a domain Category entity."""
    return domain.Category(
        id=doc_id,
        owner_id=_owner(data, owner_id),
        name=coerce_string(data.get("name")),
        icon=coerce_string(data.get("icon")),
        color=coerce_string(data.get("color")),
        type=_coerce_enum(
            data.get("type"), domain.TransactionType, domain.TransactionType.EXPENSE
        ),
    )


def transaction_from_document(
    doc_id: str, data: Mapping[str, Any], owner_id: Optional[str] = None
) -> domain.Transaction:
    """Convert a transaction document to a domain Transaction entity.

    The stored amount's sign is dropped; direction comes from ``type``.
    """
    tags = data.get("tags") or ()
    if isinstance(tags, str):
        tags = (tags,)

    return domain.Transaction(
        id=doc_id,
        owner_id=_owner(data, owner_id),
        account_id=coerce_string(data.get("account_id")),
        category_id=coerce_string(data.get("category_id")),
        amount=abs(coerce_number(data.get("amount"))),
        type=_coerce_enum(
            data.get("type"), domain.TransactionType, domain.TransactionType.EXPENSE
        ),
        date=coerce_date(data.get("date")),
        note=_optional_string(data.get("note")),
        receipt_url=_optional_string(data.get("receipt_url")),
        tags=tuple(coerce_string(tag) for tag in tags),
    )


def budget_from_document(
    doc_id: str, data: Mapping[str, Any], owner_id: Optional[str] = None
) -> domain.Budget:
    """Convert a budget document to a domain Budget entity."""
    return domain.Budget(
        id=doc_id,
        owner_id=_owner(data, owner_id),
        category_id=coerce_string(data.get("category_id")),
        amount=coerce_number(data.get("amount")),
        spent=coerce_number(data.get("spent")),
        recurrence=_coerce_enum(
            data.get("recurrence"), domain.Recurrence, domain.Recurrence.MONTHLY
        ),
        start_date=coerce_date(data.get("start_date")),
    )


def goal_from_document(
    doc_id: str, data: Mapping[str, Any], owner_id: Optional[str] = None
) -> domain.Goal:
    """Convert a goal document to a domain Goal entity."""
    return domain.Goal(
        id=doc_id,
        owner_id=_owner(data, owner_id),
        name=coerce_string(data.get("name")),
        target_amount=coerce_number(data.get("target_amount")),
        current_amount=coerce_number(data.get("current_amount")),
        target_date=coerce_date(data.get("target_date")),
        created_at=coerce_date(data.get("created_at")),
    )
