"""Document store layer for fintrack."""

from fintrack.database.base import DocumentStore
from fintrack.database.factories import create_sqlite_store

__all__ = ["DocumentStore", "create_sqlite_store"]
