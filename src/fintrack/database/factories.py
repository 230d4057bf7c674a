"""Store factory functions for creating document store instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDocumentStore

DB_PATH_ENV = "FINTRACK_DB_PATH"


def default_database_path() -> str:
    """Return the store path from FINTRACK_DB_PATH or ~/.fintrack/fintrack.db."""
    database_path = os.environ.get(DB_PATH_ENV)
    if database_path:
        return database_path

    db_dir = Path.home() / ".fintrack"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "fintrack.db")


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyDocumentStore:
    """Create a SQLite-backed document store.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to ~/.fintrack/fintrack.db

    Returns:
        SQLAlchemyDocumentStore instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    return SQLAlchemyDocumentStore(f"sqlite:///{database_path}")
