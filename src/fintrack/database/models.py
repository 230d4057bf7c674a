"""SQLAlchemy models for the fintrack document store."""

from datetime import datetime, UTC
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Index,
    Integer,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

COLLECTIONS = ("accounts", "categories", "transactions", "budgets", "goals")


def _new_document_id() -> str:
    return uuid4().hex


class Document(Base):
    """A schemaless record in one of the store's collections.

    Field values are kept exactly as written; typing happens when documents
    are mapped to domain entities.
    """

    __tablename__ = "documents"

    seq = Column(Integer, primary_key=True)
    id = Column(String(32), unique=True, nullable=False, default=_new_document_id)
    collection = Column(String, nullable=False)
    owner_id = Column(String, nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_documents_collection_owner", "collection", "owner_id"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
