"""
Database boundary layer: ORM models, collections, and connection management.

Exports:
  - Base, SerialIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - StoredDocumentModel: Persisted document revision
  - BaseCollection, DocumentCollection: Collection access

Dependencies: sqlalchemy, knowledge.configs
System role: Database adapter providing persistent storage for document revisions.
"""

from knowledge.boundary.db.base import Base, SerialIDMixin, TimestampMixin
from knowledge.boundary.db.connection import get_async_engine, get_async_session_factory
from knowledge.boundary.db.models import StoredDocumentModel
from knowledge.boundary.db.collections import (
    ASCENDING,
    DESCENDING,
    BaseCollection,
    DocumentCollection,
)

__all__ = [
    # Base classes
    "Base",
    "SerialIDMixin",
    "TimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "StoredDocumentModel",
    # Collections
    "ASCENDING",
    "DESCENDING",
    "BaseCollection",
    "DocumentCollection",
]
