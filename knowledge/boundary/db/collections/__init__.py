"""
Collection access for database models.

Usage:
    from knowledge.boundary.db.collections import DocumentCollection, DESCENDING

    collection = DocumentCollection(engine)
    latest = await collection.find({"doc_id": 7}, sort=[("doc_version", DESCENDING)], limit=1)
"""

from knowledge.boundary.db.collections.base_collection import (
    ASCENDING,
    DESCENDING,
    BaseCollection,
    Filter,
    Sort,
)
from knowledge.boundary.db.collections.document_collection import DocumentCollection

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "BaseCollection",
    "DocumentCollection",
    "Filter",
    "Sort",
]
