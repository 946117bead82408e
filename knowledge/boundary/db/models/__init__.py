"""ORM models."""

from knowledge.boundary.db.models.stored_document_model import StoredDocumentModel

__all__ = ["StoredDocumentModel"]
