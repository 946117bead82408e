"""API and domain models."""

from knowledge.models.common import ErrorResponse, HealthResponse
from knowledge.models.document import (
    ClientDocument,
    Element,
    StoredDocument,
    StoreDocumentResponse,
)

__all__ = [
    "ClientDocument",
    "Element",
    "ErrorResponse",
    "HealthResponse",
    "StoredDocument",
    "StoreDocumentResponse",
]
