"""FastAPI dependencies."""

from knowledge.api.deps.dependencies import (
    ServiceCache,
    get_document_collection,
    get_document_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_document_collection",
    "get_document_service",
    "get_service_cache",
]
