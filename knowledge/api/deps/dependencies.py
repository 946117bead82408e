"""
Dependency injection container.

Factory functions for FastAPI dependencies. The document collection
(and the engine inside it) is built once per process, shared by every
request, and disposed when the application shuts down.

Dependencies: knowledge.configs, knowledge.application, knowledge.boundary
System role: DI container for service injection
"""

from knowledge.application.services import DocumentService
from knowledge.boundary.db import DocumentCollection, get_async_engine
from knowledge.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._collection = None
        self._document_service = None

    @property
    def collection(self) -> DocumentCollection:
        """Get cached document collection."""
        if self._collection is None:
            settings = get_settings()
            self._collection = DocumentCollection(get_async_engine(settings.database))
        return self._collection

    @property
    def document_service(self) -> DocumentService:
        """Get cached document service."""
        if self._document_service is None:
            settings = get_settings()
            self._document_service = DocumentService(
                collection=self.collection,
                version_assign_retries=settings.store.version_assign_retries,
            )
        return self._document_service

    async def close(self) -> None:
        """Dispose the collection's connections and clear all cached instances."""
        if self._collection is not None:
            await self._collection.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._collection = None
        self._document_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_document_collection() -> DocumentCollection:
    """
    Get the shared document collection.

    Returns:
        DocumentCollection: Collection used by health checks
    """
    return get_service_cache().collection


def get_document_service() -> DocumentService:
    """
    Get the shared document service.

    The service holds the per-document version locks, so it is one
    instance for the whole process rather than one per request.

    Returns:
        DocumentService: Versioning store bound to the shared collection
    """
    return get_service_cache().document_service
