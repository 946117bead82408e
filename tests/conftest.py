"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory document collection, document service, document factories
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine for testing.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def document_collection(test_engine):
    """
    Create DocumentCollection with its table in place.

    Yields:
        DocumentCollection: Empty collection backed by SQLite
    """
    from knowledge.boundary.db import DocumentCollection

    collection = DocumentCollection(test_engine)
    await collection.create_schema()
    yield collection


@pytest.fixture
def document_service(document_collection):
    """Provide DocumentService over the in-memory collection."""
    from knowledge.application.services import DocumentService

    return DocumentService(collection=document_collection)


@pytest.fixture
def make_document():
    """
    Factory for ClientDocument instances.

    Returns:
        Callable: make_document(doc_id, doc_url="...", elements=None)
    """
    from knowledge.models.document import ClientDocument

    def _make(doc_id: int, doc_url: str = "www.test.com", elements: list | None = None):
        return ClientDocument(
            doc_id=doc_id,
            doc_url=doc_url,
            elements=elements if elements is not None else [{"text": "testing 123", "type": "h2"}],
        )

    return _make
