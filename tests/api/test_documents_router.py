"""
Test suite for the document HTTP endpoints.

Tests parameter parsing, status codes and response bodies with a mocked
DocumentService, plus one full request cycle against the in-memory
collection.

System role: Verification of document transport layer
"""

import logging
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from knowledge.api.deps.dependencies import get_document_service
from knowledge.api.routers.documents.document_error_handling import INTERNAL_ERROR_MESSAGE
from knowledge.core.exceptions import BackendFailureError
from knowledge.main import create_app
from knowledge.models.document import ClientDocument

DOCUMENT_JSON = {
    "doc_id": 1,
    "doc_url": "www.test.com",
    "elements": [{"text": "testing 123", "type": "h2"}],
}


@pytest.fixture
def mock_document_service():
    """Provide mocked DocumentService."""
    return AsyncMock()


@pytest.fixture
def client(mock_document_service):
    """Provide TestClient with the document service overridden."""
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    return TestClient(app)


class TestGetDocument:
    """GET /document"""

    def test_get_latest_document(self, client, mock_document_service):
        mock_document_service.retrieve_document.return_value = ClientDocument(**DOCUMENT_JSON)

        response = client.get("/document", params={"doc_id": 1})

        assert response.status_code == 200
        assert response.json() == DOCUMENT_JSON
        mock_document_service.retrieve_document.assert_awaited_once_with(1, 0)

    def test_get_specific_version(self, client, mock_document_service):
        mock_document_service.retrieve_document.return_value = ClientDocument(**DOCUMENT_JSON)

        response = client.get("/document", params={"doc_id": 1, "doc_version": 3})

        assert response.status_code == 200
        mock_document_service.retrieve_document.assert_awaited_once_with(1, 3)

    def test_get_missing_document_returns_404_with_empty_object(self, client, mock_document_service):
        mock_document_service.retrieve_document.return_value = None

        response = client.get("/document", params={"doc_id": 0})

        assert response.status_code == 404
        assert response.json() == {}

    def test_get_without_doc_id_returns_400(self, client, mock_document_service):
        response = client.get("/document")

        assert response.status_code == 400
        assert response.json() == {"error": "missing doc_id parameter"}
        mock_document_service.retrieve_document.assert_not_awaited()

    def test_get_with_non_integer_doc_id_returns_400(self, client):
        response = client.get("/document", params={"doc_id": "abc"})

        assert response.status_code == 400
        assert response.json() == {"error": "doc_id parameter must be of type int"}

    @pytest.mark.parametrize("doc_id", ["9223372036854775808", "99999999999999999999", "-9223372036854775809"])
    def test_get_with_out_of_range_doc_id_returns_400(self, client, mock_document_service, doc_id):
        response = client.get("/document", params={"doc_id": doc_id})

        assert response.status_code == 400
        assert response.json() == {"error": "doc_id parameter must be of type int"}
        mock_document_service.retrieve_document.assert_not_awaited()

    def test_get_with_largest_int64_doc_id(self, client, mock_document_service):
        mock_document_service.retrieve_document.return_value = None

        response = client.get("/document", params={"doc_id": "9223372036854775807"})

        assert response.status_code == 404
        mock_document_service.retrieve_document.assert_awaited_once_with(2**63 - 1, 0)

    def test_get_with_out_of_range_version_returns_400(self, client):
        response = client.get("/document", params={"doc_id": 1, "doc_version": "9223372036854775808"})

        assert response.status_code == 400
        assert response.json() == {"error": "doc_version parameter must be of type int or left out"}

    def test_get_with_non_integer_version_returns_400(self, client):
        response = client.get("/document", params={"doc_id": 1, "doc_version": "abc"})

        assert response.status_code == 400
        assert response.json() == {"error": "doc_version parameter must be of type int or left out"}

    def test_backend_failure_is_hidden_behind_500(self, client, mock_document_service):
        mock_document_service.retrieve_document.side_effect = BackendFailureError(
            "connection refused to db:5432", operation="find"
        )

        response = client.get("/document", params={"doc_id": 1})

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}


class TestPostDocument:
    """POST /document"""

    def test_post_returns_assigned_version(self, client, mock_document_service):
        mock_document_service.store_document.return_value = 2

        response = client.post("/document", json=DOCUMENT_JSON)

        assert response.status_code == 200
        assert response.json() == {"version": 2}
        mock_document_service.store_document.assert_awaited_once_with(ClientDocument(**DOCUMENT_JSON))

    def test_post_with_invalid_json_returns_400(self, client, mock_document_service):
        response = client.post(
            "/document",
            content=b'{"doc_id": 1,"doc_url": "www.test.com",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid json"}
        mock_document_service.store_document.assert_not_awaited()

    def test_post_with_wrong_shape_returns_400(self, client):
        response = client.post("/document", json={"doc_id": "one", "doc_url": "x"})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid json"}

    def test_post_without_doc_url_stores_empty_url(self, client, mock_document_service):
        mock_document_service.store_document.return_value = 1

        response = client.post("/document", json={"doc_id": 1, "elements": []})

        assert response.status_code == 200
        assert response.json() == {"version": 1}
        mock_document_service.store_document.assert_awaited_once_with(
            ClientDocument(doc_id=1, doc_url="", elements=[])
        )

    def test_post_with_null_elements_stores_no_elements(self, client, mock_document_service):
        mock_document_service.store_document.return_value = 1

        response = client.post("/document", json={"doc_id": 1, "doc_url": "a", "elements": None})

        assert response.status_code == 200
        mock_document_service.store_document.assert_awaited_once_with(
            ClientDocument(doc_id=1, doc_url="a", elements=[])
        )

    @pytest.mark.parametrize("doc_id", ["1", 1.5, 2**63])
    def test_post_with_non_int64_doc_id_returns_400(self, client, mock_document_service, doc_id):
        response = client.post("/document", json={"doc_id": doc_id, "doc_url": "a"})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid json"}
        mock_document_service.store_document.assert_not_awaited()


class TestPutDocument:
    """PUT /document"""

    def test_put_replaces_version(self, client, mock_document_service):
        mock_document_service.update_document.return_value = None

        response = client.put("/document", params={"doc_version": 1}, json=DOCUMENT_JSON)

        assert response.status_code == 200
        assert response.content == b""
        mock_document_service.update_document.assert_awaited_once_with(
            ClientDocument(**DOCUMENT_JSON), 1
        )

    def test_put_without_version_returns_400(self, client, mock_document_service):
        response = client.put("/document", json=DOCUMENT_JSON)

        assert response.status_code == 400
        assert response.json() == {"error": "missing doc_version parameter"}
        mock_document_service.update_document.assert_not_awaited()

    def test_put_with_non_integer_version_returns_400(self, client):
        response = client.put("/document", params={"doc_version": "x"}, json=DOCUMENT_JSON)

        assert response.status_code == 400
        assert response.json() == {"error": "doc_version parameter must be of type int"}


class TestDeleteDocument:
    """DELETE /document"""

    def test_delete_all_versions(self, client, mock_document_service):
        response = client.delete("/document", params={"doc_id": 1})

        assert response.status_code == 200
        mock_document_service.remove_document.assert_awaited_once_with(1, 0)

    def test_delete_single_version(self, client, mock_document_service):
        response = client.delete("/document", params={"doc_id": 1, "doc_version": 2})

        assert response.status_code == 200
        mock_document_service.remove_document.assert_awaited_once_with(1, 2)

    def test_delete_without_doc_id_returns_400(self, client):
        response = client.delete("/document")

        assert response.status_code == 400
        assert response.json() == {"error": "missing doc_id parameter"}


class TestListDocuments:
    """GET /documents"""

    def test_list_documents_by_version(self, client, mock_document_service):
        mock_document_service.retrieve_documents.return_value = [
            ClientDocument(**DOCUMENT_JSON),
            ClientDocument(doc_id=2, doc_url="other", elements=[]),
        ]

        response = client.get("/documents", params={"doc_version": 1})

        assert response.status_code == 200
        assert [doc["doc_id"] for doc in response.json()] == [1, 2]
        mock_document_service.retrieve_documents.assert_awaited_once_with(1)

    def test_list_documents_empty(self, client, mock_document_service):
        mock_document_service.retrieve_documents.return_value = []

        response = client.get("/documents", params={"doc_version": 4})

        assert response.status_code == 200
        assert response.json() == []

    def test_list_documents_without_version_returns_400(self, client):
        response = client.get("/documents")

        assert response.status_code == 400
        assert response.json() == {"error": "missing doc_version parameter"}


def test_correlation_id_is_echoed(client, mock_document_service):
    mock_document_service.retrieve_documents.return_value = []

    response = client.get(
        "/documents", params={"doc_version": 1}, headers={"X-Correlation-ID": "abc-123"}
    )

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client, mock_document_service):
    mock_document_service.retrieve_documents.return_value = []

    response = client.get("/documents", params={"doc_version": 1})

    assert response.headers["X-Correlation-ID"]


@pytest.mark.asyncio
async def test_versioning_scenario_over_http(document_service):
    """Store two revisions, read latest and specific, delete the first."""
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: document_service
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        first = await client.post("/document", json={"doc_id": 1, "doc_url": "a", "elements": []})
        second = await client.post("/document", json={"doc_id": 1, "doc_url": "b", "elements": []})
        assert first.json() == {"version": 1}
        assert second.json() == {"version": 2}

        latest = await client.get("/document", params={"doc_id": 1})
        assert latest.json()["doc_url"] == "b"
        oldest = await client.get("/document", params={"doc_id": 1, "doc_version": 1})
        assert oldest.json()["doc_url"] == "a"

        deleted = await client.delete("/document", params={"doc_id": 1, "doc_version": 1})
        assert deleted.status_code == 200

        gone = await client.get("/document", params={"doc_id": 1, "doc_version": 1})
        assert gone.status_code == 404
        latest = await client.get("/document", params={"doc_id": 1})
        assert latest.json()["doc_url"] == "b"

        by_version = await client.get("/documents", params={"doc_version": 2})
        assert [doc["doc_url"] for doc in by_version.json()] == ["b"]


def test_rejected_request_is_logged_with_correlation_id(client, caplog):
    with caplog.at_level(logging.WARNING, logger="knowledge.api.routers.documents.document_error_handling"):
        client.get("/document", headers={"X-Correlation-ID": "abc-123"})

    record = next(r for r in caplog.records if r.getMessage() == "Invalid document request")
    assert record.correlation_id == "abc-123"
    assert record.error == "missing doc_id parameter"


@pytest.mark.asyncio
async def test_int64_doc_id_round_trips_over_http(document_service):
    """Identifiers beyond 32 bits are stored and read back unchanged."""
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: document_service
    transport = httpx.ASGITransport(app=app)
    doc_id = 2**63 - 1

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        stored = await client.post("/document", json={"doc_id": doc_id, "doc_url": "big"})
        assert stored.json() == {"version": 1}

        fetched = await client.get("/document", params={"doc_id": str(doc_id)})
        assert fetched.status_code == 200
        assert fetched.json() == {"doc_id": doc_id, "doc_url": "big", "elements": []}
