from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from knowledge.api.deps.dependencies import get_document_collection
from knowledge.core.exceptions import BackendFailureError
from knowledge.main import create_app


@pytest.fixture
def mock_collection():
    return AsyncMock()


@pytest.fixture
def client(mock_collection):
    app = create_app()
    app.dependency_overrides[get_document_collection] = lambda: mock_collection
    return TestClient(app)


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client, mock_collection):
    response = client.get("/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    mock_collection.ping.assert_awaited_once()


def test_health_check_db_unreachable(client, mock_collection):
    mock_collection.ping.side_effect = BackendFailureError("refused", operation="ping")

    response = client.get("/health/db")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Database unreachable"}
