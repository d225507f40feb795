"""
Pytest configuration and fixtures for the Elasticsearch users API tests.
"""

import pytest
import os
import sys
from unittest.mock import Mock

from elasticsearch import ApiError

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)


USER_SOURCES = [
    {"id": "1", "firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com", "age": 36},
    {"id": "2", "firstName": "Alan", "lastName": "Turing", "age": 41},
]


def make_api_error(status=400, error_type="bad_request", cls=ApiError):
    """Build the error the client raises for a non-2xx response."""
    return cls(
        message=error_type,
        meta=Mock(status=status),
        body={"error": {"type": error_type, "reason": "test"}, "status": status},
    )


def search_response(sources):
    return {
        "took": 2,
        "timed_out": False,
        "hits": {
            "total": {"value": len(sources), "relation": "eq"},
            "hits": [
                {"_index": "users", "_id": source.get("id"), "_score": 1.0, "_source": source}
                for source in sources
            ],
        },
    }


@pytest.fixture
def mock_elasticsearch():
    """Mock Elasticsearch client for testing."""
    mock_es = Mock()

    mock_es.search.return_value = search_response(USER_SOURCES)
    mock_es.get.return_value = {"_index": "users", "_id": "1", "found": True, "_source": USER_SOURCES[0]}
    mock_es.index.return_value = {"_id": "1", "result": "created"}
    mock_es.update.return_value = {"_id": "1", "result": "updated"}
    mock_es.delete.return_value = {"_id": "1", "result": "deleted"}
    mock_es.count.return_value = {"count": 2}
    mock_es.bulk.return_value = {"took": 3, "errors": False, "items": []}
    mock_es.delete_by_query.return_value = {"took": 5, "deleted": 2, "failures": []}
    mock_es.ping.return_value = True

    mock_es.indices.exists.return_value = False
    mock_es.indices.create.return_value = {"acknowledged": True}
    mock_es.indices.delete.return_value = {"acknowledged": True}
    mock_es.indices.refresh.return_value = {"_shards": {"total": 1, "successful": 1, "failed": 0}}

    return mock_es


@pytest.fixture
def elastic_env(monkeypatch):
    """Pin the configuration read from the environment."""
    monkeypatch.setenv("ELASTIC_URL", "http://localhost:9200")
    monkeypatch.setenv("ELASTIC_DEFAULT_INDEX", "users")
    for name in ("ELASTIC_USERNAME", "ELASTIC_PASSWORD", "ELASTIC_API_KEY", "ELASTIC_CA_CERTS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def user_service(mock_elasticsearch, elastic_env):
    """UserService wired to the mock client."""
    from services.user_service import UserService

    return UserService(client=mock_elasticsearch, index="users")


@pytest.fixture
def api_client(user_service):
    """TestClient whose routes use the mocked user service."""
    from fastapi.testclient import TestClient

    from api.app import app
    from api.dependencies import get_user_service

    app.dependency_overrides[get_user_service] = lambda: user_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
