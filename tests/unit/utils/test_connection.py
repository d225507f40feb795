"""
Unit tests for Elasticsearch connection management.
"""

import pytest
from unittest.mock import Mock, patch

from elastic_transport import ConnectionError as TransportConnectionError

from utils import connection

from conftest import make_api_error


@pytest.fixture(autouse=True)
def fresh_client():
    connection._es_client = None
    yield
    connection._es_client = None


class TestBuildClientParams:
    """Test cases for build_client_params."""

    def test_basic_params(self):
        params = connection.build_client_params({
            "url": "http://es:9200",
            "timeout_ms": 5000,
            "verify_certs": False,
        })

        assert params == {
            "hosts": ["http://es:9200"],
            "request_timeout": 5.0,
            "verify_certs": False,
        }

    def test_api_key_wins_over_basic_auth(self):
        params = connection.build_client_params({
            "url": "https://es:9200",
            "timeout_ms": 30000,
            "api_key": "secret",
            "username": "elastic",
            "password": "changeme",
            "ca_certs": "/certs/ca.crt",
        })

        assert params["api_key"] == "secret"
        assert "basic_auth" not in params
        assert params["ca_certs"] == "/certs/ca.crt"

    def test_basic_auth_needs_both_parts(self):
        config = {"url": "http://es:9200", "timeout_ms": 1000, "username": "elastic", "password": None}
        assert "basic_auth" not in connection.build_client_params(config)

        config["password"] = "changeme"
        assert connection.build_client_params(config)["basic_auth"] == ("elastic", "changeme")


class TestGetElasticsearchClient:
    """Test cases for the shared client."""

    @patch("utils.connection.Elasticsearch")
    def test_client_is_cached(self, mock_cls, elastic_env):
        first = connection.get_elasticsearch_client()
        second = connection.get_elasticsearch_client()

        assert first is second
        mock_cls.assert_called_once()
        assert mock_cls.call_args[1]["hosts"] == ["http://localhost:9200"]

    @patch("utils.connection.Elasticsearch")
    def test_reset_closes_client(self, mock_cls, elastic_env):
        client = connection.get_elasticsearch_client()
        connection.reset_elasticsearch_client()

        client.close.assert_called_once()
        assert connection._es_client is None


class TestTestConnection:
    """Test cases for the connectivity check."""

    def test_ping_succeeds(self, mock_elasticsearch):
        assert connection.test_connection(mock_elasticsearch) is True
        mock_elasticsearch.count.assert_not_called()

    def test_falls_back_to_count(self, mock_elasticsearch, elastic_env):
        mock_elasticsearch.ping.return_value = False

        assert connection.test_connection(mock_elasticsearch) is True
        mock_elasticsearch.count.assert_called_once_with(index="users")

    def test_count_rejected(self, mock_elasticsearch, elastic_env):
        mock_elasticsearch.ping.return_value = False
        mock_elasticsearch.count.side_effect = make_api_error(status=403, error_type="security_exception")

        assert connection.test_connection(mock_elasticsearch) is False

    def test_cluster_unreachable(self, elastic_env):
        es = Mock()
        es.ping.side_effect = TransportConnectionError("Connection refused")
        es.count.side_effect = TransportConnectionError("Connection refused")

        assert connection.test_connection(es) is False
