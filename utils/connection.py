"""
Elasticsearch connection management.
"""

import logging
from typing import Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from config.environments import get_elasticsearch_config


logger = logging.getLogger(__name__)

_es_client: Optional[Elasticsearch] = None


def build_client_params(config: dict) -> dict:
    """
    Translate the elasticsearch config section into client keyword arguments.
    """
    params = {
        "hosts": [config["url"]],
        "request_timeout": config["timeout_ms"] / 1000.0,
        "verify_certs": config.get("verify_certs", True),
    }

    # Add CA certificates if provided
    if config.get("ca_certs"):
        params["ca_certs"] = config["ca_certs"]

    # Add authentication
    if config.get("api_key"):
        params["api_key"] = config["api_key"]
    elif config.get("username") and config.get("password"):
        params["basic_auth"] = (config["username"], config["password"])

    return params


def get_elasticsearch_client() -> Elasticsearch:
    """
    Get or create the process-wide Elasticsearch client.

    The client owns a connection pool, so one instance is shared.

    Returns:
        Configured Elasticsearch client
    """
    global _es_client

    if _es_client is None:
        config = get_elasticsearch_config()
        logger.info("Creating Elasticsearch client for %s", config["url"])
        _es_client = Elasticsearch(**build_client_params(config))
    return _es_client


def reset_elasticsearch_client() -> None:
    """Close and forget the cached client."""
    global _es_client

    if _es_client is not None:
        _es_client.close()
    _es_client = None


def test_connection(client: Optional[Elasticsearch] = None) -> bool:
    """
    Test Elasticsearch connection.

    Falls back to a count on the default index when ping fails, since
    roles without cluster:monitor privileges cannot ping.

    Args:
        client: Client to check (uses the shared client if not specified)

    Returns:
        True if connection successful
    """
    es = client or get_elasticsearch_client()

    try:
        if es.ping():
            return True
    except (ApiError, TransportError) as e:
        logger.debug("Ping failed: %s", e)

    try:
        response = es.count(index=get_elasticsearch_config()["default_index"])
        return "count" in response
    except (ApiError, TransportError) as e:
        logger.warning("Elasticsearch connection check failed: %s", e)
        return False
