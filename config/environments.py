"""
Environment configuration management.
"""

import os
from typing import Dict, Any, Optional


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_current_environment() -> str:
    """
    Get the current environment name.

    Returns:
        Value of APP_ENV, 'default' when unset
    """
    return os.getenv("APP_ENV", "default")


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the configuration from environment variables.

    Read on every call so values loaded from a .env file after import
    are picked up.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Environment configuration dictionary
    """
    return {
        "name": get_current_environment(),
        "elasticsearch": {
            "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")),
            "username": os.getenv("ELASTIC_USERNAME", os.getenv("ELASTICSEARCH_USERNAME")),
            "password": os.getenv("ELASTIC_PASSWORD", os.getenv("ELASTICSEARCH_PASSWORD")),
            "api_key": os.getenv("ELASTIC_API_KEY", os.getenv("ELASTICSEARCH_API_KEY")),
            "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
            "verify_certs": _env_flag("ELASTIC_VERIFY_CERTS", True),
            "ca_certs": os.getenv("ELASTIC_CA_CERTS"),
            "default_index": os.getenv("ELASTIC_DEFAULT_INDEX", "users"),
        },
        "api": {
            "base_path": os.getenv("API_BASE_PATH", "").strip(),
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        },
    }


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch configuration.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config(environment)["elasticsearch"]


def get_api_config() -> Dict[str, Any]:
    """Get HTTP API configuration."""
    return get_environment_config()["api"]


def get_default_index() -> str:
    """Name of the index every document operation targets."""
    return get_elasticsearch_config()["default_index"]
