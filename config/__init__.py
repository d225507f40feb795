"""
Configuration management for the Elasticsearch users API.
"""

from .indices import INDEX_REGISTRY, get_index_config, resolve_index_name
from .environments import (
    get_api_config,
    get_current_environment,
    get_default_index,
    get_elasticsearch_config,
    get_environment_config,
)

__all__ = [
    "INDEX_REGISTRY",
    "get_index_config",
    "resolve_index_name",
    "get_api_config",
    "get_current_environment",
    "get_default_index",
    "get_elasticsearch_config",
    "get_environment_config",
]
