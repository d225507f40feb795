"""
Utility functions for the Elasticsearch users API.
"""

from .connection import get_elasticsearch_client, reset_elasticsearch_client, test_connection
from .validation import (
    validate_index_name,
    validate_size,
    validate_from,
    clamp_value,
)
from .response_parser import bulk_failures

__all__ = [
    # Connection
    "get_elasticsearch_client",
    "reset_elasticsearch_client",
    "test_connection",
    # Validation
    "validate_index_name",
    "validate_size",
    "validate_from",
    "clamp_value",
    # Response parsing
    "bulk_failures",
]
