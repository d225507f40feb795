"""
Index configuration registry.

Known indices are created with explicit settings and mappings; any other
index name is created with cluster defaults.
"""

from typing import Dict, Any, Optional

from .environments import get_default_index


_KEYWORD_TEXT = {
    "type": "text",
    "fields": {"keyword": {"type": "keyword", "ignore_above": 256}},
}


INDEX_REGISTRY: Dict[str, Dict[str, Any]] = {
    "users": {
        "settings": {
            "number_of_shards": 1,
            "number_of_replicas": 0,
        },
        "mappings": {
            "properties": {
                "id": {"type": "keyword"},
                "firstName": _KEYWORD_TEXT,
                "lastName": _KEYWORD_TEXT,
                "email": {"type": "keyword"},
                "age": {"type": "integer"},
            }
        },
    },
}


def resolve_index_name(key: str) -> str:
    """
    Map a registry key to the concrete index name.

    The "users" entry follows ELASTIC_DEFAULT_INDEX so a renamed default
    index keeps its mappings.
    """
    if key == "users":
        return get_default_index()
    return key


def get_index_config(index_name: str) -> Optional[Dict[str, Any]]:
    """
    Get settings and mappings for an index.

    Args:
        index_name: Concrete index name

    Returns:
        Registry entry, or None when the index is not registered
    """
    for key, entry in INDEX_REGISTRY.items():
        if resolve_index_name(key) == index_name:
            return entry
    return None
