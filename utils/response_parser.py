"""
Response parsing utilities for Elasticsearch.
"""

from typing import Dict, Any, List


def bulk_failures(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Collect the items of a bulk response that did not succeed.

    Args:
        response: Elasticsearch bulk response

    Returns:
        List of {"id", "status", "error"} dicts, empty when every item succeeded
    """
    if not response.get("errors"):
        return []

    failures = []
    for item in response.get("items", []):
        # Each item is keyed by its action: index, create, update or delete
        for result in item.values():
            if "error" in result:
                failures.append({
                    "id": result.get("_id"),
                    "status": result.get("status"),
                    "error": result["error"],
                })
    return failures
