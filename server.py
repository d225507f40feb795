"""
FastMCP server for the Elasticsearch users index.

Exposes the user service to MCP clients:
- health: Check Elasticsearch connectivity
- get_user / count_users: Direct lookups
- search_users and the fuzzy, prefix, range and multi-match variants
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from config import get_current_environment
from models.documents import User
from services.user_service import UserService
from utils import connection

# Load environment variables
load_dotenv()

# Initialize MCP server
mcp = FastMCP("elastic-users-api")


@lru_cache(maxsize=1)
def get_service() -> UserService:
    return UserService()


def _dump(users: List[User]) -> Dict[str, Any]:
    return {
        "count": len(users),
        "users": [user.model_dump(by_alias=True, exclude_none=True) for user in users],
    }


# ========== HEALTH TOOL ==========

def health() -> Dict[str, Any]:
    """
    Check connectivity to Elasticsearch.

    Returns status information about the cluster connection and the
    index the tools operate on.
    """
    service = get_service()
    connected = connection.test_connection(service.documents.client)
    return {
        "overall_status": "healthy" if connected else "degraded",
        "environment": get_current_environment(),
        "elasticsearch": {
            "connected": connected,
            "index": service.index,
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ========== LOOKUP TOOLS ==========

def get_user(user_id: str) -> Dict[str, Any]:
    """
    Fetch one user by id.

    Args:
        user_id: Document id of the user

    Returns:
        {"found": bool, "user": user or None}
    """
    user = get_service().get(user_id)
    return {
        "found": user is not None,
        "user": user.model_dump(by_alias=True, exclude_none=True) if user else None,
    }


def count_users(query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Count users, optionally restricted by a Query DSL clause.

    Args:
        query: Optional Elasticsearch Query DSL clause

    Returns:
        {"count": n}
    """
    return {"count": get_service().count(query)}


# ========== SEARCH TOOLS ==========

def search_users(query: str, size: int = 10, from_offset: int = 0) -> Dict[str, Any]:
    """
    Search users with a Lucene query string.

    Args:
        query: Query string (e.g., "firstName:ann AND age:>30")
        size: Number of results (1-10000)
        from_offset: Pagination offset

    Returns:
        Matching users
    """
    return _dump(get_service().search(query, size=size, from_=from_offset))


def fuzzy_search_users(field: str, value: str, fuzziness: int = 1, size: int = 10) -> Dict[str, Any]:
    """
    Search users tolerating typos in one field.

    Args:
        field: Field name (e.g., "firstName")
        value: Approximate value
        fuzziness: Maximum edit distance (0-2)
        size: Number of results
    """
    return _dump(get_service().fuzzy_search(field, value, fuzziness=fuzziness, size=size))


def prefix_search_users(field: str, prefix: str, size: int = 10) -> Dict[str, Any]:
    """Search users whose field starts with a prefix."""
    return _dump(get_service().prefix_search(field, prefix, size=size))


def range_search_users(
    field: str,
    gt: Optional[str] = None,
    lt: Optional[str] = None,
    include_lower: bool = False,
    include_upper: bool = False,
    size: int = 10,
) -> Dict[str, Any]:
    """
    Search users whose field falls within bounds.

    Args:
        field: Field name (e.g., "age")
        gt: Lower bound, exclusive unless include_lower
        lt: Upper bound, exclusive unless include_upper
        include_lower: Make the lower bound inclusive
        include_upper: Make the upper bound inclusive
        size: Number of results
    """
    return _dump(get_service().range_query(
        field,
        gt=gt,
        lt=lt,
        include_upper=include_upper,
        include_lower=include_lower,
        size=size,
    ))


def multi_match_users(query: str, fields: List[str], size: int = 10) -> Dict[str, Any]:
    """Match one text against several fields."""
    return _dump(get_service().multi_match(query, fields, size=size))


# Register as tools; the plain functions stay importable and callable
for _tool in (
    health,
    get_user,
    count_users,
    search_users,
    fuzzy_search_users,
    prefix_search_users,
    range_search_users,
    multi_match_users,
):
    mcp.tool()(_tool)


if __name__ == "__main__":
    mcp.run()
