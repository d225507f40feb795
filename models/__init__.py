"""
Type definitions for the Elasticsearch users API.
"""

from .documents import Document, User
from .search import RangeBounds, SearchRequest, SearchResponse

__all__ = [
    # Documents
    "Document",
    "User",
    # Search
    "RangeBounds",
    "SearchRequest",
    "SearchResponse",
]
