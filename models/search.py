"""
Search request and response types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RangeBounds:
    """Bounds of a term range query."""
    gt: Optional[Any] = None
    lt: Optional[Any] = None
    include_lower: bool = False
    include_upper: bool = False

    def to_query(self) -> Dict[str, str]:
        """Convert to the body of an Elasticsearch range clause."""
        query: Dict[str, str] = {}
        if self.gt is not None:
            query["gte" if self.include_lower else "gt"] = str(self.gt)
        if self.lt is not None:
            query["lte" if self.include_upper else "lt"] = str(self.lt)
        return query


@dataclass
class SearchRequest:
    """Search body; the index is passed to the client separately."""
    query: Dict[str, Any] = field(default_factory=lambda: {"match_all": {}})
    size: int = 10
    from_: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Elasticsearch search keyword arguments."""
        return {
            "query": self.query,
            "size": self.size,
            "from_": self.from_,
        }


@dataclass
class SearchResponse:
    """Elasticsearch search response."""
    took: int
    timed_out: bool
    total: int
    hits: List[Dict[str, Any]]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResponse":
        """Create from Elasticsearch response dict."""
        hits_data = data.get("hits", {})
        total = hits_data.get("total", {})
        if isinstance(total, dict):
            total = total.get("value", 0)

        return cls(
            took=data.get("took", 0),
            timed_out=data.get("timed_out", False),
            total=total,
            hits=list(hits_data.get("hits", [])),
        )

    @property
    def sources(self) -> List[Dict[str, Any]]:
        return [hit["_source"] for hit in self.hits if hit.get("_source") is not None]
