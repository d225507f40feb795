from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class BulkDeleteRequest(BaseModel):
    ids: List[str] = Field(..., description="Ids of the users to delete.")


class MultiMatchRequest(BaseModel):
    query: str = Field(..., min_length=1, description="Text matched against every field.")
    fields: List[str] = Field(..., min_length=1, description="Fields to search, boosts allowed (e.g. 'firstName^2').")
    size: int = Field(10, ge=1, le=10000, description="Number of results to return.")


class QueryRequest(BaseModel):
    query: Dict[str, Any] = Field(..., description="Elasticsearch Query DSL clause, e.g. {'term': {'age': 30}}.")
    size: int = Field(10, ge=1, le=10000, description="Number of results to return.")


class CountResponse(BaseModel):
    count: int


class IndexExistsResponse(BaseModel):
    index: str
    exists: bool
