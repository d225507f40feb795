from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service
from api.schemas import MultiMatchRequest, QueryRequest
from models.documents import User
from services.user_service import UserService


router = APIRouter(prefix="/api/users/search", tags=["search"])

_SIZE = Query(10, ge=1, le=10000, description="Number of results to return.")


@router.get("", summary="Query string search", response_model=List[User])
def search(
    q: str = Query(..., min_length=1, description="Lucene query string, e.g. 'firstName:ann AND age:>30'."),
    size: int = _SIZE,
    from_: int = Query(0, alias="from", ge=0),
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.search(q, size=size, from_=from_)


@router.get("/field", summary="Match search on one field", response_model=List[User])
def search_by_field(
    field: str = Query(..., min_length=1),
    value: str = Query(..., min_length=1),
    size: int = _SIZE,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.search_by_field(field, value, size=size)


@router.get("/fuzzy", summary="Fuzzy search on one field", response_model=List[User])
def fuzzy_search(
    field: str = Query(..., min_length=1),
    value: str = Query(..., min_length=1),
    fuzziness: int = Query(1, ge=0, le=2, description="Maximum edit distance."),
    size: int = _SIZE,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.fuzzy_search(field, value, fuzziness=fuzziness, size=size)


@router.get("/prefix", summary="Prefix search on one field", response_model=List[User])
def prefix_search(
    field: str = Query(..., min_length=1),
    prefix: str = Query(..., min_length=1),
    size: int = _SIZE,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.prefix_search(field, prefix, size=size)


@router.get("/range", summary="Range search on one field", response_model=List[User])
def range_search(
    field: str = Query(..., min_length=1),
    gt: Optional[str] = Query(None, description="Lower bound, exclusive unless includeLower."),
    lt: Optional[str] = Query(None, description="Upper bound, exclusive unless includeUpper."),
    include_lower: bool = Query(False, alias="includeLower"),
    include_upper: bool = Query(False, alias="includeUpper"),
    size: int = _SIZE,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.range_query(
        field,
        gt=gt,
        lt=lt,
        include_upper=include_upper,
        include_lower=include_lower,
        size=size,
    )


@router.post("/multi-match", summary="Match one text across several fields", response_model=List[User])
def multi_match(
    request: MultiMatchRequest,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.multi_match(request.query, request.fields, size=request.size)


@router.post("/query", summary="Search with a raw Query DSL clause", response_model=List[User])
def search_query(
    request: QueryRequest,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.search_query(request.query, size=request.size)
