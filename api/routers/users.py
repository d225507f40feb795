from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query

from api.dependencies import get_user_service
from api.schemas import BulkDeleteRequest, CountResponse, IndexExistsResponse
from models.documents import User
from services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/create-index", summary="Create an index if it does not exist")
def create_index(
    index_name: str = Query(..., alias="indexName", min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    service.create_index_if_not_exists(index_name)
    return f"Index {index_name} create or already exists."


@router.post("/add-user", summary="Add or replace a user")
def add_user(
    user: User,
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.add_or_update_user(user):
        raise HTTPException(status_code=500, detail="Error adding or update user.")
    return f"User {user.full_name} added or updated."


@router.put("/update-users", summary="Add or replace users in bulk")
def update_users(
    users: List[User] = Body(...),
    index_name: Optional[str] = Query(None, alias="indexName", min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.add_or_update_bulk(users, index_name=index_name):
        raise HTTPException(status_code=500, detail="Error adding or update users.")
    return "Users added or updated."


@router.get("/get-user/{key}", summary="Get a user by id", response_model=User)
def get_user(
    key: str = Path(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> User:
    user = service.get(key)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found.")
    return user


@router.get("/get-all-users", summary="List users", response_model=List[User])
def get_all_users(service: UserService = Depends(get_user_service)) -> List[User]:
    users = service.get_all()
    if users is None:
        raise HTTPException(status_code=404, detail="No users found.")
    return users


@router.delete("/delete-user/{key}", summary="Delete a user by id")
def delete_user(
    key: str = Path(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.remove_user(key):
        raise HTTPException(status_code=404, detail="User not found.")
    return f"User {key} deleted."


@router.delete("/delete-all-users", summary="Delete every user")
def delete_all_users(service: UserService = Depends(get_user_service)) -> str:
    deleted = service.remove_all_users()
    if deleted is None:
        raise HTTPException(status_code=404, detail="No users found.")
    logger.info("Deleted %d users from %s", deleted, service.index)
    return f"Deleted {deleted} users."


@router.post("/bulk-delete", summary="Delete users by id")
def bulk_delete(
    request: BulkDeleteRequest,
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.remove_users(request.ids):
        raise HTTPException(status_code=500, detail="Error deleting users.")
    return f"Deleted {len(request.ids)} users."


@router.get("/count", summary="Count users", response_model=CountResponse)
def count_users(service: UserService = Depends(get_user_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.get("/index-exists", summary="Check whether an index exists", response_model=IndexExistsResponse)
def index_exists(
    index_name: str = Query(..., alias="indexName", min_length=1),
    service: UserService = Depends(get_user_service),
) -> IndexExistsResponse:
    return IndexExistsResponse(index=index_name, exists=service.documents.index_exists(index_name))


@router.post("/refresh-index", summary="Refresh an index")
def refresh_index(
    index_name: str = Query(..., alias="indexName", min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.documents.refresh_index(index_name):
        raise HTTPException(status_code=500, detail=f"Error refreshing index {index_name}.")
    return f"Index {index_name} refreshed."


@router.delete("/delete-index", summary="Delete an index")
def delete_index(
    index_name: str = Query(..., alias="indexName", min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.documents.delete_index(index_name):
        raise HTTPException(status_code=404, detail=f"Index {index_name} not found.")
    return f"Index {index_name} deleted."


# Registered last so the fixed paths above take precedence
@router.put("/{key}", summary="Upsert a user by id")
def upsert_user(
    user: User,
    key: str = Path(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> str:
    if not service.update_user(key, user):
        raise HTTPException(status_code=500, detail="Error adding or update user.")
    return f"User {key} updated."
