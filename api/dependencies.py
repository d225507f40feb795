from __future__ import annotations

from functools import lru_cache

from services.user_service import UserService


@lru_cache(maxsize=1)
def get_user_service() -> UserService:
    """Shared service instance; tests replace it through app.dependency_overrides."""
    return UserService()
