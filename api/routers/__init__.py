from .search import router as search_router
from .users import router as users_router

__all__ = ["search_router", "users_router"]
