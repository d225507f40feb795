"""
Service layer: adapts operations into Elasticsearch client calls.
"""

from .elastic_service import ElasticService
from .user_service import UserService

__all__ = [
    "ElasticService",
    "UserService",
]
