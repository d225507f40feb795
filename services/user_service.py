"""
User operations backed by the generic document service.
"""

from typing import Any, Dict, Iterable, List, Optional

from elasticsearch import Elasticsearch

from models.documents import User
from services.elastic_service import ElasticService


class UserService:
    """
    Service used by the users HTTP routes and MCP tools.

    Users live in the configured default index and are keyed by ``User.id``.
    """

    def __init__(self, client: Optional[Elasticsearch] = None, index: Optional[str] = None):
        self.documents: ElasticService[User] = ElasticService(User, client=client, index=index)

    @property
    def index(self) -> str:
        return self.documents.index

    def create_index_if_not_exists(self, index_name: str) -> bool:
        return self.documents.create_index_if_not_exists(index_name)

    def add_or_update_user(self, user: User) -> bool:
        return self.documents.index_document(user)

    def add_or_update_bulk(self, users: Iterable[User], index_name: Optional[str] = None) -> bool:
        return self.documents.bulk_index(users, index_name=index_name)

    def update_user(self, key: str, user: User) -> bool:
        return self.documents.update_document(key, user)

    def get(self, key: str) -> Optional[User]:
        return self.documents.get_document(key)

    def get_all(self) -> Optional[List[User]]:
        return self.documents.get_all()

    def remove_user(self, key: str) -> bool:
        return self.documents.delete_document(key)

    def remove_users(self, keys: Iterable[str]) -> bool:
        return self.documents.bulk_delete(keys)

    def remove_all_users(self) -> Optional[int]:
        return self.documents.delete_all()

    def count(self, query: Optional[Dict[str, Any]] = None) -> int:
        return self.documents.count(query)

    # Search pass-throughs

    def search(self, query: str, size: int = 10, from_: int = 0) -> List[User]:
        return self.documents.search(query, size=size, from_=from_)

    def search_query(self, query: Dict[str, Any], size: int = 10) -> List[User]:
        return self.documents.search_query(query, size=size)

    def search_by_field(self, field: str, value: str, size: int = 10) -> List[User]:
        return self.documents.search_by_field(field, value, size=size)

    def fuzzy_search(self, field: str, value: str, fuzziness: int = 1, size: int = 10) -> List[User]:
        return self.documents.fuzzy_search(field, value, fuzziness=fuzziness, size=size)

    def prefix_search(self, field: str, prefix: str, size: int = 10) -> List[User]:
        return self.documents.prefix_search(field, prefix, size=size)

    def range_query(
        self,
        field: str,
        gt: Optional[Any] = None,
        lt: Optional[Any] = None,
        include_upper: bool = False,
        include_lower: bool = False,
        size: int = 10,
    ) -> List[User]:
        return self.documents.range_query(
            field,
            gt=gt,
            lt=lt,
            include_upper=include_upper,
            include_lower=include_lower,
            size=size,
        )

    def multi_match(self, query: str, fields: List[str], size: int = 10) -> List[User]:
        return self.documents.multi_match(query, fields, size=size)
