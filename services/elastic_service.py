"""
Generic document service over a single Elasticsearch index.

Every operation is one client call against the configured index. An
``ApiError`` from the client means the cluster answered with an invalid
response; it is logged and turned into the operation's fallback value
(False, None, 0 or an empty list). Transport failures propagate.
"""

import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from elasticsearch import ApiError, Elasticsearch, NotFoundError

from config import get_default_index, get_index_config
from models.documents import Document
from models.search import RangeBounds, SearchRequest, SearchResponse
from utils.connection import get_elasticsearch_client
from utils.response_parser import bulk_failures
from utils.validation import validate_from, validate_index_name, validate_size


logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=Document)


class ElasticService(Generic[DocumentT]):
    """CRUD, bulk and search operations for one document type."""

    def __init__(
        self,
        document_type: Type[DocumentT],
        client: Optional[Elasticsearch] = None,
        index: Optional[str] = None,
    ):
        self.document_type = document_type
        self.client = client or get_elasticsearch_client()
        self.index = index or get_default_index()
        validate_index_name(self.index)

    # ========== INDEX MANAGEMENT ==========

    def create_index_if_not_exists(self, index_name: str) -> bool:
        """
        Create an index unless it already exists.

        Registered indices get their configured settings and mappings.

        Returns:
            True if the index was created by this call
        """
        validate_index_name(index_name)
        try:
            if self.client.indices.exists(index=index_name):
                return False
        except ApiError as e:
            self._log_invalid("index exists", e, index=index_name)
            return False

        params: Dict[str, Any] = {}
        index_config = get_index_config(index_name)
        if index_config:
            params["settings"] = index_config.get("settings")
            params["mappings"] = index_config.get("mappings")

        try:
            self.client.indices.create(index=index_name, **params)
        except ApiError as e:
            # Lost a race with a concurrent create
            if e.message == "resource_already_exists_exception":
                return False
            self._log_invalid("create index", e, index=index_name)
            return False

        logger.info("Created index %s", index_name)
        return True

    def index_exists(self, index_name: str) -> bool:
        validate_index_name(index_name)
        try:
            return bool(self.client.indices.exists(index=index_name))
        except ApiError as e:
            self._log_invalid("index exists", e, index=index_name)
            return False

    def delete_index(self, index_name: str) -> bool:
        validate_index_name(index_name)
        try:
            self.client.indices.delete(index=index_name)
        except ApiError as e:
            self._log_invalid("delete index", e, index=index_name)
            return False
        logger.info("Deleted index %s", index_name)
        return True

    def refresh_index(self, index_name: str) -> bool:
        validate_index_name(index_name)
        try:
            self.client.indices.refresh(index=index_name)
        except ApiError as e:
            self._log_invalid("refresh index", e, index=index_name)
            return False
        return True

    # ========== SINGLE DOCUMENTS ==========

    def index_document(self, document: DocumentT, id: Optional[str] = None) -> bool:
        """
        Index a document, replacing any document with the same id.

        Args:
            document: Document to store
            id: Document id; falls back to ``document.id``, then to an id
                generated by Elasticsearch
        """
        doc_id = id or document.id
        try:
            self.client.index(
                index=self.index,
                id=doc_id,
                document=self._to_source(self._with_id(document, doc_id)),
            )
        except ApiError as e:
            self._log_invalid("index", e, id=doc_id)
            return False
        return True

    def update_document(self, id: str, document: DocumentT) -> bool:
        """Partially update a document, creating it when missing."""
        try:
            self.client.update(
                index=self.index,
                id=id,
                doc=self._to_source(self._with_id(document, id)),
                doc_as_upsert=True,
            )
        except ApiError as e:
            self._log_invalid("update", e, id=id)
            return False
        return True

    def delete_document(self, id: str) -> bool:
        try:
            self.client.delete(index=self.index, id=id)
        except NotFoundError:
            return False
        except ApiError as e:
            self._log_invalid("delete", e, id=id)
            return False
        return True

    def get_document(self, id: str) -> Optional[DocumentT]:
        try:
            response = self.client.get(index=self.index, id=id)
        except NotFoundError:
            return None
        except ApiError as e:
            self._log_invalid("get", e, id=id)
            return None

        if not response.get("found"):
            return None
        return self._from_source(response["_source"])

    def get_all(self, size: int = 1000, from_: int = 0) -> Optional[List[DocumentT]]:
        """
        Page through every document of the index.

        Returns:
            Documents of the page, or None when the search was rejected
        """
        request = SearchRequest(size=validate_size(size), from_=validate_from(from_))
        try:
            response = self.client.search(index=self.index, **request.to_dict())
        except ApiError as e:
            self._log_invalid("get all", e)
            return None
        return self._documents(response)

    def count(self, query: Optional[Dict[str, Any]] = None) -> int:
        params: Dict[str, Any] = {}
        if query:
            params["query"] = query
        try:
            response = self.client.count(index=self.index, **params)
        except ApiError as e:
            self._log_invalid("count", e)
            return 0
        return response["count"]

    # ========== BULK ==========

    def bulk_index(self, documents: Iterable[DocumentT], index_name: Optional[str] = None) -> bool:
        """
        Index many documents in one request.

        Args:
            documents: Documents to store, ids taken from ``document.id``
            index_name: Target index (defaults to the configured index)

        Returns:
            True only if every item succeeded
        """
        index = index_name or self.index
        validate_index_name(index)

        operations: List[Dict[str, Any]] = []
        for document in documents:
            action: Dict[str, Any] = {"_index": index}
            if document.id:
                action["_id"] = document.id
            operations.append({"index": action})
            operations.append(self._to_source(document))

        return self._bulk("bulk index", operations)

    def bulk_update(self, documents: Iterable[Tuple[str, DocumentT]]) -> bool:
        """Upsert many (id, document) pairs in one request."""
        operations: List[Dict[str, Any]] = []
        for id, document in documents:
            operations.append({"update": {"_index": self.index, "_id": id}})
            operations.append({"doc": self._to_source(self._with_id(document, id)), "doc_as_upsert": True})

        return self._bulk("bulk update", operations)

    def bulk_delete(self, ids: Iterable[str]) -> bool:
        operations = [{"delete": {"_index": self.index, "_id": id}} for id in ids]
        return self._bulk("bulk delete", operations)

    def delete_all(self) -> Optional[int]:
        """
        Delete every document of the index.

        Returns:
            Number of deleted documents, or None when the request was rejected
        """
        try:
            response = self.client.delete_by_query(
                index=self.index,
                query={"match_all": {}},
                refresh=True,
            )
        except ApiError as e:
            self._log_invalid("delete all", e)
            return None
        return response.get("deleted", 0)

    # ========== SEARCH ==========

    def search(self, query: str, size: int = 10, from_: int = 0) -> List[DocumentT]:
        """Lucene query string search."""
        return self._search({"query_string": {"query": query}}, size=size, from_=from_)

    def search_query(self, query: Dict[str, Any], size: int = 10) -> List[DocumentT]:
        """Search with a raw Query DSL clause."""
        return self._search(query, size=size)

    def search_by_field(self, field: str, value: str, size: int = 10) -> List[DocumentT]:
        return self._search({"match": {field: {"query": value}}}, size=size)

    def fuzzy_search(self, field: str, value: str, fuzziness: int = 1, size: int = 10) -> List[DocumentT]:
        return self._search(
            {"fuzzy": {field: {"value": value, "fuzziness": fuzziness}}},
            size=size,
        )

    def prefix_search(self, field: str, prefix: str, size: int = 10) -> List[DocumentT]:
        return self._search({"prefix": {field: {"value": prefix}}}, size=size)

    def range_query(
        self,
        field: str,
        gt: Optional[Any] = None,
        lt: Optional[Any] = None,
        include_upper: bool = False,
        include_lower: bool = False,
        size: int = 10,
    ) -> List[DocumentT]:
        """
        Term range search on one field.

        ``include_lower``/``include_upper`` turn the exclusive ``gt``/``lt``
        bounds into inclusive ones.
        """
        bounds = RangeBounds(gt=gt, lt=lt, include_lower=include_lower, include_upper=include_upper)
        return self._search({"range": {field: bounds.to_query()}}, size=size)

    def multi_match(self, query: str, fields: List[str], size: int = 10) -> List[DocumentT]:
        return self._search({"multi_match": {"query": query, "fields": fields}}, size=size)

    # ========== HELPERS ==========

    def _search(self, query: Dict[str, Any], size: int = 10, from_: int = 0) -> List[DocumentT]:
        request = SearchRequest(
            query=query,
            size=validate_size(size),
            from_=validate_from(from_),
        )
        try:
            response = self.client.search(index=self.index, **request.to_dict())
        except ApiError as e:
            self._log_invalid("search", e, query=query)
            return []
        return self._documents(response)

    def _bulk(self, operation: str, operations: List[Dict[str, Any]]) -> bool:
        if not operations:
            return True

        try:
            response = self.client.bulk(operations=operations)
        except ApiError as e:
            self._log_invalid(operation, e)
            return False

        failures = bulk_failures(response)
        if failures:
            logger.warning(
                "%s on %s: %d item(s) failed, first: %s",
                operation, self.index, len(failures), failures[0],
            )
            return False
        return True

    def _documents(self, response: Dict[str, Any]) -> List[DocumentT]:
        return [self._from_source(source) for source in SearchResponse.from_dict(response).sources]

    def _with_id(self, document: DocumentT, id: Optional[str]) -> DocumentT:
        # The stored body must carry the key it is stored under
        if id is None or document.id == id:
            return document
        return document.model_copy(update={"id": id})

    def _to_source(self, document: DocumentT) -> Dict[str, Any]:
        return document.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _from_source(self, source: Dict[str, Any]) -> DocumentT:
        return self.document_type.model_validate(source)

    def _log_invalid(self, operation: str, error: ApiError, **context: Any) -> None:
        logger.warning(
            "Elasticsearch %s on %s returned %s: %s %s",
            operation, self.index, error.meta.status, error.message, context or "",
        )
