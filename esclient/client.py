from types import TracebackType
from typing import Any, Self

from esclient.entities import (
    Bulk,
    ConnectionSettings,
    Document,
    EngineInfo,
    InsertDocument,
    MSearchQuery,
    MSearchResult,
    Response,
    SearchResult,
    Settings,
)
from esclient.interfaces import ISearchClient
from esclient.logging import get_logger
from esclient.repositories import AliasRepository, DocumentRepository, IndexRepository
from esclient.services import SearchService
from esclient.transport import Transport

logger = get_logger(__name__)


class ElasticsearchClient(ISearchClient):
    def __init__(
        self,
        *,
        scheme: str = "http",
        host: str = "localhost",
        port: int = 9200,
        timeout: float = 10,
        settings: ConnectionSettings | None = None,
    ) -> None:
        """Initialize the client.

        Either pass ``settings`` or the individual connection arguments.
        No request is sent until the first call.

        Raises:
            ValueError: If the connection arguments are invalid
        """
        self._settings = settings or ConnectionSettings(
            scheme=scheme, host=host, port=port, timeout=timeout
        )
        self._transport = Transport(settings=self._settings)

        # Initialize repository classes
        self.indices = IndexRepository(transport=self._transport)
        self.documents = DocumentRepository(transport=self._transport)
        self.aliases = AliasRepository(transport=self._transport)

        # Initialize service classes
        self.search_service = SearchService(transport=self._transport)

        logger.debug("Client ready for %s", self._settings.base_url)

    @classmethod
    def from_url(cls, url: str, *, timeout: float = 10) -> Self:
        """Create a client from a URL such as ``http://localhost:9200``.

        Raises:
            ValueError: If the URL cannot be parsed or has no host
        """
        return cls(settings=ConnectionSettings.from_url(url, timeout=timeout))

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def info(self) -> EngineInfo:
        return self._transport.perform_request("GET", "/").parse(EngineInfo)

    # Indices

    def create_index(self, index_name: str, settings: str) -> Response:
        return self.indices.create(index_name, settings)

    def delete_index(self, index_name: str) -> Response:
        return self.indices.delete(index_name)

    def update_index_settings(self, index_name: str, settings: str) -> Response:
        return self.indices.update_settings(index_name, settings)

    def index_settings(self, index_name: str) -> Settings:
        return self.indices.settings(index_name)

    def index_exists(self, index_name: str) -> bool:
        return self.indices.exists(index_name)

    def get_mapping(self, index_name: str, doc_type: str) -> Any:
        return self.indices.get_mapping(index_name, doc_type)

    def put_mapping(self, index_name: str, doc_type: str, mapping: str) -> Response:
        return self.indices.put_mapping(index_name, doc_type, mapping)

    def status(self, indices: str) -> Settings:
        return self.indices.status(indices)

    # Documents

    def insert_document(
        self, index_name: str, doc_type: str, identifier: str, data: str | bytes
    ) -> InsertDocument:
        return self.documents.insert(index_name, doc_type, identifier, data)

    def document(self, index_name: str, doc_type: str, identifier: str) -> Document:
        return self.documents.get(index_name, doc_type, identifier)

    def delete_document(self, index_name: str, doc_type: str, identifier: str) -> Document:
        return self.documents.delete(index_name, doc_type, identifier)

    def bulk(self, data: str | bytes) -> Bulk:
        return self.documents.bulk(data)

    # Search

    def search(
        self, index_name: str, doc_type: str, data: str, explain: bool = False
    ) -> SearchResult:
        return self.search_service.search(index_name, doc_type, data, explain)

    def msearch(self, queries: list[MSearchQuery]) -> MSearchResult:
        return self.search_service.msearch(queries)

    def create_search_template(self, name: str, template: str) -> Response:
        return self.search_service.create_template(name, template)

    def search_template(self, index_name: str, data: str, explain: bool = False) -> SearchResult:
        return self.search_service.search_template(index_name, data, explain)

    def suggest(self, index_name: str, data: str) -> Any:
        return self.search_service.suggest(index_name, data)

    # Aliases

    def get_indices_from_alias(self, alias: str) -> list[str]:
        return self.aliases.indices(alias)

    def update_alias(self, remove: list[str], add: list[str], alias: str) -> Response:
        return self.aliases.update(remove, add, alias)
