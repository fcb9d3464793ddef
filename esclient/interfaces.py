"""Type definitions and interfaces for the search engine client."""

from abc import ABC, abstractmethod
from typing import Any

from esclient.entities import (
    Bulk,
    Document,
    EngineInfo,
    InsertDocument,
    MSearchQuery,
    MSearchResult,
    Response,
    SearchResult,
    Settings,
)


class ISearchClient(ABC):
    """Contract to manage indices, synchronize documents and run searches."""

    @abstractmethod
    def info(self) -> EngineInfo:
        """Return the engine banner."""

    # Indices

    @abstractmethod
    def create_index(self, index_name: str, settings: str) -> Response:
        """Create an index with the given settings and mappings body."""

    @abstractmethod
    def delete_index(self, index_name: str) -> Response:
        """Delete an index."""

    @abstractmethod
    def update_index_settings(self, index_name: str, settings: str) -> Response:
        """Change index level settings in real time."""

    @abstractmethod
    def index_settings(self, index_name: str) -> Settings:
        """Return the settings of an index."""

    @abstractmethod
    def index_exists(self, index_name: str) -> bool:
        """Check whether an index exists."""

    @abstractmethod
    def get_mapping(self, index_name: str, doc_type: str) -> Any:
        """Return the decoded mapping of a document type."""

    @abstractmethod
    def put_mapping(self, index_name: str, doc_type: str, mapping: str) -> Response:
        """Update the mapping of a document type."""

    @abstractmethod
    def status(self, indices: str) -> Settings:
        """Return status information for one or several indices."""

    # Documents

    @abstractmethod
    def insert_document(
        self, index_name: str, doc_type: str, identifier: str, data: str | bytes
    ) -> InsertDocument:
        """Add or replace a document."""

    @abstractmethod
    def document(self, index_name: str, doc_type: str, identifier: str) -> Document:
        """Get a document by identifier."""

    @abstractmethod
    def delete_document(self, index_name: str, doc_type: str, identifier: str) -> Document:
        """Delete a document by identifier."""

    @abstractmethod
    def bulk(self, data: str | bytes) -> Bulk:
        """Run many index/delete actions in one request."""

    # Search

    @abstractmethod
    def search(
        self, index_name: str, doc_type: str, data: str, explain: bool = False
    ) -> SearchResult:
        """Run a search query."""

    @abstractmethod
    def msearch(self, queries: list[MSearchQuery]) -> MSearchResult:
        """Run several search queries in one request."""

    @abstractmethod
    def create_search_template(self, name: str, template: str) -> Response:
        """Store a search template."""

    @abstractmethod
    def search_template(self, index_name: str, data: str, explain: bool = False) -> SearchResult:
        """Run a search through a search template."""

    @abstractmethod
    def suggest(self, index_name: str, data: str) -> Any:
        """Return the decoded suggestions for the given suggester body."""

    # Aliases

    @abstractmethod
    def get_indices_from_alias(self, alias: str) -> list[str]:
        """Return the indices an alias points to."""

    @abstractmethod
    def update_alias(self, remove: list[str], add: list[str], alias: str) -> Response:
        """Atomically move an alias off ``remove`` and onto ``add``."""
