"""Document repository."""

from opensearchpy.client.utils import _make_path

from esclient.entities import Bulk, Document, InsertDocument
from esclient.logging import get_logger
from esclient.repositories.base_repository import BaseRepository
from esclient.transport import NDJSON_CONTENT_TYPE

logger = get_logger(__name__)


class DocumentRepository(BaseRepository):
    """Repository for typed JSON documents."""

    def insert(
        self, index_name: str, doc_type: str, identifier: str, data: str | bytes
    ) -> InsertDocument:
        """Add or replace a document, making it searchable.

        Re-inserting an existing identifier replaces the document and bumps
        its version.
        """
        return self._transport.perform_request(
            "POST", _make_path(index_name, doc_type, identifier), body=data
        ).parse(InsertDocument)

    def get(self, index_name: str, doc_type: str, identifier: str) -> Document:
        """Get a document by identifier; ``found`` is False when it does not exist."""
        return self._transport.perform_request(
            "GET", _make_path(index_name, doc_type, identifier)
        ).parse(Document)

    def delete(self, index_name: str, doc_type: str, identifier: str) -> Document:
        """Delete a document by identifier."""
        return self._transport.perform_request(
            "DELETE", _make_path(index_name, doc_type, identifier)
        ).parse(Document)

    def bulk(self, data: str | bytes) -> Bulk:
        """Perform many index/delete actions in a single request.

        Args:
            data: Newline-delimited action/document lines, ending with a newline

        Returns:
            Bulk result with one item per action
        """
        result = self._transport.perform_request(
            "POST", "/_bulk", body=data, content_type=NDJSON_CONTENT_TYPE
        ).parse(Bulk)
        if result.errors:
            logger.warning("Bulk request reported %d failed item(s)", len(result.failed_items()))
        return result
