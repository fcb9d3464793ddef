"""Index repository."""

from http import HTTPStatus
from typing import Any

from opensearchpy.client.utils import _make_path

from esclient.entities import Response, Settings
from esclient.logging import get_logger
from esclient.repositories.base_repository import BaseRepository

logger = get_logger(__name__)


class IndexRepository(BaseRepository):
    """Repository for index lifecycle, settings and mappings."""

    def create(self, index_name: str, settings: str) -> Response:
        """Create an index.

        Args:
            index_name: Name of the index
            settings: JSON body holding ``settings`` and/or ``mappings``

        Returns:
            The acknowledgement, or the engine's structured error for
            statuses from 404 upwards

        Raises:
            SearchEngineError: If the engine answers with a status from 202 to 403
        """
        logger.info("Creating index %s", index_name)
        response = self._transport.perform_request("PUT", _make_path(index_name), body=settings)
        return response.parse(Response)

    def delete(self, index_name: str) -> Response:
        """Delete an index."""
        logger.info("Deleting index %s", index_name)
        return self._transport.perform_request("DELETE", _make_path(index_name)).parse(Response)

    def update_settings(self, index_name: str, settings: str) -> Response:
        """Change index level settings in real time."""
        return self._transport.perform_request(
            "PUT", _make_path(index_name, "_settings"), body=settings
        ).parse(Response)

    def settings(self, index_name: str) -> Settings:
        """Get the settings of an index.

        Returns:
            The index entry of the response, empty Settings when the engine
            does not report the index
        """
        response = self._transport.perform_request("GET", _make_path(index_name, "_settings"))
        by_index: dict[str, Any] = response.json()
        return Settings.model_validate(by_index.get(index_name) or {})

    def exists(self, index_name: str) -> bool:
        """Check if an index exists."""
        response = self._transport.perform_request("HEAD", _make_path(index_name))
        return response.status == HTTPStatus.OK

    def get_mapping(self, index_name: str, doc_type: str) -> Any:
        """Get the mapping of a document type as decoded JSON."""
        return self._transport.perform_request(
            "GET", _make_path(index_name, "_mapping", doc_type)
        ).json()

    def put_mapping(self, index_name: str, doc_type: str, mapping: str) -> Response:
        """Update the mapping of a document type."""
        return self._transport.perform_request(
            "PUT", _make_path(index_name, "_mapping", doc_type), body=mapping
        ).parse(Response)

    def refresh(self, index_name: str) -> Settings:
        """Make every operation performed on the index since the last refresh searchable."""
        response = self._transport.perform_request("POST", _make_path(index_name, "_refresh"))
        return response.parse(Settings)

    def status(self, indices: str) -> Settings:
        """Get status information for one or several comma separated indices."""
        return self._transport.perform_request("GET", _make_path(indices, "_status")).parse(Settings)
