"""HTTP transport shared by every repository and service."""

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, TypeVar

from opensearchpy import RequestsHttpConnection
from pydantic import BaseModel

from esclient.entities.connection import ConnectionSettings
from esclient.errors import SearchEngineError
from esclient.logging import get_logger

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
NDJSON_CONTENT_TYPE = "application/x-ndjson"

M = TypeVar("M", bound=BaseModel)

# Statuses the connection must hand back instead of raising; classification happens here
_PASSTHROUGH_STATUSES = tuple(range(300, 600))


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body text of one engine response."""

    status: int
    body: str

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)

    def parse(self, model: type[M]) -> M:
        """Decode the body into ``model``."""
        return model.model_validate_json(self.body)


class Transport:
    """Sends single requests to the engine and classifies their status.

    One ``RequestsHttpConnection`` is opened per transport. Requests are
    never retried.
    """

    def __init__(self, *, settings: ConnectionSettings) -> None:
        self._settings = settings
        self._connection = RequestsHttpConnection(
            host=settings.host,
            port=settings.port,
            scheme=settings.scheme,
            use_ssl=settings.scheme == "https",
            url_prefix=settings.url_prefix,
            timeout=settings.timeout,
        )

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    def perform_request(
        self,
        method: str,
        path: str,
        *,
        body: str | bytes | None = None,
        params: dict[str, Any] | None = None,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> TransportResponse:
        """Send one request and return the engine's answer.

        Args:
            method: HTTP verb
            path: Request path, already escaped, starting with ``/``
            body: Raw request body, sent untouched
            params: Query string parameters
            content_type: Content-Type header of the request

        Returns:
            The response for 200, 201 and every status from 404 upwards

        Raises:
            SearchEngineError: For statuses from 202 up to 403
            opensearchpy.exceptions.ConnectionError: If the engine cannot be reached

        """
        if isinstance(body, str):
            body = body.encode("utf-8")

        status, _, raw = self._connection.perform_request(
            method,
            path,
            params=params,
            body=body,
            headers={"content-type": content_type},
            ignore=_PASSTHROUGH_STATUSES,
        )
        logger.debug("%s %s -> %s", method, path, status)

        if HTTPStatus.CREATED < status < HTTPStatus.NOT_FOUND:
            logger.warning("%s %s failed with status %s", method, path, status)
            raise SearchEngineError(raw, status=status)

        return TransportResponse(status=status, body=raw)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._connection.close()
