"""Pytest fixtures for client unit tests."""

import json
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from esclient.client import ElasticsearchClient
from esclient.transport import Transport, TransportResponse


@pytest.fixture
def make_response() -> Callable[..., TransportResponse]:
    """Build a TransportResponse from a status and a JSON-serializable payload."""

    def _make(payload: Any = None, status: int = 200) -> TransportResponse:
        body = "" if payload is None else json.dumps(payload)
        return TransportResponse(status=status, body=body)

    return _make


@pytest.fixture
def mock_transport() -> MagicMock:
    """Create a mock transport."""
    return MagicMock(spec=Transport)


@pytest.fixture
def mock_connection() -> Generator[MagicMock, None, None]:
    """Patch the HTTP connection class used by the transport."""
    with patch("esclient.transport.RequestsHttpConnection") as mock_connection_class:
        mock_connection_instance = MagicMock()
        mock_connection_class.return_value = mock_connection_instance

        # Default answer: an acknowledged request
        mock_connection_instance.perform_request.return_value = (
            200,
            {},
            '{"acknowledged": true}',
        )

        yield mock_connection_instance


@pytest.fixture
def client(mock_connection: MagicMock) -> Generator[ElasticsearchClient, None, None]:
    """Create an ElasticsearchClient whose HTTP connection is mocked."""
    with ElasticsearchClient(host="test-host.example.com", port=9201) as client:
        yield client
