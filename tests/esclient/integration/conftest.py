"""Pytest fixtures for ElasticsearchClient integration tests."""

import os
import uuid
from collections.abc import Generator

import pytest

from esclient.client import ElasticsearchClient

_INDEX_SETTINGS = """{
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0
    }
}"""


@pytest.fixture(scope="session")
def engine_url() -> str:
    """Get the engine URL from environment."""
    url = os.getenv("ELASTICSEARCH_URL")
    if not url:
        pytest.skip("ELASTICSEARCH_URL environment variable is not set")
    return url


@pytest.fixture(scope="module")
def client(engine_url: str) -> Generator[ElasticsearchClient, None, None]:
    """
    Create a real ElasticsearchClient instance for integration tests.

    This fixture connects to a real engine (for example http://localhost:9200).
    It does NOT use mocks.
    """
    with ElasticsearchClient.from_url(engine_url, timeout=30) as client:
        # Verify connection by getting the engine banner
        info = client.info()
        assert info.version.number, "Should be able to read the banner of a real engine"

        yield client


@pytest.fixture
def index_name(client: ElasticsearchClient) -> Generator[str, None, None]:
    """Generate a unique index name and drop the index after the test."""
    name = f"test-esclient-{uuid.uuid4().hex[:8]}"

    yield name

    # Cleanup
    if client.index_exists(name):
        client.delete_index(name)


@pytest.fixture(scope="session")
def index_settings() -> str:
    """Settings body for single-shard test indices."""
    return _INDEX_SETTINGS


@pytest.fixture
def index(client: ElasticsearchClient, index_name: str, index_settings: str) -> str:
    """Create a test index and return its name."""
    response = client.create_index(index_name, index_settings)
    assert response.acknowledged, f"Unable to create test index: {response.error}"
    return index_name
