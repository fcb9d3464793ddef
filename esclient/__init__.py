"""Client for the REST API of an Elasticsearch-compatible search engine."""

from esclient.client import ElasticsearchClient
from esclient.entities import ConnectionSettings, MSearchQuery
from esclient.errors import SearchEngineError
from esclient.interfaces import ISearchClient

__all__ = [
    "ConnectionSettings",
    "ElasticsearchClient",
    "ISearchClient",
    "MSearchQuery",
    "SearchEngineError",
]
