"""
Engine entities.

This module contains the pydantic models mirroring the engine's JSON
payloads, plus the connection settings used to build a client.
"""

from esclient.entities.base_entity import BaseEntity
from esclient.entities.connection import ConnectionSettings
from esclient.entities.document import Bulk, BulkItem, BulkItemResult, Document, InsertDocument
from esclient.entities.index import EngineInfo, EngineVersion, Settings
from esclient.entities.response import Response
from esclient.entities.search import (
    MSearchQuery,
    MSearchResult,
    SearchHit,
    SearchHits,
    SearchResult,
    ShardsInfo,
)

__all__ = [
    "BaseEntity",
    "Bulk",
    "BulkItem",
    "BulkItemResult",
    "ConnectionSettings",
    "Document",
    "EngineInfo",
    "EngineVersion",
    "InsertDocument",
    "MSearchQuery",
    "MSearchResult",
    "Response",
    "SearchHit",
    "SearchHits",
    "SearchResult",
    "Settings",
    "ShardsInfo",
]
