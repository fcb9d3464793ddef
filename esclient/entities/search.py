"""Search entities."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field, field_validator

from esclient.entities.base_entity import BaseEntity


class ShardsInfo(BaseEntity):
    """Shard accounting attached to search responses."""

    total: int = 0
    successful: int = 0
    failed: int = 0


class SearchHit(BaseEntity):
    """A single matching document."""

    index: str = Field(default="", alias="_index")
    type: str = Field(default="", alias="_type")
    id: str = Field(default="", alias="_id")
    score: float | None = Field(default=None, alias="_score")
    source: Any = Field(default=None, alias="_source")


class SearchHits(BaseEntity):
    """Hit list and total count of a search."""

    total: int = 0
    max_score: float | None = None
    hits: list[SearchHit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def validate_total(cls, v: Any) -> Any:
        """Accept both ``"total": 3`` and ``"total": {"value": 3, "relation": "eq"}``."""
        if isinstance(v, dict):
            return v.get("value", 0)
        return v


class SearchResult(BaseEntity):
    """Result of a search or templated search."""

    took: int = 0
    timed_out: bool = False
    shards: ShardsInfo = Field(default_factory=ShardsInfo, alias="_shards")
    hits: SearchHits = Field(default_factory=SearchHits)


class MSearchResult(BaseEntity):
    """Result of a multi-search, one entry per query in request order."""

    responses: list[SearchResult] = Field(default_factory=list)


@dataclass
class MSearchQuery:
    """One query of a multi-search request."""

    header: str  # target index, document type, search options
    body: str  # query run against the index named in the header
