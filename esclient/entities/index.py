"""Index and cluster entities."""

from typing import Any

from pydantic import Field

from esclient.entities.base_entity import BaseEntity


class Settings(BaseEntity):
    """Settings or status information of one or several indices."""

    shards: dict[str, Any] = Field(default_factory=dict, alias="_shards")
    indices: dict[str, Any] = Field(default_factory=dict)
    settings: dict[str, Any] = Field(default_factory=dict)


class EngineVersion(BaseEntity):
    """Version block of the engine banner."""

    number: str = ""
    build_hash: str = ""
    build_timestamp: str = ""
    build_snapshot: bool = False
    lucene_version: str = ""


class EngineInfo(BaseEntity):
    """Banner returned by the engine root endpoint."""

    name: str = ""
    cluster_name: str = ""
    tagline: str = ""
    version: EngineVersion = Field(default_factory=EngineVersion)
    status: int | None = None
    ok: bool | None = None
