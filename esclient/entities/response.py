"""Acknowledgement response entity."""

from typing import Any

from esclient.entities.base_entity import BaseEntity


class Response(BaseEntity):
    """Acknowledgement returned by index, mapping, template and alias operations.

    When the engine rejects the request with a structured body (for example
    an index that already exists), ``error`` and ``status`` carry the
    engine's explanation and ``acknowledged`` stays False.
    """

    acknowledged: bool = False
    error: str | dict[str, Any] | None = None
    status: int | None = None
