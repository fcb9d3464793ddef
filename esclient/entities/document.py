"""Document and bulk entities."""

from typing import Any

from pydantic import Field

from esclient.entities.base_entity import BaseEntity


class InsertDocument(BaseEntity):
    """Result of indexing a single document."""

    created: bool = False
    result: str | None = None
    index: str = Field(default="", alias="_index")
    type: str = Field(default="", alias="_type")
    id: str = Field(default="", alias="_id")
    version: int = Field(default=0, alias="_version")


class Document(BaseEntity):
    """A stored document, or the outcome of deleting one.

    ``source`` is the decoded ``_source`` payload, ``None`` when the engine
    did not return one (missing document, deletion).
    """

    index: str = Field(default="", alias="_index")
    type: str = Field(default="", alias="_type")
    id: str = Field(default="", alias="_id")
    version: int = Field(default=0, alias="_version")
    found: bool = False
    result: str | None = None
    source: Any = Field(default=None, alias="_source")


class BulkItemResult(BaseEntity):
    """Outcome of one action inside a bulk request."""

    index: str = Field(default="", alias="_index")
    type: str = Field(default="", alias="_type")
    id: str = Field(default="", alias="_id")
    version: int | None = Field(default=None, alias="_version")
    status: int = 0
    error: str | dict[str, Any] | None = None


class BulkItem(BaseEntity):
    """One entry of the bulk ``items`` list, keyed by the action performed."""

    create: BulkItemResult | None = None
    index: BulkItemResult | None = None
    update: BulkItemResult | None = None
    delete: BulkItemResult | None = None

    @property
    def result(self) -> BulkItemResult | None:
        """Return the result of whichever action this item reports."""
        return self.create or self.index or self.update or self.delete


class Bulk(BaseEntity):
    """Result of a bulk request."""

    took: int = 0
    errors: bool = False
    items: list[BulkItem] = Field(default_factory=list)

    def failed_items(self) -> list[BulkItemResult]:
        """Return the per-action results that carry an error."""
        return [
            item.result for item in self.items if item.result is not None and item.result.error
        ]
