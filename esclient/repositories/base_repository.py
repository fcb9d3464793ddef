"""Base repository class for engine resources."""

from abc import ABC, abstractmethod
from typing import Any

from esclient.transport import Transport


class BaseRepository(ABC):
    """Abstract base class for repositories of engine resources.

    A repository owns the endpoints of one kind of resource (indices,
    documents, aliases) and turns each call into a single request on the
    shared transport.
    """

    def __init__(self, *, transport: Transport) -> None:
        """Initialize the repository with a transport."""
        self._transport = transport

    @abstractmethod
    def delete(self, *args: Any, **kwargs: Any) -> Any:
        """Delete a resource and return the engine's answer."""
