from esclient.transport import Transport


class BaseService:
    """Base service for engine operations that are not tied to one resource."""

    _transport: Transport

    def __init__(self, *, transport: Transport) -> None:
        self._transport = transport
