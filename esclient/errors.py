"""Errors raised by the client."""


class SearchEngineError(Exception):
    """The engine answered with a status the client treats as a failure.

    ``body`` holds the raw response text exactly as the engine sent it;
    ``str(error)`` returns the same text.
    """

    def __init__(self, body: str, *, status: int) -> None:
        super().__init__(body)
        self.body = body
        self.status = status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, body={self.body!r})"
