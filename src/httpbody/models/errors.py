from typing import Optional


class HttpBodyError(Exception):
    """Base class for errors raised by httpbody."""


class RequestFailedError(HttpBodyError):
    """Raised when a request attempt cannot be completed.

    Covers I/O failures while reading attached files and transport failures
    (connection refused, timeouts). HTTP error statuses are not failures; they
    come back as a normal ``Response``.
    """

    def __init__(
        self,
        message: str,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.message = message
        self.method = method
        self.url = url
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.method and self.url:
            return f"{self.method} {self.url} failed: {self.message}"
        return self.message


class EntityConsumedError(HttpBodyError):
    """Raised when the bytes of an entity are requested a second time."""

    def __init__(
        self,
        message="Entity content has already been consumed. Build a new entity to send it again.",
    ):
        self.message = message
        super().__init__(self.message)
