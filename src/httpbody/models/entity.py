import asyncio
from enum import Enum
from typing import AsyncIterator, Callable, Iterator, Optional

from .._utils._mime import mime_type_of
from .errors import EntityConsumedError


class EntityKind(str, Enum):
    """Wire encoding chosen for a request body."""

    TEXT = "text"
    FORM = "form"
    FILE = "file"
    MULTIPART = "multipart"


class Entity:
    """A finished request body, ready to hand to the transport.

    The bytes are either held in memory (text and form bodies) or produced
    lazily by ``stream`` (file and multipart bodies, which read their files
    while being sent). Either way the content can be consumed only once.
    """

    def __init__(
        self,
        kind: EntityKind,
        content_type: str,
        *,
        charset: Optional[str] = None,
        length: Optional[int] = None,
        content: Optional[bytes] = None,
        stream: Optional[Callable[[], Iterator[bytes]]] = None,
    ) -> None:
        if (content is None) == (stream is None):
            raise ValueError("Exactly one of content or stream must be provided")
        self.kind = kind
        self.content_type = content_type
        self.charset = charset
        self.length = len(content) if content is not None else length
        self._content = content
        self._stream = stream
        self._consumed = False

    @property
    def mime_type(self) -> str:
        return mime_type_of(self.content_type)

    @property
    def is_streaming(self) -> bool:
        return self._stream is not None

    @property
    def consumed(self) -> bool:
        return self._consumed

    def iter_bytes(self) -> Iterator[bytes]:
        if self._consumed:
            raise EntityConsumedError()
        self._consumed = True
        if self._content is not None:
            return iter((self._content,))
        assert self._stream is not None
        return self._stream()

    def aiter_bytes(self) -> AsyncIterator[bytes]:
        """Async view of ``iter_bytes``; file reads run in a worker thread."""
        return _iterate_in_thread(self.iter_bytes())

    def read(self) -> bytes:
        return b"".join(self.iter_bytes())

    def __repr__(self) -> str:
        return (
            f"Entity(kind={self.kind.value}, content_type={self.content_type!r}, "
            f"length={self.length})"
        )


async def _iterate_in_thread(iterator: Iterator[bytes]) -> AsyncIterator[bytes]:
    while True:
        chunk = await asyncio.to_thread(next, iterator, None)
        if chunk is None:
            return
        yield chunk
