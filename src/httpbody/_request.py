from enum import Enum
from logging import getLogger
from typing import TYPE_CHECKING, Optional, Union

from ._request_body import RequestBodyBuilder
from ._utils._request_spec import RequestSpec
from ._utils.constants import (
    DEFAULT_CHARSET,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    SNIFF_PREFIX_BYTES,
)
from .models.entity import Entity
from .models.response import Response

if TYPE_CHECKING:
    from ._services.requests_service import RequestsService


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @property
    def allows_body(self) -> bool:
        return self in _BODY_METHODS


_BODY_METHODS = frozenset(
    {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH, HttpMethod.DELETE}
)


class HttpRequest:
    """One HTTP request: method, URL, headers and, when the method has one, a body.

    Requests are created by ``HttpClient`` and sent with ``execute_request``.
    The body is built again for every send attempt, so parameters and files
    are re-posted on a retry while a raw body is sent only once.

    Examples:
        >>> poster = client.create_post_request("https://example.com/upload")
        >>> poster.add_parameter("status", "hello")
        True
        >>> poster.add_file("document", "manual.doc", "/tmp/manual_01a.doc")
        True
        >>> response = poster.execute_request()
    """

    def __init__(
        self,
        method: Union[HttpMethod, str],
        url: str,
        service: "RequestsService",
        *,
        charset: str = DEFAULT_CHARSET,
        sniff_bytes: int = SNIFF_PREFIX_BYTES,
    ) -> None:
        self._logger = getLogger("httpbody")
        self.method = HttpMethod(method.upper() if isinstance(method, str) else method)
        self.url = url
        self._service = service
        self._headers: list[tuple[str, str]] = []
        self.body: Optional[RequestBodyBuilder] = (
            RequestBodyBuilder(charset, sniff_bytes=sniff_bytes)
            if self.method.allows_body
            else None
        )

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._headers)

    def add_header(self, name: Optional[str], value: Optional[str]) -> bool:
        """Add a request header; repeated names are all sent, in order."""
        if not name or value is None:
            return False
        self._headers.append((name, value))
        return True

    def set_body_content(
        self, content: Optional[str], mime_type: Optional[str] = None
    ) -> None:
        if self._require_body("set_body_content"):
            self.body.set_body_content(content, mime_type)  # type: ignore[union-attr]

    def set_charset(self, charset: Optional[str]) -> bool:
        if not self._require_body("set_charset"):
            return False
        return self.body.set_charset(charset)  # type: ignore[union-attr]

    def add_file(
        self,
        field_name: Optional[str],
        file_name: Optional[str],
        source: object,
        mime_type: Optional[str] = None,
    ) -> bool:
        if not self._require_body("add_file"):
            return False
        return self.body.add_file(field_name, file_name, source, mime_type)  # type: ignore[union-attr]

    def add_parameter(self, name: Optional[str], value: Optional[str]) -> bool:
        if not self._require_body("add_parameter"):
            return False
        return self.body.add_parameter(name, value)  # type: ignore[union-attr]

    def build_entity(self) -> Optional[Entity]:
        if self.body is None:
            return None
        return self.body.build_entity()

    def to_spec(self, entity: Optional[Entity] = None) -> RequestSpec:
        """Describe one send attempt of this request for the transport."""
        headers = list(self._headers)
        content = None
        if entity is not None:
            headers = [
                (name, value)
                for name, value in headers
                if name.lower()
                not in (HEADER_CONTENT_TYPE.lower(), HEADER_CONTENT_LENGTH.lower())
            ]
            headers.append((HEADER_CONTENT_TYPE, entity.content_type))
            if entity.length is not None:
                headers.append((HEADER_CONTENT_LENGTH, str(entity.length)))
            content = entity

        return RequestSpec(
            method=self.method.value,
            url=self.url,
            headers=headers,
            content=content,
        )

    def execute_request(self) -> Response:
        """Send the request and wait for the response.

        Raises:
            RequestFailedError: If an attached file cannot be read or the
                server cannot be reached.
        """
        return self._service.execute(self)

    async def execute_request_async(self) -> Response:
        return await self._service.execute_async(self)

    def _require_body(self, operation: str) -> bool:
        if self.body is not None:
            return True
        self._logger.warning(
            f"{operation} ignored: {self.method.value} requests do not carry a body"
        )
        return False

    def __repr__(self) -> str:
        return f"<HttpRequest {self.method.value} {self.url}>"
