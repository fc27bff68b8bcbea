import asyncio
from typing import TYPE_CHECKING, Any, Optional, Union

import httpx

from .._config import Config
from .._request import HttpMethod, HttpRequest
from .._utils._errors import handle_errors
from ..models.entity import Entity
from ..models.response import Response
from ._base_service import BaseService

if TYPE_CHECKING:
    from .._utils._request_spec import RequestSpec


class RequestsService(BaseService):
    """Creates requests and sends them over the shared httpx clients.

    Every attempt builds the request entity anew and streams it to the
    server. Attempts are retried only when the connection could not be
    established.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_request(self, method: Union[HttpMethod, str], url: str) -> HttpRequest:
        return HttpRequest(
            method,
            url,
            self,
            charset=self._config.charset,
            sniff_bytes=self._config.sniff_bytes,
        )

    def execute(self, request: HttpRequest) -> Response:
        """Send ``request`` and return its response, whatever the status code.

        Raises:
            RequestFailedError: When a file cannot be read or the server cannot
                be reached after the configured retries.
        """
        with handle_errors(request.method.value, request.url):
            for attempt in self._retrying():
                with attempt:
                    response = self._send(request)
        return Response(response)

    async def execute_async(self, request: HttpRequest) -> Response:
        with handle_errors(request.method.value, request.url):
            async for attempt in self._retrying_async():
                with attempt:
                    response = await self._send_async(request)
        return Response(response)

    def _send(self, request: HttpRequest) -> httpx.Response:
        entity = request.build_entity()
        spec = request.to_spec(entity)
        self._log_request(spec, entity)

        content: Any = None
        if entity is not None:
            content = entity.iter_bytes() if entity.is_streaming else entity.read()

        return self._client.request(
            spec.method,
            spec.url,
            headers=spec.headers,
            content=content,
            timeout=spec.timeout or httpx.USE_CLIENT_DEFAULT,
        )

    async def _send_async(self, request: HttpRequest) -> httpx.Response:
        # sniffing reads from the attached files
        entity = await asyncio.to_thread(request.build_entity)
        spec = request.to_spec(entity)
        self._log_request(spec, entity)

        content: Any = None
        if entity is not None:
            content = entity.aiter_bytes() if entity.is_streaming else entity.read()

        return await self._client_async.request(
            spec.method,
            spec.url,
            headers=spec.headers,
            content=content,
            timeout=spec.timeout or httpx.USE_CLIENT_DEFAULT,
        )

    def _log_request(self, spec: "RequestSpec", entity: Optional[Entity]) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        if entity is not None:
            self._logger.debug(
                f"Body: {entity.kind.value} entity, {entity.content_type}, "
                f"length={entity.length}"
            )
        self._logger.debug(f"HEADERS: {spec.headers}")
