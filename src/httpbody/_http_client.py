from logging import getLogger
from typing import Any, Optional, Union

from dotenv import load_dotenv

from ._config import Config
from ._request import HttpMethod, HttpRequest
from ._services.requests_service import RequestsService
from ._utils._logs import setup_logging

load_dotenv()


class HttpClient:
    """Entry point for creating and sending requests.

    Settings come from ``HTTPBODY_*`` environment variables (a ``.env`` file
    is loaded too) unless a ``Config`` or keyword overrides are passed.

    Examples:
        >>> with HttpClient(charset="ISO-8859-1") as client:
        ...     poster = client.create_post_request("https://example.com/form")
        ...     poster.add_parameter("name", "value")
        ...     response = poster.execute_request()
    """

    def __init__(
        self,
        *,
        config: Optional[Config] = None,
        debug: Optional[bool] = None,
        **overrides: Any,
    ) -> None:
        self._config = config or Config.from_env(debug=debug, **overrides)

        setup_logging(self._config.debug)
        log = getLogger("httpbody")

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump()}\n")

        self._requests = RequestsService(self._config)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def requests(self) -> RequestsService:
        return self._requests

    def create_request(self, method: Union[HttpMethod, str], url: str) -> HttpRequest:
        return self._requests.create_request(method, url)

    def create_get_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.GET, url)

    def create_post_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.POST, url)

    def create_put_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.PUT, url)

    def create_patch_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.PATCH, url)

    def create_delete_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.DELETE, url)

    def create_head_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.HEAD, url)

    def create_options_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.OPTIONS, url)

    def create_trace_request(self, url: str) -> HttpRequest:
        return self.create_request(HttpMethod.TRACE, url)

    def close(self) -> None:
        self._requests.close()

    async def aclose(self) -> None:
        await self._requests.aclose()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
