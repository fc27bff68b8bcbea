from logging import getLogger
from typing import Any, Optional

from httpx import (
    AsyncClient,
    Client,
    ConnectError,
    ConnectTimeout,
    Headers,
)
from tenacity import (
    AsyncRetrying,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_USER_AGENT


def is_retryable_exception(exception: BaseException) -> bool:
    # only failures where the server never saw the request
    return isinstance(exception, (ConnectError, ConnectTimeout))


class BaseService:
    def __init__(self, config: Config) -> None:
        self._logger = getLogger("httpbody")
        self._config = config

        self._client_kwargs: dict[str, Any] = {
            **get_httpx_client_kwargs(self._config),  # SSL, proxy, timeout, redirects
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**self._client_kwargs)
        # created on first async send
        self._async_client: Optional[AsyncClient] = None

        self._logger.debug(f"HEADERS: {self.default_headers}")

        super().__init__()

    @property
    def _client_async(self) -> AsyncClient:
        if self._async_client is None:
            self._async_client = AsyncClient(**self._client_kwargs)
        return self._async_client

    @property
    def config(self) -> Config:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_USER_AGENT: self._config.user_agent,
            **self.custom_headers,
        }

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}

    def _retrying(self, **kwargs: Any) -> Retrying:
        return Retrying(**self._retry_kwargs(), **kwargs)

    def _retrying_async(self, **kwargs: Any) -> AsyncRetrying:
        return AsyncRetrying(**self._retry_kwargs(), **kwargs)

    def _retry_kwargs(self) -> dict[str, Any]:
        return {
            "retry": retry_if_exception(is_retryable_exception),
            "stop": stop_after_attempt(self._config.max_retries + 1),
            "wait": wait_exponential(
                multiplier=self._config.retry_backoff, min=0, max=10
            ),
            "before_sleep": self._log_retry,
            "reraise": True,
        }

    def _log_retry(self, retry_state: Any) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        self._logger.warning(
            f"Connection failed ({exception!r}). Retrying "
            f"(attempt {retry_state.attempt_number}/{self._config.max_retries})"
        )

    def close(self) -> None:
        """Close the sync client.

        The async client, once used, holds connections bound to an event loop
        and has to be released with ``aclose``.
        """
        self._client.close()
        if self._async_client is not None and not self._async_client.is_closed:
            self._logger.warning(
                "Async client left open by close(); use aclose() after async sends"
            )

    async def aclose(self) -> None:
        """Close both clients."""
        self._client.close()
        if self._async_client is not None:
            await self._async_client.aclose()
