import email.message
import email.utils
from logging import getLogger
from typing import Optional

import httpx

from .._utils.constants import HEADER_ALLOW, HEADER_CONTENT_TYPE

logger = getLogger("httpbody")


class Response:
    """Result of an executed request.

    Error statuses are returned like any other response; only failures to
    complete the exchange raise ``RequestFailedError``.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._body: Optional[str] = None

    @property
    def raw(self) -> httpx.Response:
        """The underlying ``httpx.Response``."""
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def status_reason_phrase(self) -> str:
        return self._response.reason_phrase

    def get_response_body(self) -> str:
        """Body decoded as text using the response charset.

        Returns an empty string when the body cannot be decoded.
        """
        if self._body is None:
            try:
                self._body = self._response.text
            except (UnicodeDecodeError, LookupError) as e:
                logger.error(
                    f"Error when getting response body for: {self._response.request.url}: {e}"
                )
                self._body = ""
        return self._body

    def get_media_data(self) -> bytes:
        return self._response.content

    def get_response_headers(
        self, header_name: Optional[str] = None
    ) -> dict[str, list[str]]:
        """Response headers, every value of a repeated header kept in order.

        Args:
            header_name: Only return this header (case-insensitive).
        """
        headers: dict[str, list[str]] = {}
        wanted = header_name.lower() if header_name else None
        for name, value in self._response.headers.multi_items():
            if wanted is not None and name.lower() != wanted:
                continue
            headers.setdefault(name, []).append(value)
        return headers

    def get_charset(self) -> Optional[str]:
        """Content-Type ``charset`` parameter exactly as the server sent it."""
        content_type = self._response.headers.get(HEADER_CONTENT_TYPE)
        if not content_type:
            return None
        message = email.message.Message()
        message["content-type"] = content_type
        charset = message.get_param("charset")
        if charset is None:
            return None
        return str(email.utils.collapse_rfc2231_value(charset)).strip() or None

    def get_allowed_methods(self) -> list[str]:
        """Methods listed in the ``Allow`` header, e.g. from an OPTIONS request."""
        methods: list[str] = []
        for value in self._response.headers.get_list(HEADER_ALLOW):
            for element in value.split(","):
                method = element.strip().upper()
                if method and method not in methods:
                    methods.append(method)
        return methods

    def __repr__(self) -> str:
        return f"<Response [{self.status_code} {self.status_reason_phrase}]>"
