from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass
class RequestSpec:
    """Encapsulates the configuration for making an HTTP request.

    This class contains everything the transport needs to send one attempt:
    the HTTP method, the URL, the headers in the order they were added, and
    the body content produced from the request's entity.
    """

    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: Optional[Any] = None
    timeout: Optional[Union[int, float]] = None
