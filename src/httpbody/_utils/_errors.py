from contextlib import contextmanager
from typing import Generator, Optional

import httpx

from ..models.errors import RequestFailedError


@contextmanager
def handle_errors(
    method: Optional[str] = None, url: Optional[str] = None
) -> Generator[None, None, None]:
    """Context manager turning failed request attempts into RequestFailedError.

    This context manager wraps a send and converts the failures that prevent
    a response from being received into ``RequestFailedError``: I/O errors
    while reading attached files and transport errors raised by httpx.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        RequestFailedError: For file read failures and transport errors.
    """
    try:
        yield
    except OSError as e:
        raise RequestFailedError(
            f"could not read request content: {e}", method=method, url=url
        ) from e
    except httpx.TransportError as e:
        raise RequestFailedError(
            f"{type(e).__name__}: {e}", method=method, url=url
        ) from e
