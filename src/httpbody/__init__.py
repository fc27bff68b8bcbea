"""HTTP client whose requests work out their own body encoding.

Add parameters, a raw body and files to a request; when it is sent the body
becomes a URL-encoded form, a text entity, a single-file entity or a
multipart form depending on what was added.
"""

from ._config import Config
from ._http_client import HttpClient
from ._request import HttpMethod, HttpRequest
from ._request_body import RequestBodyBuilder
from ._utils._mime import sniff_mime_type
from ._version import __version__
from .models import (
    Entity,
    EntityConsumedError,
    EntityKind,
    FileAttachment,
    FileHandle,
    FileKind,
    HttpBodyError,
    LocalFile,
    MemoryFile,
    Parameter,
    RequestFailedError,
    Response,
)

__all__ = [
    "Config",
    "Entity",
    "EntityConsumedError",
    "EntityKind",
    "FileAttachment",
    "FileHandle",
    "FileKind",
    "HttpBodyError",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "LocalFile",
    "MemoryFile",
    "Parameter",
    "RequestBodyBuilder",
    "RequestFailedError",
    "Response",
    "__version__",
    "sniff_mime_type",
]
