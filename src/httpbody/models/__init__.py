from .entity import Entity, EntityKind
from .errors import EntityConsumedError, HttpBodyError, RequestFailedError
from .files import (
    SUPPORTED_FILE_KINDS,
    FileAttachment,
    FileHandle,
    FileKind,
    FileSource,
    LocalFile,
    MemoryFile,
    Parameter,
    as_file_handle,
)
from .response import Response

__all__ = [
    "Entity",
    "EntityConsumedError",
    "EntityKind",
    "FileAttachment",
    "FileHandle",
    "FileKind",
    "FileSource",
    "HttpBodyError",
    "LocalFile",
    "MemoryFile",
    "Parameter",
    "RequestFailedError",
    "Response",
    "SUPPORTED_FILE_KINDS",
    "as_file_handle",
]
