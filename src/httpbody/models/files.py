import io
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .._utils.constants import DEFAULT_UPLOAD_NAME


class FileKind(str, Enum):
    """Kinds of file sources that can be attached to a request."""

    PATH = "path"
    MEMORY = "memory"


SUPPORTED_FILE_KINDS = frozenset({FileKind.PATH, FileKind.MEMORY})


class FileHandle(ABC):
    """Read access to the bytes of an attached file.

    A handle is opened once for sniffing (bounded prefix) and once more for
    each send attempt, so ``open_read`` must return a fresh stream every call.
    """

    kind: FileKind

    @abstractmethod
    def exists(self) -> bool: ...

    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def open_read(self) -> BinaryIO: ...

    @property
    @abstractmethod
    def default_name(self) -> str: ...

    @property
    def mime_type(self) -> Optional[str]:
        """Mime type reported by the source itself, if it knows one."""
        return None

    def read_prefix(self, size: int) -> bytes:
        """Read at most ``size`` leading bytes without keeping the stream open."""
        with self.open_read() as stream:
            return stream.read(size)


class LocalFile(FileHandle):
    """A file on the local filesystem, read from disk at send time."""

    kind = FileKind.PATH

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def length(self) -> int:
        return self.path.stat().st_size

    def open_read(self) -> BinaryIO:
        return open(self.path, "rb")

    @property
    def default_name(self) -> str:
        return self.path.name

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r})"


class MemoryFile(FileHandle):
    """File content held in memory, e.g. generated or downloaded earlier."""

    kind = FileKind.MEMORY

    def __init__(
        self,
        data: Union[bytes, bytearray],
        name: str = DEFAULT_UPLOAD_NAME,
        mime_type: Optional[str] = None,
    ) -> None:
        self._data = bytes(data)
        self._name = name
        self._mime_type = mime_type

    def exists(self) -> bool:
        return True

    def length(self) -> int:
        return len(self._data)

    def open_read(self) -> BinaryIO:
        return io.BytesIO(self._data)

    @property
    def default_name(self) -> str:
        return self._name

    @property
    def mime_type(self) -> Optional[str]:
        return self._mime_type

    def __repr__(self) -> str:
        return f"MemoryFile(name={self._name!r}, length={len(self._data)})"


FileSource = Union[FileHandle, str, os.PathLike, bytes, bytearray]


def as_file_handle(source: object) -> Optional[FileHandle]:
    """Resolve a caller supplied file source to a handle.

    Paths become ``LocalFile`` and raw bytes become ``MemoryFile``. Returns
    ``None`` for anything else, including handles of an unsupported kind.
    """
    if isinstance(source, FileHandle):
        return source if source.kind in SUPPORTED_FILE_KINDS else None
    if isinstance(source, (str, os.PathLike)):
        return LocalFile(source)
    if isinstance(source, (bytes, bytearray)):
        return MemoryFile(source)
    return None


@dataclass(frozen=True)
class Parameter:
    name: str
    value: Optional[str]


@dataclass(frozen=True)
class FileAttachment:
    """A file recorded on a request body together with how to post it."""

    field_name: Optional[str]
    file_name: str
    source: FileHandle
    mime_type: Optional[str] = None

    @property
    def part_name(self) -> str:
        """Form field name used for the multipart part."""
        return self.field_name if self.field_name else self.file_name
