import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from .constants import CHUNK_SIZE, MULTIPART_FORM_MIME_TYPE

if TYPE_CHECKING:
    from ..models.files import FileHandle

_FORM_PARAM_ESCAPES = {'"': "%22", "\r": "%0D", "\n": "%0A"}


def make_boundary() -> str:
    return uuid.uuid4().hex


def format_form_param(name: str, value: str) -> str:
    """Render ``name="value"`` the way browsers escape form-data parameters."""
    escaped = "".join(_FORM_PARAM_ESCAPES.get(c, c) for c in value)
    return f'{name}="{escaped}"'


@dataclass
class _Part:
    header: bytes
    data: Optional[bytes] = None
    source: Optional["FileHandle"] = None

    def length(self) -> int:
        if self.source is not None:
            return len(self.header) + self.source.length()
        return len(self.header) + len(self.data or b"")


class MultipartWriter:
    """Streams a ``multipart/form-data`` body in browser-compatible mode.

    Parts carry only ``Content-Disposition`` and, for files, ``Content-Type``.
    Header values and text parts are encoded with ``charset``. File parts are
    read from their handle while iterating, never buffered whole.
    """

    def __init__(self, charset: str, boundary: Optional[str] = None) -> None:
        self.charset = charset
        self._header_charset = _ascii_compatible(charset)
        self.boundary = boundary or make_boundary()
        self._parts: list[_Part] = []

    @property
    def content_type(self) -> str:
        return f"{MULTIPART_FORM_MIME_TYPE}; boundary={self.boundary}"

    @property
    def part_count(self) -> int:
        return len(self._parts)

    def add_text(self, name: str, value: Optional[str]) -> None:
        header = self._part_header(
            f"Content-Disposition: form-data; {format_form_param('name', name)}"
        )
        self._parts.append(
            _Part(header=header, data=(value or "").encode(self.charset, "replace"))
        )

    def add_file(
        self, name: str, file_name: str, source: "FileHandle", content_type: str
    ) -> None:
        header = self._part_header(
            "Content-Disposition: form-data; "
            f"{format_form_param('name', name)}; "
            f"{format_form_param('filename', file_name)}",
            f"Content-Type: {content_type}",
        )
        self._parts.append(_Part(header=header, source=source))

    def length(self) -> int:
        # each part is followed by CRLF, the body ends with the closing delimiter
        return sum(part.length() + 2 for part in self._parts) + len(
            self._closing_delimiter()
        )

    def iter_bytes(self) -> Iterator[bytes]:
        for part in self._parts:
            yield part.header
            if part.source is not None:
                with part.source.open_read() as stream:
                    while chunk := stream.read(CHUNK_SIZE):
                        yield chunk
            elif part.data:
                yield part.data
            yield b"\r\n"
        yield self._closing_delimiter()

    def _part_header(self, *lines: str) -> bytes:
        text = f"--{self.boundary}\r\n" + "".join(f"{line}\r\n" for line in lines)
        return (text + "\r\n").encode(self._header_charset, "replace")

    def _closing_delimiter(self) -> bytes:
        return f"--{self.boundary}--\r\n".encode("ascii")


def _ascii_compatible(charset: str) -> str:
    # part headers must stay readable as ASCII next to the boundary lines
    try:
        if "-\r\n:;=\"".encode(charset) == b"-\r\n:;=\"":
            return charset
    except (LookupError, UnicodeError):
        pass
    return "utf-8"
