import codecs
from logging import getLogger
from typing import Iterator, Optional
from urllib.parse import quote_plus

from ._utils._mime import sniff_mime_type
from ._utils._multipart import MultipartWriter
from ._utils.constants import (
    CHUNK_SIZE,
    DEFAULT_BINARY_MIME_TYPE,
    DEFAULT_CHARSET,
    DEFAULT_TEXT_MIME_TYPE,
    FORM_URLENCODED_MIME_TYPE,
    SNIFF_PREFIX_BYTES,
)
from .models.entity import Entity, EntityKind
from .models.files import FileAttachment, FileHandle, Parameter, as_file_handle


class RequestBodyBuilder:
    """Accumulates the body of one request and picks its wire encoding.

    Nothing has to be declared up front. ``build_entity`` looks at what was
    added and produces:

    - a URL-encoded form when there are parameters and no files,
    - a text entity when only a raw body was set,
    - a single-file entity for exactly one file and no parameters,
    - a multipart form for anything else with files in it.

    Mutators never raise for bad input; they return ``False`` or ignore it.

    Examples:
        >>> body = RequestBodyBuilder()
        >>> body.add_parameter("status", "hello")
        True
        >>> body.add_file("attachment", None, "/tmp/report.pdf")
        True
        >>> entity = body.build_entity()  # multipart: file part, then text part
    """

    def __init__(
        self,
        charset: str = DEFAULT_CHARSET,
        *,
        sniff_bytes: int = SNIFF_PREFIX_BYTES,
    ) -> None:
        self._logger = getLogger("httpbody")
        self._charset = charset
        self._sniff_bytes = sniff_bytes
        self._body_content: Optional[str] = None
        self._body_mime_type = DEFAULT_TEXT_MIME_TYPE
        self._parameters: Optional[list[Parameter]] = None
        self._files: list[FileAttachment] = []

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def body_content(self) -> Optional[str]:
        return self._body_content

    @property
    def body_mime_type(self) -> str:
        return self._body_mime_type

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(self._parameters or ())

    @property
    def files(self) -> tuple[FileAttachment, ...]:
        return tuple(self._files)

    def set_body_content(
        self, content: Optional[str], mime_type: Optional[str] = None
    ) -> None:
        """Set the raw body, and its mime type when one is given."""
        self._body_content = content
        if mime_type:
            self._body_mime_type = mime_type

    def set_charset(self, charset: Optional[str]) -> bool:
        """Charset for form encoding, the raw body and multipart text parts.

        ``None`` restores the default (UTF-8). An unknown charset is rejected
        and the current one kept.
        """
        if charset is None:
            self._charset = DEFAULT_CHARSET
            return True
        try:
            codecs.lookup(charset)
        except LookupError:
            self._logger.warning(f"Ignoring unknown charset: {charset}")
            return False
        self._charset = charset
        return True

    def add_file(
        self,
        field_name: Optional[str],
        file_name: Optional[str],
        source: object,
        mime_type: Optional[str] = None,
    ) -> bool:
        """Attach a file to the body.

        A single file without parameters is posted as the whole body; more
        files, or a file together with parameters, produce a multipart form.

        Args:
            field_name: Form field of the multipart part.
            file_name: Name sent for the file; defaults to the source's own name.
            source: A path, raw bytes, or a ``FileHandle``.
            mime_type: Forces the content type instead of detecting it.

        Returns:
            bool: ``False`` when the file does not exist or the source type is
            not supported; nothing is recorded in that case.
        """
        handle = as_file_handle(source)
        if handle is None:
            self._logger.debug(f"Unsupported file source: {type(source).__name__}")
            return False
        if not handle.exists():
            return False

        self._files.append(
            FileAttachment(
                field_name=field_name,
                file_name=file_name or handle.default_name,
                source=handle,
                mime_type=mime_type,
            )
        )
        return True

    def add_parameter(self, name: Optional[str], value: Optional[str]) -> bool:
        """Add a form parameter; a ``None`` name sets ``value`` as the raw body."""
        if name is not None:
            if self._parameters is None:
                self._parameters = []
            self._parameters.append(Parameter(name=name, value=value))
            return True

        if value is not None:
            self.set_body_content(value)
            return True

        return False

    def build_entity(self) -> Optional[Entity]:
        """Finalize the body for sending.

        A raw body is consumed by this call; parameters and files are kept, so
        building again yields an equivalent entity for those.

        Raises:
            OSError: If an attached file cannot be read while sniffing its type.
        """
        if not self._files:
            if self._parameters:
                return self._form_entity(self._parameters)
            if self._body_content:
                entity = self._text_entity(self._body_content)
                self._body_content = None
                return entity
            return None

        if len(self._files) == 1 and not self._parameters:
            return self._file_entity(self._files[0])

        return self._multipart_entity()

    def _form_entity(self, parameters: list[Parameter]) -> Entity:
        def encode(text: str) -> str:
            # unencodable characters are sent as "?"
            return quote_plus(text, encoding=self._charset, errors="replace")

        pairs = []
        for parameter in parameters:
            name = encode(parameter.name)
            if parameter.value is None:
                pairs.append(name)
            else:
                pairs.append(f"{name}={encode(parameter.value)}")
        return Entity(
            EntityKind.FORM,
            f"{FORM_URLENCODED_MIME_TYPE}; charset={self._charset}",
            charset=self._charset,
            content="&".join(pairs).encode("ascii"),
        )

    def _text_entity(self, content: str) -> Entity:
        return Entity(
            EntityKind.TEXT,
            f"{self._body_mime_type}; charset={self._charset}",
            charset=self._charset,
            content=content.encode(self._charset, "replace"),
        )

    def _file_entity(self, attachment: FileAttachment) -> Optional[Entity]:
        if not self._is_available(attachment):
            return None
        source = attachment.source
        return Entity(
            EntityKind.FILE,
            self._resolve_content_type(attachment),
            length=source.length(),
            stream=lambda: _read_chunks(source),
        )

    def _multipart_entity(self) -> Entity:
        writer = MultipartWriter(self._charset)
        for attachment in self._files:
            if not self._is_available(attachment):
                continue
            writer.add_file(
                attachment.part_name,
                attachment.file_name,
                attachment.source,
                self._resolve_content_type(attachment),
            )
        for parameter in self._parameters or ():
            writer.add_text(parameter.name, parameter.value)

        return Entity(
            EntityKind.MULTIPART,
            writer.content_type,
            charset=self._charset,
            length=writer.length(),
            stream=writer.iter_bytes,
        )

    def _is_available(self, attachment: FileAttachment) -> bool:
        if attachment.source.exists():
            return True
        self._logger.error(
            f"Could not add file to request, it is no longer available: {attachment.source!r}"
        )
        return False

    def _resolve_content_type(self, attachment: FileAttachment) -> str:
        if attachment.mime_type:
            return attachment.mime_type
        if attachment.source.mime_type:
            return attachment.source.mime_type
        prefix = attachment.source.read_prefix(self._sniff_bytes)
        sniffed = sniff_mime_type(prefix, attachment.file_name)
        return sniffed or DEFAULT_BINARY_MIME_TYPE


def _read_chunks(source: FileHandle) -> Iterator[bytes]:
    with source.open_read() as stream:
        while chunk := stream.read(CHUNK_SIZE):
            yield chunk
