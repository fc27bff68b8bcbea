import mimetypes
from typing import Optional

# Signatures checked against the start of the content, most specific first.
_MAGIC_PREFIXES: tuple[tuple[bytes, str], ...] = (
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
    (b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
    (b"Rar!\x1a\x07", "application/vnd.rar"),
    (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", "application/x-ole-storage"),
    (b"{\\rtf", "application/rtf"),
    (b"OggS", "audio/ogg"),
    (b"fLaC", "audio/flac"),
    (b"ID3", "audio/mpeg"),
    (b"\x1aE\xdf\xa3", "video/webm"),
    (b"\x7fELF", "application/x-elf"),
)

_UTF8_BOM = b"\xef\xbb\xbf"


def sniff_mime_type(prefix: bytes, file_name: Optional[str] = None) -> Optional[str]:
    """Best-guess mime type for content starting with ``prefix``.

    Byte signatures win over the file name, the file name's extension wins
    over the text heuristics. Returns ``None`` when nothing matches.
    """
    magic = _magic_mime(prefix)
    if magic is not None:
        return magic

    if file_name:
        guessed, _encoding = mimetypes.guess_type(file_name, strict=False)
        if guessed is not None:
            return guessed

    return _text_mime(prefix)


def _magic_mime(prefix: bytes) -> Optional[str]:
    for signature, mime in _MAGIC_PREFIXES:
        if prefix.startswith(signature):
            return mime
    # RIFF containers carry their format at offset 8
    if prefix.startswith(b"RIFF") and len(prefix) >= 12:
        fourcc = prefix[8:12]
        if fourcc == b"WEBP":
            return "image/webp"
        if fourcc == b"WAVE":
            return "audio/wav"
        if fourcc == b"AVI ":
            return "video/x-msvideo"
    if prefix[4:8] == b"ftyp":
        return "video/mp4"
    return None


def _text_mime(prefix: bytes) -> Optional[str]:
    p = prefix[len(_UTF8_BOM) :] if prefix.startswith(_UTF8_BOM) else prefix
    p = p.lstrip()
    if not p:
        return None
    lowered = p[:15].lower()
    if lowered.startswith(b"<?xml"):
        return "application/xml"
    if lowered.startswith((b"<!doctype html", b"<html")):
        return "text/html"
    if p.startswith((b"{", b"[")):
        return "application/json"
    return None


def mime_type_of(content_type: str) -> str:
    """Strip parameters from a content type: ``text/xml; charset=x`` -> ``text/xml``."""
    return content_type.split(";", 1)[0].strip()
