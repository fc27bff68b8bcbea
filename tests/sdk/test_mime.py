import pytest

from httpbody._utils._mime import mime_type_of, sniff_mime_type


class TestSniffMimeType:
    @pytest.mark.parametrize(
        "prefix,expected",
        [
            (b"%PDF-1.4\n%\xe2\xe3", "application/pdf"),
            (b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", "image/png"),
            (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
            (b"GIF89a\x01\x00", "image/gif"),
            (b"PK\x03\x04\x14\x00", "application/zip"),
            (b"\x1f\x8b\x08\x00", "application/gzip"),
            (b"RIFF\x24\x00\x00\x00WEBPVP8 ", "image/webp"),
            (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/wav"),
        ],
    )
    def test_magic_numbers(self, prefix: bytes, expected: str):
        assert sniff_mime_type(prefix, None) == expected

    def test_content_wins_over_file_name(self):
        assert sniff_mime_type(b"%PDF-1.7", "report.txt") == "application/pdf"

    def test_file_name_extension(self):
        assert sniff_mime_type(b"a,b,c\n1,2,3\n", "table.csv") == "text/csv"
        assert sniff_mime_type(b"", "page.html") == "text/html"

    def test_file_name_wins_over_text_heuristics(self):
        assert sniff_mime_type(b'{"a": 1}', "notes.txt") == "text/plain"

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            (b'<?xml version="1.0"?><a/>', "application/xml"),
            (b"\xef\xbb\xbf  <?xml version", "application/xml"),
            (b"<!DOCTYPE html><html>", "text/html"),
            (b"\n  <HTML><body>", "text/html"),
            (b'  {"key": "value"}', "application/json"),
            (b"[1, 2, 3]", "application/json"),
        ],
    )
    def test_text_heuristics(self, prefix: bytes, expected: str):
        assert sniff_mime_type(prefix, "upload") == expected

    @pytest.mark.parametrize("file_name", [None, "", "upload", "data.qqq"])
    def test_no_signal(self, file_name):
        assert sniff_mime_type(b"\x00\x01\x02 plain bytes", file_name) is None

    def test_empty_prefix_without_name(self):
        assert sniff_mime_type(b"", None) is None


def test_mime_type_of():
    assert mime_type_of("text/xml; charset=UTF-8") == "text/xml"
    assert mime_type_of(" application/json ") == "application/json"
