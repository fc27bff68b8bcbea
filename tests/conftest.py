import sys
from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner

# Ensure local source package (src/httpbody) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from httpbody._config import Config  # noqa: E402
from httpbody._http_client import HttpClient  # noqa: E402

MultipartParts = list[tuple[dict[str, str], bytes]]


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "HTTPBODY_CHARSET",
        "HTTPBODY_SNIFF_BYTES",
        "HTTPBODY_TIMEOUT",
        "HTTPBODY_MAX_RETRIES",
        "HTTPBODY_RETRY_BACKOFF",
        "HTTPBODY_FOLLOW_REDIRECTS",
        "HTTPBODY_USER_AGENT",
        "HTTPBODY_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://example.test"


@pytest.fixture
def config() -> Config:
    return Config(max_retries=2, retry_backoff=0)


@pytest.fixture
def client(config: Config) -> Generator[HttpClient, None, None]:
    with HttpClient(config=config) as http_client:
        yield http_client


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("hello world\n")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    # PNG signature under a name that says nothing about the content
    path = tmp_path / "image.dat"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 64)
    return path


@pytest.fixture
def parse_multipart() -> Callable[[str, bytes], MultipartParts]:
    """Split a multipart/form-data body into (headers, payload) pairs."""

    def parse(content_type: str, body: bytes) -> MultipartParts:
        boundary = content_type.split("boundary=", 1)[1]
        delimiter = f"--{boundary}".encode()
        assert body.endswith(delimiter + b"--\r\n")

        parts: MultipartParts = []
        for chunk in body.split(delimiter)[1:-1]:
            assert chunk.startswith(b"\r\n") and chunk.endswith(b"\r\n")
            head, _, payload = chunk[2:-2].partition(b"\r\n\r\n")
            headers = dict(
                line.split(": ", 1) for line in head.decode("utf-8").split("\r\n")
            )
            parts.append((headers, payload))
        return parts

    return parse
