import httpx

from httpbody.models import Response


def make_response(**kwargs) -> Response:
    request = httpx.Request("OPTIONS", "https://example.test/resource")
    return Response(httpx.Response(request=request, **kwargs))


class TestResponse:
    def test_status(self):
        response = make_response(status_code=404)

        assert response.status_code == 404
        assert response.status_reason_phrase == "Not Found"

    def test_body_and_charset(self):
        response = make_response(
            status_code=200,
            headers={"Content-Type": "text/plain; charset=ISO-8859-1"},
            content="café".encode("latin-1"),
        )

        assert response.get_charset() == "ISO-8859-1"
        assert response.get_response_body() == "café"
        assert response.get_media_data() == "café".encode("latin-1")

    def test_charset_keeps_server_spelling(self):
        response = make_response(
            status_code=200,
            headers={"Content-Type": 'text/html; Charset="windows-1252"'},
            content=b"abc",
        )

        assert response.get_charset() == "windows-1252"

    def test_no_charset(self):
        response = make_response(
            status_code=200, headers={"Content-Type": "image/png"}, content=b"\x89PNG"
        )

        assert response.get_charset() is None
        assert response.get_media_data() == b"\x89PNG"

    def test_undecodable_body(self):
        response = make_response(
            status_code=200,
            headers={"Content-Type": "text/plain; charset=no-such-charset"},
            content=b"abc",
        )

        # httpx falls back to utf-8 for unknown charsets
        assert response.get_response_body() == "abc"

    def test_repeated_headers(self):
        response = make_response(
            status_code=200,
            headers=[("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("X-Id", "7")],
        )

        assert response.get_response_headers() == {
            "set-cookie": ["a=1", "b=2"],
            "x-id": ["7"],
        }
        assert response.get_response_headers("SET-COOKIE") == {
            "set-cookie": ["a=1", "b=2"]
        }
        assert response.get_response_headers("missing") == {}

    def test_allowed_methods(self):
        response = make_response(
            status_code=200,
            headers=[("Allow", "GET, post,OPTIONS"), ("Allow", "GET, PUT")],
        )

        assert response.get_allowed_methods() == ["GET", "POST", "OPTIONS", "PUT"]

    def test_no_allowed_methods(self):
        assert make_response(status_code=204).get_allowed_methods() == []
