"""Tests for request/response accessors."""

from __future__ import annotations

import pytest

from har_redact.har.accessors import (
    DEFAULT_HTTP_VERSION,
    HttpRequest,
    HttpResponse,
    RequestInfo,
    ResponseInfo,
    header_pairs,
)


class TestProtocols:
    """Tests for protocol conformance."""

    def test_http_request_is_request_info(self) -> None:
        """Test HttpRequest satisfies RequestInfo."""
        assert isinstance(HttpRequest(), RequestInfo)

    def test_http_response_is_response_info(self) -> None:
        """Test HttpResponse satisfies ResponseInfo."""
        assert isinstance(HttpResponse(), ResponseInfo)


class TestHeaderPairs:
    """Tests for header normalization."""

    def test_mapping(self) -> None:
        """Test mapping headers become pairs."""
        assert header_pairs({"A": "1", "B": "2"}) == [("A", "1"), ("B", "2")]

    def test_pairs(self) -> None:
        """Test pair sequences are kept, including duplicates."""
        pairs = [("A", "1"), ("A", "2")]
        assert header_pairs(pairs) == pairs


class TestHttpRequestFromWsgi:
    """Tests for WSGI request adaptation."""

    def test_protocol_and_cookies(self) -> None:
        """Test SERVER_PROTOCOL and HTTP_COOKIE are read."""
        environ = {"SERVER_PROTOCOL": "HTTP/1.0", "HTTP_COOKIE": "session=abc; theme=dark"}

        request = HttpRequest.from_wsgi_environ(environ)

        assert request.http_version == "HTTP/1.0"
        assert dict(request.cookies) == {"session": "abc", "theme": "dark"}

    def test_defaults(self) -> None:
        """Test missing environ keys fall back to defaults."""
        request = HttpRequest.from_wsgi_environ({})
        assert request.http_version == DEFAULT_HTTP_VERSION
        assert dict(request.cookies) == {}


class TestHttpResponseFromWsgi:
    """Tests for WSGI response adaptation."""

    def test_values_from_headers(self) -> None:
        """Test content type, length and location come from headers."""
        headers = [
            ("content-type", "application/json"),
            ("Content-Length", "17"),
            ("LOCATION", "/next"),
        ]

        response = HttpResponse.from_wsgi("302 Found", headers, [b"{}"])

        assert response.status == 302
        assert response.content_type == "application/json"
        assert response.content_length == 17
        assert response.location == "/next"
        assert response.headers == headers

    def test_missing_headers(self) -> None:
        """Test absent headers become None."""
        response = HttpResponse.from_wsgi("204 No Content", [])
        assert response.status == 204
        assert response.content_type is None
        assert response.content_length is None
        assert response.location is None
        assert response.body is None

    def test_invalid_content_length(self) -> None:
        """Test an unparsable Content-Length is treated as absent."""
        response = HttpResponse.from_wsgi("200 OK", [("Content-Length", "lots")])
        assert response.content_length is None


class TestFromDict:
    """Tests for the JSON exchange format."""

    def test_request_from_dict(self) -> None:
        """Test camelCase request fields."""
        request = HttpRequest.from_dict({"httpVersion": "HTTP/2", "cookies": {"a": "1"}})
        assert request.http_version == "HTTP/2"
        assert request.cookies == {"a": "1"}

    def test_request_defaults(self) -> None:
        """Test empty request object."""
        request = HttpRequest.from_dict({})
        assert request.http_version == DEFAULT_HTTP_VERSION
        assert request.cookies == {}

    def test_response_from_dict(self) -> None:
        """Test camelCase response fields."""
        response = HttpResponse.from_dict(
            {
                "status": 201,
                "headers": {"X-Id": "1"},
                "contentType": "application/json",
                "contentLength": 2,
                "location": "/items/1",
                "body": "{}",
            }
        )
        assert response.status == 201
        assert response.headers == {"X-Id": "1"}
        assert response.content_type == "application/json"
        assert response.content_length == 2
        assert response.location == "/items/1"
        assert response.body == "{}"

    def test_response_har_style_headers(self) -> None:
        """Test HAR-style and pair-style header lists."""
        har_style = HttpResponse.from_dict({"headers": [{"name": "A", "value": "1"}]})
        pair_style = HttpResponse.from_dict({"headers": [["A", "1"]]})
        assert har_style.headers == [("A", "1")]
        assert pair_style.headers == [("A", "1")]

    # fmt: off
    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            ({"b": "é", "a": 1}, '{"b":"é","a":1}'),
            ([1, 2],             "[1,2]"),
            (42,                 "42"),
            (True,               "true"),
            ("raw text",         "raw text"),
            (None,               None),
        ],
        ids=["object", "array", "number", "boolean", "string", "missing"],
    )
    # fmt: on
    def test_response_body_as_json_text(self, body, expected) -> None:
        """Test non-string bodies are stored as compact JSON text."""
        response = HttpResponse.from_dict({"body": body})
        assert response.body == expected
