"""Request and response accessors read by the HAR serializers.

The serializers only depend on the RequestInfo and ResponseInfo protocols, so
any HTTP framework can be plugged in by adapting its request/response objects
at the boundary. HttpRequest and HttpResponse are plain implementations with
constructors for WSGI and for the JSON exchange format used by the CLI.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from http.cookies import SimpleCookie
from typing import Any, Protocol, Union, runtime_checkable

# Headers may be a mapping or a sequence of (name, value) pairs so that
# repeated headers such as Set-Cookie are not collapsed.
HeaderSource = Union[Mapping[str, str], Iterable[tuple[str, str]]]

DEFAULT_HTTP_VERSION = "HTTP/1.1"


@runtime_checkable
class RequestInfo(Protocol):
    """Request-side values needed for a HAR response entry."""

    @property
    def http_version(self) -> str: ...

    @property
    def cookies(self) -> Mapping[str, str]: ...


@runtime_checkable
class ResponseInfo(Protocol):
    """Response-side values needed for a HAR response entry.

    ``body`` is read exactly once and may be None, bytes, str, a file-like
    object, or an iterable of bytes/str chunks.
    """

    @property
    def status(self) -> int: ...

    @property
    def headers(self) -> HeaderSource: ...

    @property
    def content_type(self) -> str | None: ...

    @property
    def content_length(self) -> int | None: ...

    @property
    def location(self) -> str | None: ...

    @property
    def body(self) -> Any: ...


def header_pairs(headers: HeaderSource) -> list[tuple[str, str]]:
    """Normalize a header source to a list of (name, value) pairs."""
    if isinstance(headers, Mapping):
        return list(headers.items())
    return [(name, value) for name, value in headers]


def _find_header(headers: list[tuple[str, str]], name: str) -> str | None:
    """Return the first header value matching name case-insensitively."""
    name_lower = name.lower()
    for header_name, value in headers:
        if header_name.lower() == name_lower:
            return value
    return None


def _parse_content_length(value: Any) -> int | None:
    """Parse a Content-Length value, returning None if absent or invalid."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class HttpRequest:
    """Minimal request accessor."""

    http_version: str = DEFAULT_HTTP_VERSION
    cookies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_wsgi_environ(cls, environ: Mapping[str, Any]) -> HttpRequest:
        """Build a request accessor from a WSGI environ.

        Args:
            environ: WSGI environment dict

        Returns:
            HttpRequest with SERVER_PROTOCOL and parsed HTTP_COOKIE

        Example:
            >>> req = HttpRequest.from_wsgi_environ(
            ...     {"SERVER_PROTOCOL": "HTTP/1.0", "HTTP_COOKIE": "a=1; b=2"}
            ... )
            >>> req.http_version, dict(req.cookies)
            ('HTTP/1.0', {'a': '1', 'b': '2'})
        """
        jar: SimpleCookie = SimpleCookie()
        raw_cookie = environ.get("HTTP_COOKIE")
        if raw_cookie:
            jar.load(raw_cookie)
        return cls(
            http_version=environ.get("SERVER_PROTOCOL") or DEFAULT_HTTP_VERSION,
            cookies={name: morsel.value for name, morsel in jar.items()},
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HttpRequest:
        """Build a request accessor from ``{"httpVersion", "cookies"}``."""
        return cls(
            http_version=data.get("httpVersion", DEFAULT_HTTP_VERSION),
            cookies=dict(data.get("cookies") or {}),
        )


@dataclass(frozen=True)
class HttpResponse:
    """Minimal response accessor."""

    status: int = 200
    headers: HeaderSource = field(default_factory=dict)
    content_type: str | None = None
    content_length: int | None = None
    location: str | None = None
    body: Any = None

    @classmethod
    def from_wsgi(cls, status_line: str, headers: HeaderSource, body: Any = None) -> HttpResponse:
        """Build a response accessor from WSGI start_response arguments.

        Args:
            status_line: WSGI status string, e.g. "200 OK"
            headers: WSGI response headers (list of pairs)
            body: Buffered response body (bytes, chunks, or None)

        Returns:
            HttpResponse with content type, length and location taken
            from the headers
        """
        pairs = header_pairs(headers)
        return cls(
            status=int(status_line.split(" ", 1)[0]),
            headers=pairs,
            content_type=_find_header(pairs, "Content-Type"),
            content_length=_parse_content_length(_find_header(pairs, "Content-Length")),
            location=_find_header(pairs, "Location"),
            body=body,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HttpResponse:
        """Build a response accessor from the camelCase exchange format.

        Headers may be an object, a list of ``[name, value]`` pairs, or a
        HAR-style list of ``{"name", "value"}`` objects. A body that is not a
        string (object, array, number, boolean) is stored as compact JSON text.
        """
        body = data.get("body")
        if body is not None and not isinstance(body, str):
            body = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        raw_headers = data.get("headers") or {}
        if isinstance(raw_headers, Mapping):
            headers: HeaderSource = dict(raw_headers)
        else:
            headers = [
                (item["name"], item["value"]) if isinstance(item, Mapping) else (item[0], item[1])
                for item in raw_headers
            ]
        return cls(
            status=int(data.get("status", 200)),
            headers=headers,
            content_type=data.get("contentType"),
            content_length=_parse_content_length(data.get("contentLength")),
            location=data.get("location"),
            body=body,
        )
