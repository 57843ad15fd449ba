"""Response body helpers: JSON MIME detection and one-shot body reading."""

from __future__ import annotations

from typing import Any


def is_json_mime_type(content_type: str | None) -> bool:
    """Check if a content type carries JSON.

    Substring match so that vendor types such as
    ``application/vnd.api+json`` are recognized. Case-sensitive.

    Example:
        >>> is_json_mime_type("application/vnd.api+json; charset=utf-8")
        True
        >>> is_json_mime_type("text/html")
        False
    """
    return content_type is not None and "json" in content_type


def _to_bytes(chunk: Any) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    return bytes(chunk)


def read_body(body: Any) -> tuple[str, int] | None:
    """Read a response body to completion.

    Args:
        body: None, bytes, str, a file-like object with ``read()``, or an
            iterable of bytes/str chunks (WSGI style). Read exactly once.

    Returns:
        Tuple of (decoded text, byte length), or None if there is no body.
        Bytes are decoded as UTF-8, invalid sequences replaced.
    """
    if body is None:
        return None
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, str):
        return body, len(body.encode("utf-8"))
    if isinstance(body, (bytes, bytearray, memoryview)):
        raw = bytes(body)
    else:
        raw = b"".join(_to_bytes(chunk) for chunk in body)
    return raw.decode("utf-8", errors="replace"), len(raw)
