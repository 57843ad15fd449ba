"""HAR serialization with key-based redaction.

This library provides tools for:
- Redacting sensitive keys in nested JSON-like data
- Turning headers and cookies into filtered HAR name/value lists
- Building HAR response objects whose JSON bodies are redacted

Core serialization needs only typing_extensions.
Optional features require: typer (cli).

Example usage:
    from har_redact import FilterPolicy, HttpRequest, HttpResponse, ResponseSerializer

    policy = FilterPolicy.create(reject=["Set-Cookie", "password"])
    request = HttpRequest(cookies={"session": "abc"})
    response = HttpResponse(
        status=200,
        headers={"Content-Type": "application/json"},
        content_type="application/json",
        content_length=22,
        body=b'{"password":"hunter2"}',
    )
    har_response = ResponseSerializer(request, response, policy).to_dict()
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from har_redact.filtering import (
    REDACTED,
    FilterPolicy,
    PolicyLoadError,
    filter_value,
    load_filter_policy,
)
from har_redact.har import (
    HarCollection,
    HttpRequest,
    HttpResponse,
    RequestInfo,
    ResponseInfo,
    ResponseSerializer,
)

__all__ = [
    "__version__",
    "REDACTED",
    "FilterPolicy",
    "PolicyLoadError",
    "filter_value",
    "load_filter_policy",
    "HarCollection",
    "HttpRequest",
    "HttpResponse",
    "RequestInfo",
    "ResponseInfo",
    "ResponseSerializer",
]
