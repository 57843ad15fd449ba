"""HAR serialization of HTTP exchanges.

Exports:
    - ResponseSerializer: build a redacted HAR response object
    - HarCollection: filtered headers/cookies as dict or name/value list
    - HttpRequest, HttpResponse: accessor implementations (WSGI, dict)
    - RequestInfo, ResponseInfo: accessor protocols
"""

from __future__ import annotations

from har_redact.har.accessors import (
    HeaderSource,
    HttpRequest,
    HttpResponse,
    RequestInfo,
    ResponseInfo,
)
from har_redact.har.collection import HarCollection
from har_redact.har.content import is_json_mime_type, read_body
from har_redact.har.response import HEADERS_SIZE_UNKNOWN, ResponseSerializer, status_text
from har_redact.har.types import HarContent, HarCookie, HarHeader, HarNameValue, HarResponse

__all__ = [
    # Serialization
    "ResponseSerializer",
    "HarCollection",
    "status_text",
    "HEADERS_SIZE_UNKNOWN",
    # Body handling
    "is_json_mime_type",
    "read_body",
    # Accessors
    "RequestInfo",
    "ResponseInfo",
    "HttpRequest",
    "HttpResponse",
    "HeaderSource",
    # Types
    "HarResponse",
    "HarContent",
    "HarHeader",
    "HarCookie",
    "HarNameValue",
]
