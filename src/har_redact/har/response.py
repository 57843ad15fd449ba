"""HAR response serialization with redaction.

Builds the ``response`` object of a HAR entry from a request/response pair.
Headers come from the response and cookies from the request; both are run
through a HarCollection so rejected entries are dropped. JSON bodies are
parsed, filtered with the same policy and reserialized; any other body,
including JSON that fails to parse, is logged verbatim.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus

from har_redact.filtering.policy import FilterPolicy, filter_value
from har_redact.har.accessors import RequestInfo, ResponseInfo
from har_redact.har.collection import HarCollection
from har_redact.har.content import is_json_mime_type, read_body
from har_redact.har.types import HarContent, HarResponse

_LOGGER = logging.getLogger(__name__)

# HAR uses -1 for sizes that are not available
HEADERS_SIZE_UNKNOWN = -1


def status_text(status: int) -> str:
    """Return the standard reason phrase for a status code.

    Example:
        >>> status_text(204)
        'No Content'
        >>> status_text(599)
        ''
    """
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


def _filter_json_text(text: str, policy: FilterPolicy) -> str:
    """Filter a JSON document, returning the raw text if it cannot be processed."""
    try:
        data = json.loads(text)
        return json.dumps(filter_value(data, policy), separators=(",", ":"), ensure_ascii=False)
    except json.JSONDecodeError:
        _LOGGER.warning("Invalid JSON in response body, logging it unfiltered")
    except RecursionError:
        _LOGGER.warning("JSON response body nested too deeply, logging it unfiltered")
    return text


class ResponseSerializer:
    """Serialize a response into a HAR response object.

    Rejected keys in JSON bodies keep their place with the policy's marker.
    A policy created with ``marker=None`` drops them instead, so a body of
    ``{"reject": "x", "keep": "keep"}`` is logged as ``{"keep":"keep"}``.

    Args:
        request: Request accessor (supplies httpVersion and cookies)
        response: Response accessor (supplies status, headers and body)
        policy: Filter policy applied to headers, cookies and JSON bodies
    """

    def __init__(self, request: RequestInfo, response: ResponseInfo, policy: FilterPolicy) -> None:
        self._request = request
        self._response = response
        self._policy = policy

    def to_dict(self) -> HarResponse:
        """Build the HAR response object.

        The response body is read once per call.

        Returns:
            JSON-serializable HAR 1.2 response dict
        """
        response = self._response
        content = self._content()

        return {
            "status": response.status,
            "statusText": status_text(response.status),
            "httpVersion": self._request.http_version,
            "headers": HarCollection(self._policy, response.headers).to_list(),
            "cookies": HarCollection(self._policy, self._request.cookies).to_list(),
            "headersSize": HEADERS_SIZE_UNKNOWN,
            "bodySize": content["size"],
            "redirectURL": response.location or "",
            "content": content,
        }

    def _content(self) -> HarContent:
        """Build the content object, reading the body."""
        response = self._response
        body = read_body(response.body)
        if body is None or not body[0]:
            return {"size": 0, "mimeType": ""}

        text, byte_length = body
        size = response.content_length
        if size is None or size < 0:
            size = byte_length

        if is_json_mime_type(response.content_type):
            text = _filter_json_text(text, self._policy)

        return {
            "size": size,
            "mimeType": response.content_type or "",
            "text": text,
        }
