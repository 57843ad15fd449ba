"""HAR 1.2 response type definitions.

Based on the HAR 1.2 specification: http://www.softwareishard.com/blog/har-12-spec/
Field names keep HAR's camelCase, which is part of the wire format.
"""

from __future__ import annotations

from typing_extensions import NotRequired, TypedDict


class HarNameValue(TypedDict):
    """Name-value pair used for headers and cookies."""

    name: str
    value: str


HarHeader = HarNameValue
HarCookie = HarNameValue


class HarContent(TypedDict):
    """Response content body info."""

    size: int
    mimeType: str
    text: NotRequired[str]


class HarResponse(TypedDict):
    """Detailed info about the response."""

    status: int
    statusText: str
    httpVersion: str
    cookies: list[HarCookie]
    headers: list[HarHeader]
    content: HarContent
    redirectURL: str
    headersSize: int
    bodySize: int
