"""Pytest configuration and fixtures for har-redact tests."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from har_redact.filtering import clear_policy_cache
from har_redact.har import HttpRequest, HttpResponse


@pytest.fixture(autouse=True)
def _clear_policy_cache():
    """Keep policy file cache isolated between tests."""
    clear_policy_cache()
    yield
    clear_policy_cache()


@pytest.fixture
def build_request():
    """Create a request accessor with sensible defaults."""

    def _create_request(**overrides: Any) -> HttpRequest:
        defaults: dict[str, Any] = {
            "http_version": "HTTP/1.1",
            "cookies": {"default_cookie": "default"},
        }
        defaults.update(overrides)
        return HttpRequest(**defaults)

    return _create_request


@pytest.fixture
def build_response():
    """Create a response accessor with sensible defaults.

    The default body is a fresh file-like object so each response can be
    read once.
    """

    def _create_response(**overrides: Any) -> HttpResponse:
        defaults: dict[str, Any] = {
            "status": 200,
            "headers": {"X-Default": "default"},
            "content_type": "text/plain",
            "content_length": 2,
            "location": None,
            "body": io.BytesIO(b"OK"),
        }
        defaults.update(overrides)
        return HttpResponse(**defaults)

    return _create_response


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document to a temporary file."""

    def _write(data: Any, name: str = "data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
