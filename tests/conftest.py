"""
Pytest configuration and fixtures.

Provides:
- mock_response_factory: Builds real httpx.Response objects
- mock_http: AsyncMock standing in for httpx.AsyncClient; tests set
  mock_http.request.return_value / side_effect
- no_browser: Patches webbrowser.open so tests never launch a browser
"""

import gzip
from unittest.mock import AsyncMock, patch

import httpx
import pytest


@pytest.fixture
def mock_response_factory():
    """Factory for creating httpx responses."""

    def _create_response(
        status_code: int = 200,
        json_data: dict | list | None = None,
        text: str | None = None,
        content: bytes | None = None,
        headers: dict | None = None,
        url: str = "https://example.invalid/",
    ) -> httpx.Response:
        kwargs = {}
        if json_data is not None:
            kwargs["json"] = json_data
        elif text is not None:
            kwargs["text"] = text
        elif content is not None:
            kwargs["content"] = content
        return httpx.Response(
            status_code,
            headers=headers,
            request=httpx.Request("GET", url),
            **kwargs,
        )

    return _create_response


@pytest.fixture
def gzip_response(mock_response_factory):
    """Factory for a 200 response whose body is gzip-compressed text."""

    def _create(text: str) -> httpx.Response:
        return mock_response_factory(content=gzip.compress(text.encode("utf-8")))

    return _create


@pytest.fixture
def mock_http():
    """Mock httpx.AsyncClient to inject into clients."""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def no_browser():
    with patch("bio_apis.browser.webbrowser.open", return_value=True) as mock_open:
        yield mock_open
