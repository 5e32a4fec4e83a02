"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from helpers import EMPTY_PAGE, make_http


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests and serves routed responses."""
    calls: list[dict[str, Any]] = []

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.routes: dict[str, httpx.Response] = {}
            self.response = httpx.Response(200, json=EMPTY_PAGE)

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            calls.append({
                "method": request.method,
                "url": url,
                "path": request.url.path,
                "headers": dict(request.headers),
            })
            route = self.routes.get(url)
            if route is not None:
                return httpx.Response(route.status_code, content=route.content, headers=route.headers)
            return httpx.Response(
                self.response.status_code,
                content=self.response.content,
                headers=self.response.headers,
            )

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    return make_http(transport), transport, calls
