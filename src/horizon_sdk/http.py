"""HTTP client wrapping httpx with client headers and error classification."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from horizon_sdk.errors import HorizonHTTPError, HorizonNetworkError

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HTTPClient:
    """Async HTTP client for the Horizon REST API.

    Nothing is retried: every non-2xx response becomes a
    :class:`HorizonHTTPError` and every transport failure a
    :class:`HorizonNetworkError`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        client_name: str = "horizon-sdk-python",
        client_version: str = "0.1.0",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client_name = client_name
        self._client_version = client_version
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "X-Client-Name": self._client_name,
            "X-Client-Version": self._client_version,
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a single API request. ``path`` already carries its query string."""
        merged_headers = self._headers()
        if headers:
            merged_headers.update(headers)

        log.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, headers=merged_headers)
        except httpx.TransportError as exc:
            raise HorizonNetworkError(str(exc)) from exc

        if not response.is_success:
            raise HorizonHTTPError.from_response(response)
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    @asynccontextmanager
    async def stream(self, path: str) -> AsyncIterator[httpx.Response]:
        """Open a long-lived ``text/event-stream`` GET.

        The response is closed when the block exits, whatever the reason.
        There is no read timeout: an idle stream is not a failure.
        """
        headers = self._headers()
        headers["Accept"] = "text/event-stream"
        timeout = httpx.Timeout(self._timeout, read=None)

        log.debug("STREAM %s", path)
        try:
            async with self._client.stream("GET", path, headers=headers, timeout=timeout) as response:
                if not response.is_success:
                    await response.aread()
                    raise HorizonHTTPError.from_response(response)
                yield response
        except httpx.TransportError as exc:
            raise HorizonNetworkError(str(exc)) from exc

    async def close(self) -> None:
        await self._client.aclose()


def parse_model(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a successful response body into ``model``.

    A 2xx body that is not JSON or does not fit the model raises
    :class:`HorizonNetworkError`.
    """
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise HorizonNetworkError(f"Malformed response: {exc}") from exc
