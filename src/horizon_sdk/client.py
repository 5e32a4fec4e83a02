"""High-level Horizon client composing HTTP and API groups."""

from __future__ import annotations

from typing import Any

from horizon_sdk.http import HTTPClient

TESTNET_URL = "https://horizon-testnet.stellar.org"
PUBNET_URL = "https://horizon.stellar.org"


class Client:
    """Top-level SDK client.

    There is no default instance; the caller always names the Horizon
    server it talks to::

        async with Client(TESTNET_URL) as client:
            request = LedgerRequest(limit=10)
            page = await client.ledgers.list(request)
            page = await client.ledgers.next(page, request)
    """

    def __init__(
        self,
        horizon_url: str,
        *,
        timeout: float = 30.0,
        client_name: str = "horizon-sdk-python",
        client_version: str = "0.1.0",
    ) -> None:
        self.http = HTTPClient(
            horizon_url,
            timeout=timeout,
            client_name=client_name,
            client_version=client_version,
        )
        self._ledgers: Any = None

    @property
    def horizon_url(self) -> str:
        return self.http.base_url

    # --- API group properties ---

    @property
    def ledgers(self) -> Any:
        if self._ledgers is None:
            from horizon_sdk.api.ledgers import LedgersAPI
            self._ledgers = LedgersAPI(self.http)
        return self._ledgers

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
