"""Ledgers API methods."""

from __future__ import annotations

import asyncio

from horizon_sdk.errors import InvalidParameterError
from horizon_sdk.http import HTTPClient, parse_model
from horizon_sdk.models.ledgers import Ledger, LedgersPage
from horizon_sdk.pagination import PageIterator, fetch_page, next_page, prev_page
from horizon_sdk.requests import LedgerRequest
from horizon_sdk.streaming import RecordHandler, StreamSubscriber


class LedgersAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def list(self, request: LedgerRequest | None = None) -> LedgersPage:
        return await fetch_page(self._http, request or LedgerRequest(), Ledger)

    async def get(self, sequence: int) -> Ledger:
        request = LedgerRequest(for_sequence=sequence)
        if not request.is_instance():
            raise InvalidParameterError("sequence", f"Invalid sequence number provided: {sequence!r}")
        r = await self._http.get(request.build_url())
        return parse_model(r, Ledger)

    async def next(self, page: LedgersPage, request: LedgerRequest) -> LedgersPage:
        return await next_page(self._http, page, request, Ledger)

    async def prev(self, page: LedgersPage, request: LedgerRequest) -> LedgersPage:
        return await prev_page(self._http, page, request, Ledger)

    def iter(self, request: LedgerRequest | None = None) -> PageIterator[Ledger]:
        return PageIterator(self._http, request or LedgerRequest(), Ledger)

    def subscriber(self, request: LedgerRequest, handler: RecordHandler) -> StreamSubscriber[Ledger]:
        return StreamSubscriber(self._http, request, Ledger, handler)

    async def stream(
        self,
        request: LedgerRequest,
        handler: RecordHandler,
        *,
        stop: asyncio.Event | None = None,
    ) -> None:
        """Deliver ledgers to ``handler`` as they close, until ``stop`` is set.

        An unset cursor starts at ``now``: only ledgers closed after the
        connection opens are delivered.
        """
        await self.subscriber(request, handler).run(stop=stop)
