"""Cursor-based pagination driven by record paging tokens."""

from __future__ import annotations

from typing import AsyncIterator

from horizon_sdk.errors import InvalidParameterError, NoMoreResultsError
from horizon_sdk.http import HTTPClient, parse_model
from horizon_sdk.models.page import Page, RecordT
from horizon_sdk.requests import Order, ResourceRequest


def _check_paginated(request: ResourceRequest) -> None:
    if request.is_instance():
        raise InvalidParameterError("request", "single-resource lookups are not paginated")


def next_request(page: Page[RecordT], request: ResourceRequest) -> ResourceRequest:
    """Descriptor for the window after ``page``: last token, ascending, same limit."""
    _check_paginated(request)
    if not page.records:
        raise NoMoreResultsError("next")
    return request.replace(cursor=page.records[-1].paging_token, order=Order.ASC)


def prev_request(page: Page[RecordT], request: ResourceRequest) -> ResourceRequest:
    """Descriptor for the window before ``page``: first token, descending, same limit."""
    _check_paginated(request)
    if not page.records:
        raise NoMoreResultsError("prev")
    return request.replace(cursor=page.records[0].paging_token, order=Order.DESC)


async def fetch_page(http: HTTPClient, request: ResourceRequest, model: type[RecordT]) -> Page[RecordT]:
    _check_paginated(request)
    r = await http.get(request.build_url())
    return parse_model(r, Page[model])


async def next_page(
    http: HTTPClient, page: Page[RecordT], request: ResourceRequest, model: type[RecordT]
) -> Page[RecordT]:
    return await fetch_page(http, next_request(page, request), model)


async def prev_page(
    http: HTTPClient, page: Page[RecordT], request: ResourceRequest, model: type[RecordT]
) -> Page[RecordT]:
    return await fetch_page(http, prev_request(page, request), model)


class PageIterator(AsyncIterator[RecordT]):
    """Yields records across pages until a page comes back empty.

    Each follow-up request reuses the original order and limit with the last
    record's paging token as cursor.

    The collection is live, so records created while iterating may show up
    in later pages.
    """

    def __init__(
        self,
        http: HTTPClient,
        request: ResourceRequest,
        model: type[RecordT],
    ) -> None:
        _check_paginated(request)
        self._http = http
        self._request = request
        self._model = model
        self._buffer: list[RecordT] = []
        self._page: Page[RecordT] | None = None
        self._exhausted = False

    def __aiter__(self) -> AsyncIterator[RecordT]:
        return self

    async def __anext__(self) -> RecordT:
        if self._buffer:
            return self._buffer.pop(0)
        if self._exhausted:
            raise StopAsyncIteration
        await self._fetch_page()
        if not self._buffer:
            raise StopAsyncIteration
        return self._buffer.pop(0)

    async def _fetch_page(self) -> None:
        request = self._request
        if self._page is not None:
            # keep walking in the direction the caller asked for
            request = request.replace(cursor=self._page.records[-1].paging_token)
        page = await fetch_page(self._http, request, self._model)
        self._buffer = list(page.records)
        if not page.records:
            self._exhausted = True
        else:
            self._page = page

    async def flatten(self) -> list[RecordT]:
        """Consume the full iterator into a list."""
        result: list[RecordT] = []
        async for item in self:
            result.append(item)
        return result
