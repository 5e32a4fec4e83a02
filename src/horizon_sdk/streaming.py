"""Server-sent event subscriber: lifecycle, cooperative stop, ordered dispatch."""

from __future__ import annotations

import asyncio
import enum
import inspect
import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Generic

from pydantic import ValidationError

from horizon_sdk.errors import HorizonHTTPError, HorizonNetworkError, InvalidParameterError
from horizon_sdk.http import HTTPClient
from horizon_sdk.models.events import ServerSentEvent, parse_sse_stream
from horizon_sdk.models.page import RecordT
from horizon_sdk.requests import NOW, ResourceRequest

log = logging.getLogger(__name__)

RecordHandler = Callable[[Any], Awaitable[None] | None]


class StreamState(str, enum.Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    CANCELLED = "cancelled"
    FAILED = "failed"


async def _next_frame(frames: AsyncIterator[ServerSentEvent]) -> ServerSentEvent | None:
    try:
        return await frames.__anext__()
    except StopAsyncIteration:
        return None


class StreamSubscriber(Generic[RecordT]):
    """Streams a Horizon collection and hands each record to ``handler``.

    Usage::

        stop = asyncio.Event()

        def on_ledger(ledger):
            print(ledger.sequence)

        sub = StreamSubscriber(http, LedgerRequest(), Ledger, on_ledger)
        await sub.run(stop=stop)   # returns None once ``stop`` is set

    The handler runs inline, one record at a time, so a slow handler slows
    down delivery. The subscriber never reconnects; to resume, start a new
    one with ``last_paging_token`` as the cursor.
    """

    def __init__(
        self,
        http: HTTPClient,
        request: ResourceRequest,
        model: type[RecordT],
        handler: RecordHandler,
    ) -> None:
        if request.is_instance():
            raise InvalidParameterError("request", "single-resource lookups cannot be streamed")
        if not request.cursor:
            request = request.replace(cursor=NOW)
        self._http = http
        self._request = request
        self._model = model
        self._handler = handler
        self._state = StreamState.IDLE
        self._last_paging_token: str | None = None

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def request(self) -> ResourceRequest:
        """The descriptor actually sent, with the cursor normalized."""
        return self._request

    @property
    def last_paging_token(self) -> str | None:
        return self._last_paging_token

    async def run(self, *, stop: asyncio.Event | None = None) -> None:
        """Connect and deliver records until ``stop`` is set or the stream fails."""
        if self._state is not StreamState.IDLE:
            raise RuntimeError("StreamSubscriber.run() can only be called once")
        if stop is None:
            stop = asyncio.Event()
        path = self._request.build_url()

        self._state = StreamState.CONNECTING
        log.info("Opening stream %s", path)
        try:
            async with self._http.stream(path) as response:
                self._state = StreamState.STREAMING
                frames = parse_sse_stream(response.aiter_lines())
                try:
                    await self._receive_loop(frames, stop)
                finally:
                    await frames.aclose()
        except asyncio.CancelledError:
            self._state = StreamState.CANCELLED
            raise
        except BaseException:
            self._state = StreamState.FAILED
            raise

        self._state = StreamState.CANCELLED
        log.info("Stream %s stopped at paging token %s", path, self._last_paging_token)

    async def _receive_loop(self, frames: AsyncIterator[ServerSentEvent], stop: asyncio.Event) -> None:
        while not stop.is_set():
            frame = await self._wait_for_frame(frames, stop)
            if stop.is_set():
                return
            if frame is None:
                raise HorizonNetworkError("Stream closed by server")
            await self._handle_frame(frame)

    async def _wait_for_frame(
        self, frames: AsyncIterator[ServerSentEvent], stop: asyncio.Event
    ) -> ServerSentEvent | None:
        read = asyncio.ensure_future(_next_frame(frames))
        halt = asyncio.ensure_future(stop.wait())
        try:
            await asyncio.wait({read, halt}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            halt.cancel()
            if not read.done():
                read.cancel()
                await asyncio.wait({read})
        if read.cancelled():
            return None
        return read.result()

    async def _handle_frame(self, frame: ServerSentEvent) -> None:
        if frame.event == "error":
            raise HorizonHTTPError.from_frame(self._decode(frame))
        if frame.is_heartbeat:
            log.debug("Skipping %s frame", frame.event or "heartbeat")
            return

        payload = self._decode(frame)
        if not isinstance(payload, dict):
            log.debug("Skipping non-record frame: %r", payload)
            return
        try:
            record = self._model.model_validate(payload)
        except ValidationError as exc:
            raise HorizonNetworkError(f"Malformed frame: {exc}") from exc

        result = self._handler(record)
        if inspect.isawaitable(result):
            await result
        self._last_paging_token = record.paging_token

    @staticmethod
    def _decode(frame: ServerSentEvent) -> Any:
        try:
            return frame.json()
        except json.JSONDecodeError as exc:
            raise HorizonNetworkError(f"Malformed frame: {exc}") from exc
