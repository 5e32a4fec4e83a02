"""Server-sent event frames: lightweight containers for the stream parser."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ServerSentEvent:
    data: str
    event: str | None = None
    id: str | None = None

    @property
    def is_heartbeat(self) -> bool:
        """Horizon opens with ``event: open`` / ``"hello"`` and closes with ``"byebye"``."""
        if self.event == "open":
            return True
        return self.data.strip() in ('"hello"', '"byebye"')

    def json(self) -> Any:
        return json.loads(self.data)


async def parse_sse_stream(lines: Any):
    """Parse an async iterator of text/event-stream lines into frames.

    A trailing frame without the terminating blank line is still emitted
    when the connection ends.
    """
    event: str | None = None
    event_id: str | None = None
    data: list[str] = []

    async for line in lines:
        line = line.rstrip("\r\n")
        if line == "":
            if data:
                yield ServerSentEvent(data="\n".join(data), event=event, id=event_id)
            event = None
            event_id = None
            data = []
            continue
        if line.startswith(":"):
            continue
        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "data":
            data.append(value)
        elif name == "event":
            event = value
        elif name == "id":
            event_id = value
        # "retry" and unknown fields are ignored

    if data:
        yield ServerSentEvent(data="\n".join(data), event=event, id=event_id)
