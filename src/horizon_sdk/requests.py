"""Request descriptors: optional filters serialized into a canonical endpoint."""

from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar
from urllib.parse import quote

from horizon_sdk.errors import InvalidParameterError

NOW = "now"


class Order(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class ResourceRequest:
    """Collection filters shared by every paginated Horizon resource.

    Subclasses set :attr:`resource` and may expose an instance identifier by
    overriding :meth:`instance_id`. Descriptors are immutable; use
    :meth:`replace` to derive a new one.
    """

    resource: ClassVar[str] = ""

    cursor: str | None = None
    order: Order | None = None
    limit: int | None = None

    def instance_id(self) -> str | None:
        """Path segment for a single-resource lookup, or None for the collection."""
        return None

    def is_instance(self) -> bool:
        return self.instance_id() is not None

    def replace(self, **changes) -> ResourceRequest:
        return dataclasses.replace(self, **changes)

    def build_url(self) -> str:
        """Return ``resource``, ``resource/{id}`` or ``resource?cursor=..&order=..&limit=..``.

        Instance lookups are not paginated, so cursor/order/limit are dropped
        when an identifier is set. Query keys are always emitted in the order
        cursor, order, limit so the same request serializes identically.
        """
        instance = self.instance_id()
        if instance is not None:
            return f"{self.resource}/{quote(instance, safe='')}"

        params: list[tuple[str, str]] = []
        if self.cursor:
            params.append(("cursor", self.cursor))
        if self.order is not None:
            params.append(("order", self._order_value()))
        if self.limit is not None:
            params.append(("limit", str(self._limit_value())))

        if not params:
            return self.resource
        query = "&".join(f"{key}={quote(value, safe='')}" for key, value in params)
        return f"{self.resource}?{query}"

    def _order_value(self) -> str:
        try:
            return Order(self.order).value
        except ValueError:
            raise InvalidParameterError("order", f"expected 'asc' or 'desc', got {self.order!r}") from None

    def _limit_value(self) -> int:
        limit = self.limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidParameterError("limit", f"must be a positive integer, got {limit!r}")
        return limit


@dataclasses.dataclass(frozen=True)
class LedgerRequest(ResourceRequest):
    resource: ClassVar[str] = "ledgers"

    for_sequence: int | None = None

    def instance_id(self) -> str | None:
        if self.for_sequence is None:
            return None
        sequence = self.for_sequence
        if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence <= 0:
            raise InvalidParameterError("sequence", f"Invalid sequence number provided: {sequence!r}")
        return str(sequence)
