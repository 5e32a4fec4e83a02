"""Fixture data and builders shared by the test modules."""

from __future__ import annotations

import json
from typing import Any

import httpx

from horizon_sdk.http import HTTPClient

HORIZON = "https://horizon.test"


def ledger_record(sequence: int, paging_token: str, **extra: Any) -> dict[str, Any]:
    record = {
        "_links": {"self": {"href": f"https://horizon.test/ledgers/{sequence}"}},
        "id": f"hash-{sequence}",
        "paging_token": paging_token,
        "hash": f"hash-{sequence}",
        "sequence": sequence,
        "successful_transaction_count": 0,
        "failed_transaction_count": 0,
        "operation_count": 0,
        "closed_at": "2019-02-27T09:50:12Z",
        "total_coins": "100000000000.0000000",
        "fee_pool": "0.0000000",
        "base_fee_in_stroops": 100,
        "base_reserve_in_stroops": 100000000,
        "max_tx_set_size": 100,
        "protocol_version": 0,
        "header_xdr": "AAAA",
    }
    record.update(extra)
    return record


def ledgers_page(*records: dict[str, Any], next_cursor: str = "", prev_cursor: str = "") -> dict[str, Any]:
    return {
        "_links": {
            "self": {"href": "https://horizon.test/ledgers?cursor=&limit=1&order=asc"},
            "next": {"href": f"https://horizon.test/ledgers?cursor={next_cursor}&limit=1&order=asc"},
            "prev": {"href": f"https://horizon.test/ledgers?cursor={prev_cursor}&limit=1&order=desc"},
        },
        "_embedded": {"records": list(records)},
    }


FIRST_PAGE = ledgers_page(ledger_record(1, "4294967296"), next_cursor="4294967296", prev_cursor="4294967296")
SECOND_PAGE = ledgers_page(ledger_record(2, "8589934592"), next_cursor="8589934592", prev_cursor="8589934592")
EMPTY_PAGE = ledgers_page()

NOT_FOUND = {
    "type": "https://stellar.org/horizon-errors/not_found",
    "title": "Resource Missing",
    "status": 404,
    "detail": "The resource at the url requested was not found.",
}


def sse_frame(payload: Any, event: str | None = None) -> str:
    lines = []
    if event:
        lines.append(f"event: {event}")
    lines.append(f"data: {json.dumps(payload)}")
    return "\n".join(lines) + "\n\n"


def make_http(transport: httpx.AsyncBaseTransport) -> HTTPClient:
    client = HTTPClient(HORIZON)
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(base_url=HORIZON, transport=transport)
    return client

