from datetime import datetime

from horizon_sdk.models.page import Page, Record


class Ledger(Record):
    id: str
    hash: str
    prev_hash: str | None = None
    sequence: int
    successful_transaction_count: int = 0
    failed_transaction_count: int | None = None
    operation_count: int = 0
    closed_at: datetime | None = None
    total_coins: str | None = None
    fee_pool: str | None = None
    base_fee_in_stroops: int | None = None
    base_reserve_in_stroops: int | None = None
    max_tx_set_size: int | None = None
    protocol_version: int | None = None
    header_xdr: str | None = None


LedgersPage = Page[Ledger]
