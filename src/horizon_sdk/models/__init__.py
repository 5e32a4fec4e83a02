"""SDK response models."""

from horizon_sdk.models.base import HorizonModel
from horizon_sdk.models.errors import Problem, ResultCodes
from horizon_sdk.models.events import ServerSentEvent, parse_sse_stream
from horizon_sdk.models.ledgers import Ledger, LedgersPage
from horizon_sdk.models.page import Link, Page, Record

__all__ = [
    "HorizonModel",
    "Ledger",
    "LedgersPage",
    "Link",
    "Page",
    "Problem",
    "Record",
    "ResultCodes",
    "ServerSentEvent",
    "parse_sse_stream",
]
