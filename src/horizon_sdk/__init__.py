"""Horizon Client SDK: async Python client for paginated and streamed Horizon resources."""

from horizon_sdk.client import PUBNET_URL, TESTNET_URL, Client
from horizon_sdk.errors import (
    ErrorKind,
    HorizonError,
    HorizonHTTPError,
    HorizonNetworkError,
    InvalidParameterError,
    NoMoreResultsError,
)
from horizon_sdk.requests import NOW, LedgerRequest, Order, ResourceRequest
from horizon_sdk.streaming import StreamState, StreamSubscriber

__all__ = [
    "Client",
    "ErrorKind",
    "HorizonError",
    "HorizonHTTPError",
    "HorizonNetworkError",
    "InvalidParameterError",
    "LedgerRequest",
    "NOW",
    "NoMoreResultsError",
    "Order",
    "PUBNET_URL",
    "ResourceRequest",
    "StreamState",
    "StreamSubscriber",
    "TESTNET_URL",
]
