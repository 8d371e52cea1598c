"""Transport adapters."""

from request_lifecycle.transports.base import (
    DEFAULT_HEADERS,
    OutgoingRequest,
    Transport,
    TransportResponse,
)
from request_lifecycle.transports.fetch_transport import FetchTransport
from request_lifecycle.transports.httpx_transport import HttpxTransport

__all__ = [
    "DEFAULT_HEADERS",
    "FetchTransport",
    "HttpxTransport",
    "OutgoingRequest",
    "Transport",
    "TransportResponse",
]
