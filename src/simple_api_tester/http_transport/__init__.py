"""HTTP transport exports."""

from .transport import (
    HttpTransport,
    HttpxTransport,
    ResponseReadError,
    TransportError,
    TransportResponse,
)

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "TransportResponse",
    "TransportError",
    "ResponseReadError",
]
