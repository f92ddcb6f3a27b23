"""HTTP transport layer for the M2M client."""

from usgs_m2m.transport.headers import AUTH_TOKEN, CONTENT_TYPE, HeaderList
from usgs_m2m.transport.http_transport import DEFAULT_TIMEOUT_SECONDS, HttpTransport
from usgs_m2m.transport.types import HttpMethod, Transport, TransportResult

__all__ = [
    "AUTH_TOKEN",
    "CONTENT_TYPE",
    "DEFAULT_TIMEOUT_SECONDS",
    "HeaderList",
    "HttpMethod",
    "HttpTransport",
    "Transport",
    "TransportResult",
]
