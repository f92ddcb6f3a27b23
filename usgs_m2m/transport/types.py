"""Transport data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class HttpMethod(str, Enum):
    """HTTP methods used by the M2M API."""

    GET = "GET"
    POST = "POST"


@dataclass
class TransportResult:
    """Raw outcome of one HTTP exchange."""

    ok: bool  # False when the request could not be performed at all
    http_status: int = 0
    body: str = ""


class Transport(Protocol):
    """Anything that can perform one blocking HTTP call."""

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: list[str],
        body: str | None = None,
    ) -> TransportResult: ...
