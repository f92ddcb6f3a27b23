"""Blocking HTTP transport built on httpx.

Performs exactly one request per ``send`` call: no retries, no caching.
Connection-level failures (DNS, TLS, refused, timeout) and requests that
cannot be encoded are reported as ``TransportResult(ok=False)``; any HTTP
status is returned untouched for the decoder to classify.
"""

from __future__ import annotations

import logging
import time

import httpx

from usgs_m2m.transport.headers import split_header
from usgs_m2m.transport.types import HttpMethod, TransportResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpTransport:
    """httpx-backed transport owning a single ``httpx.Client``.

    Parameters
    ----------
    timeout_seconds:
        Fixed timeout applied to every request (default 10).
    client:
        Pre-built ``httpx.Client`` (e.g. with a ``MockTransport`` in tests).
        When omitted, one is created and closed by ``close()``.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: list[str],
        body: str | None = None,
    ) -> TransportResult:
        """Perform one request and return status + raw body."""
        header_map = dict(split_header(line) for line in headers)
        started = time.monotonic()

        try:
            response = self._client.request(
                method.value,
                url,
                headers=header_map,
                content=body.encode("utf-8") if body is not None else None,
                timeout=self._timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Header values httpx cannot encode surface as UnicodeEncodeError
            logger.debug(
                "HTTP %s %s failed: %s",
                method.value,
                url,
                exc.__class__.__name__,
                extra={"error_reason": str(exc)},
            )
            return TransportResult(ok=False)

        logger.debug(
            "HTTP %s %s -> %d",
            method.value,
            url,
            response.status_code,
            extra={
                "http_status": response.status_code,
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )
        return TransportResult(ok=True, http_status=response.status_code, body=response.text)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
