"""Shared plumbing for M2M client operations.

Every operation follows the same steps:
1. validate required parameters locally (``ParameterError``, no I/O)
2. build the JSON payload, omitting absent optional parameters
3. send exactly one request through the transport
4. decode the response into an ``Envelope``
5. optionally reshape ``data`` into typed models

The client holds one transport and one ordered header list. Neither is
locked: share a client across threads only with external serialization.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Iterable

from pydantic import BaseModel

from usgs_m2m.config.settings import M2MSettings
from usgs_m2m.decoder import decode_envelope
from usgs_m2m.errors import ParameterError, ResponseShapeError
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.transport.headers import AUTH_TOKEN, CONTENT_TYPE, HeaderList
from usgs_m2m.transport.http_transport import HttpTransport
from usgs_m2m.transport.types import HttpMethod, Transport

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def require(value: Any, name: str, endpoint: str) -> None:
    """Reject a missing or empty required parameter."""
    if value is None or value == "":
        raise ParameterError(f"'{name}' is required for {endpoint}.")


def require_any(endpoint: str, **named: Any) -> None:
    """Reject a call where every one of several alternative parameters is empty."""
    if all(value is None or value == "" for value in named.values()):
        names = " or ".join(f"'{name}'" for name in named)
        raise ParameterError(f"At least one of {names} must be provided for {endpoint}.")


def require_items(values: Iterable[Any] | None, name: str, endpoint: str) -> None:
    if not values:
        raise ParameterError(f"'{name}' cannot be empty for {endpoint}.")


def require_positive(value: int, name: str, endpoint: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ParameterError(f"'{name}' must be a positive integer for {endpoint}.")


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def to_wire(value: Any) -> Any:
    """Convert request models (and lists of them) to plain JSON values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.to_payload() if hasattr(value, "to_payload") else value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    return value


def expecting(kind: type | tuple[type, ...], parse: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap a parser so that data of any other JSON type reads as a shape error."""

    def _parse(data: Any) -> Any:
        return parse(data) if isinstance(data, kind) else None

    return _parse


def compact(fields: dict[str, Any]) -> dict[str, Any]:
    """Build a payload keeping only present parameters.

    ``None`` and empty lists are absent; everything else, including ``False``,
    ``0`` and empty strings, is sent as given.
    """
    payload: dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)) and not value:
            continue
        payload[key] = to_wire(value)
    return payload


def _serialize(payload: dict, endpoint: str) -> str:
    """Encode a payload as strict JSON; unencodable values are a parameter error."""
    try:
        return json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ParameterError(f"Request payload for {endpoint} is not valid JSON: {exc}") from exc


# ---------------------------------------------------------------------------
# Client base
# ---------------------------------------------------------------------------


class M2MClientBase:
    """Connection, header and dispatch state shared by all operation groups.

    Parameters
    ----------
    settings:
        Client configuration; defaults to ``M2MSettings()`` (environment).
    transport:
        Object implementing ``send``; defaults to an ``HttpTransport`` using
        the configured timeout. A transport passed in is not closed by the
        client.
    """

    def __init__(
        self,
        settings: M2MSettings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._settings = settings if settings is not None else M2MSettings()
        self._base_url = self._settings.base_url
        self._owns_transport = transport is None
        self._transport: Transport = (
            transport
            if transport is not None
            else HttpTransport(timeout_seconds=self._settings.timeout_seconds)
        )

        self._headers = HeaderList([f"{CONTENT_TYPE}: {JSON_CONTENT_TYPE}"])
        if self._settings.user_agent:
            self._headers.set_value("User-Agent", self._settings.user_agent)
        if self._settings.auth_token:
            self.set_auth_token(self._settings.auth_token)

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> list[str]:
        """Current headers as ``"Key: Value"`` lines, in insertion order."""
        return self._headers.as_lines()

    def set_auth_token(self, token: str) -> None:
        """Set (or replace) the X-Auth-Token header."""
        self._headers.set_value(AUTH_TOKEN, token)

    def clear_auth_token(self) -> None:
        self._headers.remove(AUTH_TOKEN)

    def update_header(self, header: str) -> None:
        """Set or replace any header from a ``"Key: Value"`` line.

        Raises ``ValueError`` for a line without a colon or with an empty key.
        """
        self._headers.set(header)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _url(self, endpoint: str) -> str:
        return self._base_url + endpoint

    def _send(
        self,
        method: HttpMethod,
        endpoint: str,
        payload: dict | None = None,
        require_data: bool = True,
    ) -> Envelope[Any]:
        body = _serialize(payload, endpoint) if payload is not None else None
        logger.debug(
            "Dispatching %s %s",
            method.value,
            endpoint,
            extra={"endpoint": endpoint, "method": method.value},
        )

        result = self._transport.send(method, self._url(endpoint), self.headers, body)
        envelope = decode_envelope(result.ok, result.http_status, result.body, require_data)

        logger.debug(
            "%s -> %s",
            endpoint,
            "ok" if envelope.success else envelope.error.message,
            extra={"endpoint": endpoint, "http_status": result.http_status},
        )
        return envelope

    def _post(self, endpoint: str, payload: dict) -> Envelope[Any]:
        return self._send(HttpMethod.POST, endpoint, payload)

    def _get(self, endpoint: str, require_data: bool = True) -> Envelope[Any]:
        return self._send(HttpMethod.GET, endpoint, require_data=require_data)

    @staticmethod
    def _reshape(
        envelope: Envelope[Any],
        endpoint: str,
        parse: Callable[[Any], Any],
    ) -> Envelope[Any]:
        """Replace ``data`` of a successful envelope with ``parse(data)``.

        ``parse`` returns ``None`` when the payload has the wrong shape.
        """
        if not envelope.success:
            return envelope
        parsed = parse(envelope.data)
        if parsed is None:
            raise ResponseShapeError(
                f"Unexpected 'data' shape for {endpoint}", meta=envelope.meta
            )
        return envelope.model_copy(update={"data": parsed})

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpTransport):
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
