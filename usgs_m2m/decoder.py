"""Response envelope decoding.

Turns the outcome of one HTTP exchange into an ``Envelope``. Failure checks
run in a fixed order and each one short-circuits:

1. transport failure        -> -1, "Failed to perform HTTP request"
2. status other than 200    -> -1, "HTTP error code: <status>"
3. body is not JSON         -> -1, "JSON parse error: <details>"
4. non-null ``errorCode``   -> API code, API ``errorMessage`` (or "")
5. missing or null ``data`` -> -1, "response missing expected 'data' field"

Only a response that passes all five is a success. ``decode_envelope``
never raises.
"""

from __future__ import annotations

import json
from typing import Any

from usgs_m2m.errors import (
    ApiError,
    HttpStatusError,
    M2MError,
    MissingDataError,
    ResponseParseError,
    TransportError,
)
from usgs_m2m.models.coercion import (
    as_int,
    get_int,
    get_string,
    get_string_opt,
    parse_int_literal,
)
from usgs_m2m.models.envelope import Envelope, Meta

HTTP_OK = 200


def parse_body(raw_body: str | bytes) -> Any:
    """Parse a response body as JSON, raising ResponseParseError on failure."""
    try:
        return json.loads(raw_body)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise ResponseParseError(str(exc) or exc.__class__.__name__) from exc


def extract_meta(body: Any) -> Meta:
    return Meta(
        request_id=get_int(body, "requestId"),
        session_id=get_int(body, "sessionId"),
        version=get_string_opt(body, "version"),
    )


def _api_error(body: dict) -> ApiError:
    raw_code = body["errorCode"]
    code: int | None = None
    error_type: str | None = None

    if isinstance(raw_code, str):
        code = parse_int_literal(raw_code)
        if code is None:
            error_type = raw_code
    else:
        code = as_int(raw_code)

    return ApiError(get_string(body, "errorMessage"), code=code, error_type=error_type)


def _decode(
    transport_ok: bool,
    http_status: int,
    raw_body: str | bytes,
    require_data: bool,
) -> Envelope[Any]:
    if not transport_ok:
        raise TransportError()
    if http_status != HTTP_OK:
        raise HttpStatusError(http_status)

    body = parse_body(raw_body)

    if isinstance(body, dict) and body.get("errorCode") is not None:
        raise _api_error(body)

    meta = extract_meta(body)
    data = body.get("data") if isinstance(body, dict) else None
    if data is None and require_data:
        raise MissingDataError(meta=meta)

    return Envelope(success=True, data=data, meta=meta)


def decode_envelope(
    transport_ok: bool,
    http_status: int,
    raw_body: str | bytes,
    require_data: bool = True,
) -> Envelope[Any]:
    """Classify one HTTP exchange as success or failure and normalize it.

    ``require_data=False`` is for acknowledgement-only endpoints (logout)
    whose successful responses carry ``"data": null``.
    """
    try:
        return _decode(transport_ok, http_status, raw_body, require_data)
    except M2MError as exc:
        return exc.to_envelope()
