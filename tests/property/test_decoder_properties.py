"""Property tests for envelope decoding.

Decoding never raises, and a response is a success exactly when the
transport succeeded, the status is 200, the body is a JSON object with no
errorCode and the data field is present and non-null.
"""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from usgs_m2m.decoder import decode_envelope


# --- Strategies ---

json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=20)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=12,
)
statuses = st.sampled_from([200, 200, 200, 201, 204, 301, 400, 401, 404, 429, 500, 503])
error_codes = st.none() | st.integers(min_value=-5, max_value=999) | st.text(min_size=1, max_size=12)


# --- Arbitrary input ---

@settings(max_examples=200)
@given(transport_ok=st.booleans(), status=st.integers(), body=st.text())
def test_decode_never_raises_on_text(transport_ok: bool, status: int, body: str) -> None:
    envelope = decode_envelope(transport_ok, status, body)

    if not envelope.success:
        assert envelope.data is None
    if not transport_ok or status != 200:
        assert envelope.success is False
        assert envelope.error.code == -1


@settings(max_examples=100)
@given(body=st.binary(max_size=64))
def test_decode_never_raises_on_bytes(body: bytes) -> None:
    decode_envelope(True, 200, body)


@settings(max_examples=100)
@given(value=json_values)
def test_any_json_document_decodes(value: object) -> None:
    envelope = decode_envelope(True, 200, json.dumps(value))

    expected = (
        isinstance(value, dict)
        and value.get("errorCode") is None
        and value.get("data") is not None
    )
    assert envelope.success is expected


# --- Success rule ---

@settings(max_examples=200)
@given(
    transport_ok=st.booleans(),
    status=statuses,
    error_code=error_codes,
    data=st.none() | json_values,
    request_id=st.integers(min_value=0, max_value=10**9),
)
def test_success_iff_rule_holds(
    transport_ok: bool,
    status: int,
    error_code: object,
    data: object,
    request_id: int,
) -> None:
    body = json.dumps({
        "requestId": request_id,
        "sessionId": 1,
        "errorCode": error_code,
        "errorMessage": "failed" if error_code is not None else None,
        "data": data,
    })

    envelope = decode_envelope(transport_ok, status, body)

    expected = transport_ok and status == 200 and error_code is None and data is not None
    assert envelope.success is expected
    if expected:
        assert envelope.data == data
        assert envelope.meta.request_id == request_id
        assert envelope.error.code is None
    else:
        assert envelope.data is None


@settings(max_examples=100)
@given(code=st.integers(min_value=-1000, max_value=1000), message=st.text(max_size=40))
def test_integer_api_errors_pass_through(code: int, message: str) -> None:
    body = json.dumps({"errorCode": code, "errorMessage": message, "data": "x"})

    envelope = decode_envelope(True, 200, body)

    assert envelope.success is False
    assert envelope.error.code == code
    assert envelope.error.message == message
