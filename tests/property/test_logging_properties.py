"""Property tests for structured logging.

Every entry is valid JSON with the required fields, and token values never
reach the output.
"""

from __future__ import annotations

import json
import logging

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from usgs_m2m.logging_config import JsonFormatter


# --- Strategies ---

messages = st.text(min_size=1, max_size=100, alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._-/")
levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
tokens = st.text(min_size=8, max_size=40, alphabet="abcdef0123456789")
token_labels = st.sampled_from(["X-Auth-Token: ", "token=", "api_key=", "password: ", "applicationToken="])
endpoints = st.sampled_from(["login-token", "dataset-search", "scene-search", "download-request"])


def _make_record(message: str, level: str = "INFO", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="usgs_m2m",
        level=getattr(logging, level),
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@settings(max_examples=100)
@given(message=messages, level=levels, endpoint=endpoints)
def test_structured_log_format(message: str, level: str, endpoint: str) -> None:
    parsed = json.loads(JsonFormatter().format(_make_record(message, level, endpoint=endpoint)))

    assert parsed["level"] == level
    assert parsed["message"] == message
    assert parsed["endpoint"] == endpoint
    assert "timestamp" in parsed


@settings(max_examples=100)
@given(prefix=messages, label=token_labels, token=tokens)
def test_tokens_never_logged(prefix: str, label: str, token: str) -> None:
    assume(token not in prefix)

    output = JsonFormatter().format(
        _make_record(f"{prefix} {label}{token}", error_reason=f"{label}{token}")
    )

    assert token not in output
