"""Shared test fixtures and the transport spy for the M2M client test suite."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from usgs_m2m.api.client import M2MClient
from usgs_m2m.config.settings import M2MSettings
from usgs_m2m.transport.types import HttpMethod, TransportResult

TEST_BASE_URL = "http://m2m.test/api/json/stable/"


# ---------------------------------------------------------------------------
# Keep the environment from leaking into M2MSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_m2m_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("M2M_BASE_URL", "M2M_TIMEOUT_SECONDS", "M2M_AUTH_TOKEN", "M2M_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Transport spy
# ---------------------------------------------------------------------------

def api_body(data: object = True, request_id: int = 1, session_id: int = 1) -> str:
    """A successful M2M response body."""
    return json.dumps({
        "requestId": request_id,
        "version": "stable",
        "sessionId": session_id,
        "data": data,
        "errorCode": None,
        "errorMessage": None,
    })


@dataclass
class SentRequest:
    method: HttpMethod
    url: str
    headers: list[str]
    body: str | None

    @property
    def payload(self) -> dict | None:
        return json.loads(self.body) if self.body is not None else None


class RecordingTransport:
    """Transport spy: records every send and replays queued results.

    With nothing queued it answers 200 with ``{"data": true}``.
    """

    def __init__(self) -> None:
        self.calls: list[SentRequest] = []
        self._results: list[TransportResult] = []

    def respond(self, body: str, status: int = 200) -> None:
        self._results.append(TransportResult(ok=True, http_status=status, body=body))

    def respond_data(self, data: object, **meta: int) -> None:
        self.respond(api_body(data, **meta))

    def respond_error(self, code: object, message: str) -> None:
        self.respond(json.dumps({
            "requestId": 1,
            "sessionId": 1,
            "data": None,
            "errorCode": code,
            "errorMessage": message,
        }))

    def fail(self) -> None:
        self._results.append(TransportResult(ok=False))

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: list[str],
        body: str | None = None,
    ) -> TransportResult:
        self.calls.append(SentRequest(method, url, list(headers), body))
        if self._results:
            return self._results.pop(0)
        return TransportResult(ok=True, http_status=200, body=api_body())

    @property
    def last(self) -> SentRequest:
        return self.calls[-1]


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> M2MSettings:
    return M2MSettings(base_url=TEST_BASE_URL, timeout_seconds=2.0)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(settings: M2MSettings, transport: RecordingTransport) -> M2MClient:
    return M2MClient(settings=settings, transport=transport)

