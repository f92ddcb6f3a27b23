"""Unit tests for the httpx-backed transport, using httpx.MockTransport."""

import httpx

from usgs_m2m.transport.http_transport import DEFAULT_TIMEOUT_SECONDS, HttpTransport
from usgs_m2m.transport.types import HttpMethod

URL = "http://m2m.test/api/json/stable/dataset"


def _transport(handler) -> HttpTransport:
    return HttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpTransport:
    def test_post_sends_headers_and_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["token"] = request.headers.get("X-Auth-Token")
            seen["body"] = request.content
            return httpx.Response(200, text='{"data": 1}')

        result = _transport(handler).send(
            HttpMethod.POST,
            URL,
            ["Content-Type: application/json", "X-Auth-Token: abc"],
            '{"datasetName": "landsat"}',
        )

        assert result.ok is True
        assert result.http_status == 200
        assert result.body == '{"data": 1}'
        assert seen == {
            "method": "POST",
            "url": URL,
            "token": "abc",
            "body": b'{"datasetName": "landsat"}',
        }

    def test_get_has_no_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = request.content
            return httpx.Response(200, text="{}")

        _transport(handler).send(HttpMethod.GET, URL, [])

        assert seen == {"method": "GET", "body": b""}

    def test_error_status_is_returned_untouched(self):
        transport = _transport(lambda request: httpx.Response(503, text="unavailable"))

        result = transport.send(HttpMethod.POST, URL, [], "{}")

        assert result.ok is True
        assert result.http_status == 503
        assert result.body == "unavailable"

    def test_connection_error_is_not_ok(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = _transport(handler).send(HttpMethod.POST, URL, [], "{}")

        assert result.ok is False
        assert result.http_status == 0
        assert result.body == ""

    def test_timeout_is_not_ok(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        assert _transport(handler).send(HttpMethod.GET, URL, []).ok is False

    def test_unencodable_header_is_not_ok(self):
        transport = _transport(lambda request: httpx.Response(200, text='{"data": 1}'))

        result = transport.send(HttpMethod.GET, URL, ["X-Auth-Token: töken"])

        assert result.ok is False
        assert result.http_status == 0


class TestLifecycle:
    def test_default_timeout(self):
        transport = HttpTransport()
        try:
            assert transport._timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 10.0
        finally:
            transport.close()

    def test_injected_client_is_not_closed(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        with HttpTransport(client=client):
            pass
        assert client.is_closed is False
        client.close()

    def test_owned_client_is_closed(self):
        transport = HttpTransport()
        transport.close()
        assert transport._client.is_closed is True
