"""Tests for the optional retry transport."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import httpx
import pytest

from nettu_scheduler import AccountCreds, BaseClient, ClientConfig
from nettu_scheduler.transport import RetryTransport


def _counting_transport(responses):
    """MockTransport answering with ``responses`` in order, repeating the last."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        result = responses[min(len(requests), len(responses)) - 1]
        if isinstance(result, Exception):
            raise result
        return httpx.Response(result.status_code, headers=result.headers, content=result.content)

    return httpx.MockTransport(handler), requests


def _retry(transport, **kwargs) -> RetryTransport:
    kwargs.setdefault("backoff_factor", 0)
    return RetryTransport(wrapped_transport=transport, **kwargs)


class TestStatusRetries:
    @pytest.mark.unit
    async def test_retries_get_on_503(self):
        transport, requests = _counting_transport(
            [httpx.Response(503), httpx.Response(503), httpx.Response(200, json={"ok": True})]
        )

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            response = await client.get("https://api.example.com/test")

        assert response.status_code == 200
        assert len(requests) == 3

    @pytest.mark.unit
    async def test_does_not_retry_post_on_503(self):
        transport, requests = _counting_transport([httpx.Response(503)])

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            response = await client.post("https://api.example.com/test", json={})

        assert response.status_code == 503
        assert len(requests) == 1

    @pytest.mark.unit
    async def test_retries_post_on_429(self):
        transport, requests = _counting_transport([httpx.Response(429), httpx.Response(201)])

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            response = await client.post("https://api.example.com/test", json={"a": 1})

        assert response.status_code == 201
        assert len(requests) == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("status_code", [400, 404, 500])
    async def test_does_not_retry_other_statuses(self, status_code):
        transport, requests = _counting_transport([httpx.Response(status_code)])

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            response = await client.get("https://api.example.com/test")

        assert response.status_code == status_code
        assert len(requests) == 1

    @pytest.mark.unit
    async def test_returns_last_response_when_exhausted(self):
        transport, requests = _counting_transport([httpx.Response(503)])

        async with httpx.AsyncClient(transport=_retry(transport, max_retries=2)) as client:
            response = await client.delete("https://api.example.com/test")

        assert response.status_code == 503
        assert len(requests) == 3


class TestTransportErrorRetries:
    @pytest.mark.unit
    async def test_retries_idempotent_request_on_connect_error(self):
        transport, requests = _counting_transport([httpx.ConnectError("refused"), httpx.Response(200)])

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            response = await client.get("https://api.example.com/test")

        assert response.status_code == 200
        assert len(requests) == 2

    @pytest.mark.unit
    async def test_reraises_for_post(self):
        transport, requests = _counting_transport([httpx.ConnectError("refused")])

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.post("https://api.example.com/test", json={})

        assert len(requests) == 1

    @pytest.mark.unit
    async def test_reraises_when_exhausted(self):
        transport, requests = _counting_transport([httpx.ReadTimeout("slow")])

        async with httpx.AsyncClient(transport=_retry(transport, max_retries=1)) as client:
            with pytest.raises(httpx.ReadTimeout):
                await client.get("https://api.example.com/test")

        assert len(requests) == 2


class TestDelays:
    @pytest.mark.unit
    def test_backoff_is_exponential_and_capped(self):
        retry = RetryTransport(
            wrapped_transport=httpx.MockTransport(lambda r: httpx.Response(200)),
            backoff_factor=1.0,
            max_backoff=5.0,
        )

        assert [retry._calculate_backoff_delay(n) for n in range(1, 5)] == [1.0, 2.0, 4.0, 5.0]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("header", "expected"),
        [("7", 7.0), ("120", 30.0), ("-1", None), ("later", None)],
    )
    def test_parse_retry_after_seconds(self, header, expected):
        retry = RetryTransport(wrapped_transport=httpx.MockTransport(lambda r: httpx.Response(200)))

        assert retry._parse_retry_after(httpx.Response(429, headers={"Retry-After": header})) == expected

    @pytest.mark.unit
    def test_parse_retry_after_http_date(self):
        retry = RetryTransport(wrapped_transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        when = format_datetime(datetime.now(UTC) + timedelta(seconds=10), usegmt=True)

        delay = retry._parse_retry_after(httpx.Response(429, headers={"Retry-After": when}))

        assert delay is not None
        assert 0 < delay <= 10

    @pytest.mark.unit
    async def test_honours_retry_after(self, monkeypatch):
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr("nettu_scheduler.transport.retry.asyncio.sleep", fake_sleep)
        transport, _ = _counting_transport(
            [httpx.Response(429, headers={"Retry-After": "3"}), httpx.Response(200)]
        )

        async with httpx.AsyncClient(transport=_retry(transport)) as client:
            await client.get("https://api.example.com/test")

        assert delays == [3.0]


@pytest.mark.unit
async def test_plugs_into_client_config():
    transport, requests = _counting_transport([httpx.Response(502), httpx.Response(200, json={"ok": True})])
    config = ClientConfig(base_url="https://api.example.com", transport=_retry(transport))

    res = await BaseClient(AccountCreds("k"), config).get("/healthcheck")

    assert res.status == 200
    assert res.data == {"ok": True}
    assert len(requests) == 2
    assert all(r.headers["x-api-key"] == "k" for r in requests)
