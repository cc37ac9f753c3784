"""Tests for the httpx-backed transports."""

import httpx
import pytest
import respx
from httpx import Response

from streamfeed import TransportError
from streamfeed._http import AsyncTransport, BlockingTransport

URL = "https://api.example.com/api/v1.0/?api_key=K"


class TestBlockingTransport:
    @respx.mock
    def test_forwards_request_unchanged(self):
        route = respx.put("https://api.example.com/api/v1.0/").mock(
            return_value=Response(200, json={"ok": True})
        )
        transport = BlockingTransport(30.0)
        try:
            response = transport.send(
                "PUT",
                URL,
                content=b"payload",
                headers=[("X-Api-Key", "K"), ("Date", "Mon, 19 Oct 2026 10:00:00 GMT")],
            )
        finally:
            transport.close()

        assert response.status_code == 200
        sent = route.calls.last.request
        assert sent.content == b"payload"
        assert sent.headers["X-Api-Key"] == "K"
        assert sent.url.params["api_key"] == "K"

    @respx.mock
    def test_wraps_http_errors(self):
        respx.get("https://api.example.com/api/v1.0/").mock(side_effect=httpx.ConnectTimeout)
        transport = BlockingTransport(30.0)
        try:
            with pytest.raises(TransportError) as exc_info:
                transport.send("GET", URL)
        finally:
            transport.close()
        assert isinstance(exc_info.value.payload, httpx.ConnectTimeout)

    def test_does_not_close_injected_client(self):
        http_client = httpx.Client()
        transport = BlockingTransport(30.0, client=http_client)
        transport.close()
        assert not http_client.is_closed
        http_client.close()


class TestAsyncTransport:
    @respx.mock
    @pytest.mark.asyncio
    async def test_forwards_request_unchanged(self):
        route = respx.delete("https://api.example.com/api/v1.0/").mock(
            return_value=Response(200, json={"removed": "a1"})
        )
        transport = AsyncTransport(30.0)
        try:
            response = await transport.send("DELETE", URL, headers=[("stream-auth-type", "jwt")])
        finally:
            await transport.aclose()

        assert response.json() == {"removed": "a1"}
        assert route.calls.last.request.headers["stream-auth-type"] == "jwt"

    @respx.mock
    @pytest.mark.asyncio
    async def test_wraps_http_errors(self):
        respx.get("https://api.example.com/api/v1.0/").mock(side_effect=httpx.ConnectError)
        transport = AsyncTransport(30.0)
        try:
            with pytest.raises(TransportError):
                await transport.send("GET", URL)
        finally:
            await transport.aclose()


def _timeouts(route: respx.Route) -> set[float]:
    return set(route.calls.last.request.extensions["timeout"].values())


class TestOptions:
    @pytest.mark.parametrize("key", ["content", "headers", "method", "url"])
    def test_reserved_keys_rejected(self, key: str):
        transport = BlockingTransport(30.0)
        with pytest.raises(ValueError, match=key):
            transport.send("GET", URL, options={key: "x"})

    @respx.mock
    def test_config_timeout_applies_to_injected_client(self):
        route = respx.get("https://api.example.com/api/v1.0/").mock(
            return_value=Response(200, json={})
        )
        http_client = httpx.Client(timeout=1.0)
        transport = BlockingTransport(7.0, client=http_client)
        try:
            transport.send("GET", URL)
        finally:
            http_client.close()
        assert _timeouts(route) == {7.0}

    @respx.mock
    def test_request_timeout_overrides_config(self):
        route = respx.get("https://api.example.com/api/v1.0/").mock(
            return_value=Response(200, json={})
        )
        transport = BlockingTransport(7.0)
        try:
            transport.send("GET", URL, options={"timeout": 2.5})
        finally:
            transport.close()
        assert _timeouts(route) == {2.5}

    @respx.mock
    @pytest.mark.asyncio
    async def test_config_timeout_applies_to_injected_async_client(self):
        route = respx.get("https://api.example.com/api/v1.0/").mock(
            return_value=Response(200, json={})
        )
        async with httpx.AsyncClient(timeout=1.0) as http_client:
            await AsyncTransport(7.0, client=http_client).send("GET", URL)
        assert _timeouts(route) == {7.0}
