"""Tests for the httpx and aiohttp network providers."""

from __future__ import annotations

import asyncio

import httpx
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from regionwatch.core.interfaces.network import INetworkProvider
from regionwatch.plugins.network import AiohttpNetworkProvider, HttpxNetworkProvider


def mock_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/json/":
            body = {"country_name": "Germany", "ua": request.headers.get("user-agent")}
            return httpx.Response(200, json=body)
        if request.url.path == "/html":
            return httpx.Response(200, text="<html>rate limited</html>")
        if request.url.path == "/limited":
            return httpx.Response(429, json={"error": True, "reason": "RateLimited"})
        raise httpx.ConnectError("unreachable", request=request)

    return httpx.MockTransport(handler)


class TestHttpxNetworkProvider:
    """Tests for HttpxNetworkProvider."""

    def test_satisfies_interface(self):
        assert isinstance(HttpxNetworkProvider(), INetworkProvider)

    @pytest.mark.asyncio
    async def test_json_body(self):
        """Test a successful JSON response."""
        provider = HttpxNetworkProvider(user_agent="test-agent", transport=mock_transport())
        async with provider:
            reply = await provider.get("https://geo.test/json/")

        assert reply.ok is True
        assert reply.status == 200
        assert reply.body["country_name"] == "Germany"
        assert reply.body["ua"] == "test-agent"

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        """Test a non-JSON body decodes to None."""
        async with HttpxNetworkProvider(transport=mock_transport()) as provider:
            reply = await provider.get("https://geo.test/html")

        assert reply.ok is True
        assert reply.body is None

    @pytest.mark.asyncio
    async def test_error_status(self):
        """Test an error status is reported, not raised."""
        async with HttpxNetworkProvider(transport=mock_transport()) as provider:
            reply = await provider.get("https://geo.test/limited")

        assert reply.ok is False
        assert reply.status == 429

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Test transport failures propagate to the caller."""
        async with HttpxNetworkProvider(transport=mock_transport()) as provider:
            with pytest.raises(httpx.ConnectError):
                await provider.get("https://geo.test/down")

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        provider = HttpxNetworkProvider(transport=mock_transport())
        await provider.get("https://geo.test/json/")
        await provider.close()
        await provider.close()


class TestAiohttpNetworkProvider:
    """Tests for AiohttpNetworkProvider against a local server."""

    @pytest_asyncio.fixture
    async def server(self):
        async def country(request: web.Request) -> web.Response:
            return web.json_response({"country": "Japan", "country_code": "JP"})

        async def broken(request: web.Request) -> web.Response:
            return web.Response(text="not json", status=502)

        async def slow(request: web.Request) -> web.Response:
            await asyncio.sleep(1)
            return web.json_response({})

        app = web.Application()
        app.router.add_get("/", country)
        app.router.add_get("/broken", broken)
        app.router.add_get("/slow", slow)

        server = test_utils.TestServer(app)
        await server.start_server()
        yield server
        await server.close()

    @pytest.mark.asyncio
    async def test_json_body(self, server):
        """Test a successful JSON response."""
        async with AiohttpNetworkProvider() as provider:
            reply = await provider.get(str(server.make_url("/")))

        assert reply.ok is True
        assert reply.body == {"country": "Japan", "country_code": "JP"}

    @pytest.mark.asyncio
    async def test_error_status_with_text(self, server):
        """Test an error status with a non-JSON body."""
        async with AiohttpNetworkProvider() as provider:
            reply = await provider.get(str(server.make_url("/broken")))

        assert reply.ok is False
        assert reply.status == 502
        assert reply.body is None

    @pytest.mark.asyncio
    async def test_cancellation_aborts_request(self, server):
        """Test cancelling the caller aborts the pending request."""
        async with AiohttpNetworkProvider() as provider:
            task = asyncio.create_task(provider.get(str(server.make_url("/slow"))))
            await asyncio.sleep(0.05)
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task
