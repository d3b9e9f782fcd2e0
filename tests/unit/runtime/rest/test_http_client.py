"""Unit tests for HTTPClient and RawResponse.

Tests focus on session management, request forwarding and error mapping.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from parcl.labs.core.exceptions import TransportError
from parcl.labs.runtime.rest import HTTPClient, RawResponse


def _mock_session(status: int = 200, body: str = "{}", headers: dict | None = None):
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)
    response.headers = headers or {}

    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.closed = False
    session.request = MagicMock(return_value=ctx)
    return session


class TestRawResponse:
    """Test RawResponse helpers."""

    def test_ok_for_2xx(self):
        assert RawResponse(status=200, body="").ok
        assert RawResponse(status=204, body="").ok
        assert not RawResponse(status=429, body="").ok
        assert not RawResponse(status=500, body="").ok

    def test_header_lookup_is_case_insensitive(self):
        response = RawResponse(status=429, body="", headers={"retry-after": "3"})
        assert response.header("Retry-After") == "3"
        assert response.header("X-Missing") is None


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_build_url_joins_relative_paths(self):
        client = HTTPClient(base_url="https://api.parcllabs.com/")
        assert client.build_url("/v1/search/markets") == "https://api.parcllabs.com/v1/search/markets"

    def test_build_url_keeps_absolute_urls(self):
        client = HTTPClient(base_url="https://api.parcllabs.com")
        next_url = "https://api.parcllabs.com/v1/search/markets?offset=10"
        assert client.build_url(next_url) == next_url

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        _ = client.session
        await client.close()
        await client.close()
        assert client._session.closed

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None
        assert client._session is None or client._session.closed


class TestHTTPClientSend:
    """Test HTTPClient.send request forwarding and error mapping."""

    @pytest.mark.asyncio
    async def test_send_returns_raw_response(self):
        client = HTTPClient(base_url="https://api.parcllabs.com")
        client._session = _mock_session(200, '{"items": []}', {"Content-Type": "application/json"})

        response = await client.send(
            "get",
            "/v1/search/markets",
            params={"query": "Los Angeles"},
            headers={"Authorization": "key"},
        )

        assert response.status == 200
        assert response.body == '{"items": []}'
        assert response.header("content-type") == "application/json"
        client._session.request.assert_called_once_with(
            "GET",
            "https://api.parcllabs.com/v1/search/markets",
            params={"query": "Los Angeles"},
            json=None,
            headers={"Authorization": "key"},
        )

    @pytest.mark.asyncio
    async def test_send_does_not_raise_on_error_status(self):
        client = HTTPClient(base_url="https://api.parcllabs.com")
        client._session = _mock_session(429, "slow down")

        response = await client.send("GET", "/v1/x")

        assert response.status == 429
        assert response.body == "slow down"

    @pytest.mark.asyncio
    async def test_client_error_maps_to_transport_error(self):
        client = HTTPClient(base_url="https://api.parcllabs.com")
        session = _mock_session()
        session.request.side_effect = aiohttp.ClientConnectionError("connection refused")
        client._session = session

        with pytest.raises(TransportError, match="connection refused"):
            await client.send("GET", "/v1/x")

    @pytest.mark.asyncio
    async def test_timeout_maps_to_transport_error(self):
        client = HTTPClient(base_url="https://api.parcllabs.com")
        session = _mock_session()
        session.request.side_effect = asyncio.TimeoutError()
        client._session = session

        with pytest.raises(TransportError, match="timed out"):
            await client.send("GET", "/v1/x")
