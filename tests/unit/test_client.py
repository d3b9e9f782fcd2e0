"""Unit tests for ParclClient.

The client is built with a scripted transport and a recording sleep, so no
test touches the network or waits in real time.
"""

from __future__ import annotations

import pytest

from parcl.labs import (
    AccountUsage,
    MetricsParams,
    MissingCredentialsError,
    ParclClient,
    PaginationConfig,
    RateLimitedError,
    RetryConfig,
    SearchParams,
)
from parcl.labs.config import DEFAULT_BASE_URL, ENV_API_KEY, ENV_BASE_URL

LA_NEXT = "https://api.parcllabs.com/v1/search/markets?query=Los+Angeles&limit=2&offset={}"


def market(parcl_id: int, name: str = "Los Angeles") -> dict:
    return {
        "parcl_id": parcl_id,
        "name": name,
        "state_abbreviation": "CA",
        "location_type": "CITY",
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_API_KEY, raising=False)
    monkeypatch.delenv(ENV_BASE_URL, raising=False)


@pytest.fixture
def client(transport, sleep):
    return ParclClient("test-key", transport=transport, sleep=sleep)


class TestClientConstruction:
    """Test credential and configuration resolution."""

    def test_explicit_key(self, transport):
        client = ParclClient("explicit", transport=transport)
        assert client.base_url == DEFAULT_BASE_URL

    def test_key_from_environment(self, monkeypatch, transport):
        monkeypatch.setenv(ENV_API_KEY, "from-env")
        client = ParclClient(transport=transport)
        assert client._api_key == "from-env"

    def test_missing_key_raises(self, transport):
        with pytest.raises(MissingCredentialsError, match=ENV_API_KEY):
            ParclClient(transport=transport)

    def test_base_url_from_environment(self, monkeypatch, transport):
        monkeypatch.setenv(ENV_BASE_URL, "https://staging.example.com/")
        client = ParclClient("k", transport=transport)
        assert client.base_url == "https://staging.example.com"

    def test_invalid_batch_size(self, transport):
        with pytest.raises(ValueError, match="max_batch_size"):
            ParclClient("k", transport=transport, max_batch_size=0)

    def test_repr_hides_key(self, transport):
        client = ParclClient("super-secret", transport=transport)
        assert "super-secret" not in repr(client)

    def test_default_retry_config(self, client):
        assert client.retry_config == RetryConfig()

    def test_with_retry_config_chains(self, client):
        retry = RetryConfig(max_retries=5)
        assert client.with_retry_config(retry) is client
        assert client.retry_config is retry


class TestLosAngelesSearch:
    """Market search against a scripted API."""

    @pytest.mark.asyncio
    async def test_single_page(self, client, transport, ok):
        transport.queue(ok([market(2900187)], next_url=LA_NEXT.format(1), used=1, remaining=999))

        result = await client.search.markets(SearchParams(query="Los Angeles", limit=1))

        assert len(transport.sent) == 1
        assert transport.sent[0].path == "/v1/search/markets"
        assert transport.sent[0].query == {"query": "Los Angeles", "limit": 1}
        assert result.items[0].parcl_id == 2900187
        assert client.session_credits_used() == 1
        assert client.remaining_credits() == 999

    @pytest.mark.asyncio
    async def test_auto_paginate(self, client, transport, ok):
        transport.queue(
            ok([market(1), market(2)], next_url=LA_NEXT.format(2), used=1, remaining=99),
            ok([market(3), market(4)], next_url=LA_NEXT.format(4), used=1, remaining=98),
            ok([market(5), market(6)], used=1, remaining=97),
        )

        result = await client.search.markets(
            SearchParams(query="Los Angeles", limit=2, auto_paginate=True)
        )

        assert [m.parcl_id for m in result] == [1, 2, 3, 4, 5, 6]
        assert len(transport.sent) == 3
        assert client.account_info() == AccountUsage(
            est_session_credits_used=3, est_remaining_credits=97
        )

    @pytest.mark.asyncio
    async def test_throttling_exhausts_retries(self, client, transport, sleep, throttled):
        transport.queue(*(throttled() for _ in range(4)))

        with pytest.raises(RateLimitedError) as exc_info:
            await client.search.markets(SearchParams(query="Los Angeles"))

        assert exc_info.value.attempts == 4
        assert sleep.delays == [1.0, 2.0, 4.0]

    @pytest.mark.asyncio
    async def test_with_retry_config_applies_to_groups(self, client, transport, sleep, throttled):
        client.with_retry_config(RetryConfig(max_retries=1, initial_backoff=0.5))
        transport.queue(throttled(), throttled())

        with pytest.raises(RateLimitedError):
            await client.search.markets(SearchParams(query="Los Angeles"))

        assert sleep.delays == [0.5]

    @pytest.mark.asyncio
    async def test_with_retry_config_reaches_groups_taken_earlier(
        self, client, transport, sleep, throttled
    ):
        search = client.search
        client.with_retry_config(RetryConfig(max_retries=2, initial_backoff=0.25))
        transport.queue(*(throttled() for _ in range(3)))

        with pytest.raises(RateLimitedError) as exc_info:
            await search.markets(SearchParams(query="Los Angeles"))

        assert search is client.search
        assert exc_info.value.attempts == 3
        assert sleep.delays == [0.25, 0.5]

    @pytest.mark.asyncio
    async def test_credits_survive_across_calls(self, client, transport, ok):
        transport.queue(ok([], used=2, remaining=10), ok([], used=3, remaining=7))

        await client.search.markets()
        await client.search.markets()

        assert client.session_credits_used() == 5
        assert client.remaining_credits() == 7


class TestGenericFetch:
    """Test registry-driven fetch."""

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, client):
        with pytest.raises(ValueError, match="Unknown REST endpoint"):
            await client.fetch("nope.nothing", {})

    @pytest.mark.asyncio
    async def test_unknown_batch_endpoint(self, client):
        with pytest.raises(ValueError, match="Unknown REST endpoint"):
            await client.fetch_batch("nope.nothing", [1], {})

    @pytest.mark.asyncio
    async def test_fetch_by_id(self, client, transport, ok):
        transport.queue(ok([market(7)]))

        result = await client.fetch(
            "search.markets",
            {"params": SearchParams(query="Austin")},
            pagination=PaginationConfig(limit=1),
        )

        assert transport.sent[0].query == {"query": "Austin", "limit": 1}
        assert result.items[0].parcl_id == 7

    @pytest.mark.asyncio
    async def test_fetch_batch_by_id(self, client, transport, ok):
        transport.queue(ok([{"parcl_id": 1, "date": "2024-01-01", "price": 250.0}]))

        result = await client.fetch_batch(
            "price_feed.batch_history", [1], {"params": MetricsParams(start_date="2024-01-01")}
        )

        assert transport.sent[0].body == {"start_date": "2024-01-01", "parcl_id": [1]}
        assert result.identifiers == [1]


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, transport):
        async with ParclClient("k", transport=transport):
            pass
        assert transport.closed
