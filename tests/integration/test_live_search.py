"""Live smoke tests against the Parcl Labs API.

These spend a handful of credits on the account behind PARCL_LABS_API_KEY.
"""

import pytest

from parcl.labs import LocationType, ParclClient, SearchParams


@pytest.mark.asyncio
async def test_search_los_angeles():
    async with ParclClient() as client:
        result = await client.search.markets(
            SearchParams(query="Los Angeles", location_type=LocationType.CITY, limit=5)
        )

    assert 0 < len(result) <= 5
    assert any("Los Angeles" in market.name for market in result)
    assert client.session_credits_used() >= 0


@pytest.mark.asyncio
async def test_auto_paginate_respects_max_pages():
    async with ParclClient() as client:
        result = await client.search.markets(
            SearchParams(query="Springfield", limit=2, auto_paginate=True, max_pages=2)
        )

    assert result.pages_fetched <= 2
    assert len(result) <= 4
