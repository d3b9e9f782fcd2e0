"""Unit tests for batch planning and batch coordination."""

from __future__ import annotations

import pytest

from parcl.labs.core.exceptions import ApiError, InvalidParameterError
from parcl.labs.models import PriceFeedEntry
from parcl.labs.runtime.ledger import CreditLedger
from parcl.labs.runtime.paging import (
    BatchCoordinator,
    BatchPlanner,
    PaginationConfig,
    PaginationDriver,
    RequestDescriptor,
)
from parcl.labs.runtime.rest import BackoffController, RawResponse

TEMPLATE = RequestDescriptor(
    method="POST",
    path="/v1/price_feed/history",
    body={"start_date": "2024-01-01"},
    id_field="parcl_id",
    endpoint_id="price_feed.batch_history",
)


def entry(parcl_id: int, price: float = 100.0) -> dict:
    return {"parcl_id": parcl_id, "date": "2024-01-01", "price": price}


@pytest.fixture
def ledger():
    return CreditLedger()


@pytest.fixture
def coordinator(transport, sleep, ledger):
    driver = PaginationDriver(BackoffController(transport, sleep=sleep), ledger)
    return BatchCoordinator(driver)


class TestBatchPlanner:
    """Test identifier chunking."""

    def test_chunks_preserve_order(self):
        plans = BatchPlanner().plan([1, 2, 3, 4, 5], max_batch_size=2)

        assert [p.identifiers for p in plans] == [(1, 2), (3, 4), (5,)]
        assert [p.chunk_index for p in plans] == [0, 1, 2]

    def test_single_chunk_when_under_limit(self):
        plans = BatchPlanner().plan(["a", "b"], max_batch_size=1000)
        assert len(plans) == 1
        assert plans[0].identifiers == ("a", "b")

    def test_exact_multiple(self):
        plans = BatchPlanner().plan(list(range(6)), max_batch_size=3)
        assert [len(p.identifiers) for p in plans] == [3, 3]

    def test_empty_identifiers_rejected(self):
        with pytest.raises(InvalidParameterError, match="no identifiers"):
            BatchPlanner().plan([], max_batch_size=10)

    def test_invalid_batch_size_rejected(self):
        with pytest.raises(InvalidParameterError, match="max_batch_size"):
            BatchPlanner().plan([1], max_batch_size=0)


class TestBatchCoordinator:
    """Test chunk fan-out and result merging."""

    @pytest.mark.asyncio
    async def test_chunks_sent_in_order_with_shared_body(self, coordinator, transport, ok):
        transport.queue(
            ok([entry(1), entry(2)], used=2, remaining=98),
            ok([entry(3), entry(4)], used=2, remaining=96),
            ok([entry(5)], used=1, remaining=95),
        )

        result = await coordinator.fetch_batch([1, 2, 3, 4, 5], TEMPLATE, PriceFeedEntry, 2)

        assert [d.body for d in transport.sent] == [
            {"start_date": "2024-01-01", "parcl_id": [1, 2]},
            {"start_date": "2024-01-01", "parcl_id": [3, 4]},
            {"start_date": "2024-01-01", "parcl_id": [5]},
        ]
        assert all(d.method == "POST" for d in transport.sent)
        assert [e.parcl_id for e in result.items] == [1, 2, 3, 4, 5]
        assert result.identifiers == [1, 2, 3, 4, 5]
        assert result.pages_fetched == 3
        assert result.account.est_remaining_credits == 95

    @pytest.mark.asyncio
    async def test_account_from_last_chunk_even_when_absent(self, coordinator, transport, ok):
        transport.queue(ok([entry(1)], used=4, remaining=60), ok([entry(2)]))

        result = await coordinator.fetch_batch([1, 2], TEMPLATE, PriceFeedEntry, 1)

        assert result.account is None

    @pytest.mark.asyncio
    async def test_template_body_not_mutated(self, coordinator, transport, ok):
        transport.queue(ok([entry(1)]))

        await coordinator.fetch_batch([1], TEMPLATE, PriceFeedEntry, 10)

        assert TEMPLATE.body == {"start_date": "2024-01-01"}

    @pytest.mark.asyncio
    async def test_tagged_pairs_items_with_ids(self, coordinator, transport, ok):
        transport.queue(ok([entry(7, 10.0), entry(7, 11.0), entry(8, 20.0)]))

        result = await coordinator.fetch_batch([7, 8], TEMPLATE, PriceFeedEntry, 10)

        assert [(tag, e.price) for tag, e in result.tagged()] == [(7, 10.0), (7, 11.0), (8, 20.0)]

    @pytest.mark.asyncio
    async def test_custom_id_key(self, coordinator, transport, ok):
        transport.queue(ok([]))
        template = RequestDescriptor(method="POST", path="/v1/property/event_history", body={})

        await coordinator.fetch_batch([11, 12], template, PriceFeedEntry, 10, id_key="parcl_property_id")

        assert transport.sent[0].body == {"parcl_property_id": [11, 12]}

    @pytest.mark.asyncio
    async def test_chunk_paginates_with_get(self, coordinator, transport, ok):
        next_url = "https://api.parcllabs.com/v1/price_feed/history?offset=2&limit=2"
        transport.queue(ok([entry(1), entry(1)], next_url=next_url), ok([entry(2)]))

        result = await coordinator.fetch_batch(
            [1, 2], TEMPLATE, PriceFeedEntry, 10, PaginationConfig(auto_paginate=True, limit=2)
        )

        assert transport.sent[0].body["limit"] == 2
        assert transport.sent[1].method == "GET"
        assert transport.sent[1].path == next_url
        assert result.identifiers == [1, 1, 2]

    @pytest.mark.asyncio
    async def test_failing_chunk_fails_call(self, coordinator, transport, ledger, ok):
        transport.queue(
            ok([entry(1)], used=3, remaining=50),
            RawResponse(status=422, body="invalid parcl_id"),
        )

        with pytest.raises(ApiError) as exc_info:
            await coordinator.fetch_batch([1, 2], TEMPLATE, PriceFeedEntry, 1)

        assert exc_info.value.status_code == 422
        assert ledger.session_used() == 3

    @pytest.mark.asyncio
    async def test_empty_identifiers_send_nothing(self, coordinator, transport):
        with pytest.raises(InvalidParameterError):
            await coordinator.fetch_batch([], TEMPLATE, PriceFeedEntry, 10)

        assert transport.sent == []

    @pytest.mark.asyncio
    async def test_totals_summed_across_chunks(self, coordinator, transport, ok):
        transport.queue(ok([entry(1)], total=4), ok([entry(2)], total=6))

        result = await coordinator.fetch_batch([1, 2], TEMPLATE, PriceFeedEntry, 1)

        assert result.total == 10
