"""Price feed endpoint definitions for Parcl exchange markets."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import PriceFeedEntry
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import MetricsParams

_GROUP = "price_feed"

HISTORY = metric_spec(_GROUP, "history", prefix=_GROUP)
RENTAL_PRICE_FEED = metric_spec(_GROUP, "rental_price_feed", prefix=_GROUP)
BATCH_HISTORY = batch_metric_spec(_GROUP, "history", prefix=_GROUP)
BATCH_RENTAL_PRICE_FEED = batch_metric_spec(_GROUP, "rental_price_feed", prefix=_GROUP)

SPECS = {
    spec.id: (spec, PriceFeedEntry)
    for spec in (HISTORY, RENTAL_PRICE_FEED, BATCH_HISTORY, BATCH_RENTAL_PRICE_FEED)
}


class PriceFeed(MetricsEndpointGroup):
    """Daily price feed history for markets with ``pricefeed_market`` set."""

    async def history(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[PriceFeedEntry]:
        return await self._fetch(HISTORY, PriceFeedEntry, parcl_id, params)

    async def rental_history(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[PriceFeedEntry]:
        return await self._fetch(RENTAL_PRICE_FEED, PriceFeedEntry, parcl_id, params)

    async def batch_history(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[PriceFeedEntry]:
        return await self._fetch_batch(BATCH_HISTORY, PriceFeedEntry, parcl_ids, params)

    async def batch_rental_history(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[PriceFeedEntry]:
        return await self._fetch_batch(BATCH_RENTAL_PRICE_FEED, PriceFeedEntry, parcl_ids, params)
