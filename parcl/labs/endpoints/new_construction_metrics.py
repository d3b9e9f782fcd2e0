"""New construction metrics endpoint definitions.

Same item shapes as the general market counts and prices, restricted to
newly built homes.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import HousingEventCounts, HousingEventPrices
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import MetricsParams

_GROUP = "new_construction_metrics"

HOUSING_EVENT_COUNTS = metric_spec(_GROUP, "housing_event_counts", prefix=_GROUP)
HOUSING_EVENT_PRICES = metric_spec(_GROUP, "housing_event_prices", prefix=_GROUP)
BATCH_HOUSING_EVENT_COUNTS = batch_metric_spec(_GROUP, "housing_event_counts", prefix=_GROUP)
BATCH_HOUSING_EVENT_PRICES = batch_metric_spec(_GROUP, "housing_event_prices", prefix=_GROUP)

SPECS = {
    spec.id: (spec, model)
    for spec, model in (
        (HOUSING_EVENT_COUNTS, HousingEventCounts),
        (HOUSING_EVENT_PRICES, HousingEventPrices),
        (BATCH_HOUSING_EVENT_COUNTS, HousingEventCounts),
        (BATCH_HOUSING_EVENT_PRICES, HousingEventPrices),
    )
}


class NewConstructionMetrics(MetricsEndpointGroup):
    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventCounts]:
        return await self._fetch(HOUSING_EVENT_COUNTS, HousingEventCounts, parcl_id, params)

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPrices]:
        return await self._fetch(HOUSING_EVENT_PRICES, HousingEventPrices, parcl_id, params)

    async def batch_housing_event_counts(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventCounts]:
        return await self._fetch_batch(
            BATCH_HOUSING_EVENT_COUNTS, HousingEventCounts, parcl_ids, params
        )

    async def batch_housing_event_prices(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPrices]:
        return await self._fetch_batch(
            BATCH_HOUSING_EVENT_PRICES, HousingEventPrices, parcl_ids, params
        )
