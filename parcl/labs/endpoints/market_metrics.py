"""Market metrics endpoint definitions.

Housing event counts, stock, prices, all-cash share and the physical
attributes of transacted properties for a single market.
"""

from __future__ import annotations

from ..models import (
    AllCash,
    HousingEventCounts,
    HousingEventPrices,
    HousingEventPropertyAttributes,
    HousingStock,
)
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, metric_spec
from .params import MetricsParams

_GROUP = "market_metrics"

HOUSING_EVENT_COUNTS = metric_spec(_GROUP, "housing_event_counts", prefix=_GROUP)
HOUSING_STOCK = metric_spec(_GROUP, "housing_stock", prefix=_GROUP)
HOUSING_EVENT_PRICES = metric_spec(_GROUP, "housing_event_prices", prefix=_GROUP)
ALL_CASH = metric_spec(_GROUP, "all_cash", prefix=_GROUP)
HOUSING_EVENT_PROPERTY_ATTRIBUTES = metric_spec(
    _GROUP, "housing_event_property_attributes", prefix=_GROUP
)

SPECS = {
    HOUSING_EVENT_COUNTS.id: (HOUSING_EVENT_COUNTS, HousingEventCounts),
    HOUSING_STOCK.id: (HOUSING_STOCK, HousingStock),
    HOUSING_EVENT_PRICES.id: (HOUSING_EVENT_PRICES, HousingEventPrices),
    ALL_CASH.id: (ALL_CASH, AllCash),
    HOUSING_EVENT_PROPERTY_ATTRIBUTES.id: (
        HOUSING_EVENT_PROPERTY_ATTRIBUTES,
        HousingEventPropertyAttributes,
    ),
}


class MarketMetrics(MetricsEndpointGroup):
    """Housing market metrics for one market at a time."""

    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventCounts]:
        """Monthly counts of sales, new listings for sale and new rental listings."""
        return await self._fetch(HOUSING_EVENT_COUNTS, HousingEventCounts, parcl_id, params)

    async def housing_stock(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingStock]:
        """Housing stock by property type."""
        return await self._fetch(HOUSING_STOCK, HousingStock, parcl_id, params)

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPrices]:
        """Median sale, list and rental prices plus price per square foot."""
        return await self._fetch(HOUSING_EVENT_PRICES, HousingEventPrices, parcl_id, params)

    async def all_cash(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[AllCash]:
        """Count and share of all-cash transactions."""
        return await self._fetch(ALL_CASH, AllCash, parcl_id, params)

    async def housing_event_property_attributes(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPropertyAttributes]:
        """Physical attributes (beds, baths, size, age) of transacted properties."""
        return await self._fetch(
            HOUSING_EVENT_PROPERTY_ATTRIBUTES, HousingEventPropertyAttributes, parcl_id, params
        )
