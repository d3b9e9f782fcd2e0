"""Investor metrics endpoint definitions.

Institutional and individual investor activity per market, each with a
multi-market batch variant.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import (
    HousingEventPrices,
    InvestorHousingEventCounts,
    InvestorHousingStockOwnership,
    InvestorNewListingsRollingCounts,
    InvestorPurchaseToSaleRatio,
)
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import MetricsParams

_GROUP = "investor_metrics"

HOUSING_STOCK_OWNERSHIP = metric_spec(_GROUP, "housing_stock_ownership", prefix=_GROUP)
PURCHASE_TO_SALE_RATIO = metric_spec(_GROUP, "purchase_to_sale_ratio", prefix=_GROUP)
HOUSING_EVENT_COUNTS = metric_spec(_GROUP, "housing_event_counts", prefix=_GROUP)
HOUSING_EVENT_PRICES = metric_spec(_GROUP, "housing_event_prices", prefix=_GROUP)
NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS = metric_spec(
    _GROUP, "new_listings_for_sale_rolling_counts", prefix=_GROUP
)

BATCH_HOUSING_STOCK_OWNERSHIP = batch_metric_spec(_GROUP, "housing_stock_ownership", prefix=_GROUP)
BATCH_PURCHASE_TO_SALE_RATIO = batch_metric_spec(_GROUP, "purchase_to_sale_ratio", prefix=_GROUP)
BATCH_HOUSING_EVENT_COUNTS = batch_metric_spec(_GROUP, "housing_event_counts", prefix=_GROUP)
BATCH_HOUSING_EVENT_PRICES = batch_metric_spec(_GROUP, "housing_event_prices", prefix=_GROUP)
BATCH_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS = batch_metric_spec(
    _GROUP, "new_listings_for_sale_rolling_counts", prefix=_GROUP
)

SPECS = {
    spec.id: (spec, model)
    for spec, model in (
        (HOUSING_STOCK_OWNERSHIP, InvestorHousingStockOwnership),
        (PURCHASE_TO_SALE_RATIO, InvestorPurchaseToSaleRatio),
        (HOUSING_EVENT_COUNTS, InvestorHousingEventCounts),
        (HOUSING_EVENT_PRICES, HousingEventPrices),
        (NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS, InvestorNewListingsRollingCounts),
        (BATCH_HOUSING_STOCK_OWNERSHIP, InvestorHousingStockOwnership),
        (BATCH_PURCHASE_TO_SALE_RATIO, InvestorPurchaseToSaleRatio),
        (BATCH_HOUSING_EVENT_COUNTS, InvestorHousingEventCounts),
        (BATCH_HOUSING_EVENT_PRICES, HousingEventPrices),
        (BATCH_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS, InvestorNewListingsRollingCounts),
    )
}


class InvestorMetrics(MetricsEndpointGroup):
    """Investor ownership and transaction activity."""

    async def housing_stock_ownership(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorHousingStockOwnership]:
        return await self._fetch(
            HOUSING_STOCK_OWNERSHIP, InvestorHousingStockOwnership, parcl_id, params
        )

    async def purchase_to_sale_ratio(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorPurchaseToSaleRatio]:
        return await self._fetch(
            PURCHASE_TO_SALE_RATIO, InvestorPurchaseToSaleRatio, parcl_id, params
        )

    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorHousingEventCounts]:
        return await self._fetch(HOUSING_EVENT_COUNTS, InvestorHousingEventCounts, parcl_id, params)

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPrices]:
        return await self._fetch(HOUSING_EVENT_PRICES, HousingEventPrices, parcl_id, params)

    async def new_listings_for_sale_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorNewListingsRollingCounts]:
        return await self._fetch(
            NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS, InvestorNewListingsRollingCounts, parcl_id, params
        )

    async def batch_housing_stock_ownership(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorHousingStockOwnership]:
        return await self._fetch_batch(
            BATCH_HOUSING_STOCK_OWNERSHIP, InvestorHousingStockOwnership, parcl_ids, params
        )

    async def batch_purchase_to_sale_ratio(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorPurchaseToSaleRatio]:
        return await self._fetch_batch(
            BATCH_PURCHASE_TO_SALE_RATIO, InvestorPurchaseToSaleRatio, parcl_ids, params
        )

    async def batch_housing_event_counts(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorHousingEventCounts]:
        return await self._fetch_batch(
            BATCH_HOUSING_EVENT_COUNTS, InvestorHousingEventCounts, parcl_ids, params
        )

    async def batch_housing_event_prices(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[HousingEventPrices]:
        return await self._fetch_batch(
            BATCH_HOUSING_EVENT_PRICES, HousingEventPrices, parcl_ids, params
        )

    async def batch_new_listings_for_sale_rolling_counts(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[InvestorNewListingsRollingCounts]:
        return await self._fetch_batch(
            BATCH_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS,
            InvestorNewListingsRollingCounts,
            parcl_ids,
            params,
        )
