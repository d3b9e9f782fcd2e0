"""Portfolio metrics endpoint definitions.

Single-family activity broken down by owner portfolio size.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import (
    PortfolioHousingEventCounts,
    PortfolioNewListingsRollingCounts,
    PortfolioRentalListingsRollingCounts,
    PortfolioStockOwnership,
)
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import PortfolioMetricsParams

_GROUP = "portfolio_metrics"

SF_HOUSING_STOCK_OWNERSHIP = metric_spec(_GROUP, "sf_housing_stock_ownership", prefix=_GROUP)
SF_HOUSING_EVENT_COUNTS = metric_spec(_GROUP, "sf_housing_event_counts", prefix=_GROUP)
SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS = metric_spec(
    _GROUP, "sf_new_listings_for_sale_rolling_counts", prefix=_GROUP
)
SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS = metric_spec(
    _GROUP, "sf_new_listings_for_rent_rolling_counts", prefix=_GROUP
)

BATCH_SF_HOUSING_STOCK_OWNERSHIP = batch_metric_spec(
    _GROUP, "sf_housing_stock_ownership", prefix=_GROUP
)
BATCH_SF_HOUSING_EVENT_COUNTS = batch_metric_spec(_GROUP, "sf_housing_event_counts", prefix=_GROUP)
BATCH_SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS = batch_metric_spec(
    _GROUP, "sf_new_listings_for_sale_rolling_counts", prefix=_GROUP
)
BATCH_SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS = batch_metric_spec(
    _GROUP, "sf_new_listings_for_rent_rolling_counts", prefix=_GROUP
)

SPECS = {
    spec.id: (spec, model)
    for spec, model in (
        (SF_HOUSING_STOCK_OWNERSHIP, PortfolioStockOwnership),
        (SF_HOUSING_EVENT_COUNTS, PortfolioHousingEventCounts),
        (SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS, PortfolioNewListingsRollingCounts),
        (SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS, PortfolioRentalListingsRollingCounts),
        (BATCH_SF_HOUSING_STOCK_OWNERSHIP, PortfolioStockOwnership),
        (BATCH_SF_HOUSING_EVENT_COUNTS, PortfolioHousingEventCounts),
        (BATCH_SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS, PortfolioNewListingsRollingCounts),
        (BATCH_SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS, PortfolioRentalListingsRollingCounts),
    )
}


class PortfolioMetrics(MetricsEndpointGroup):
    """Single-family metrics by portfolio size; filtered by ``portfolio_size``."""

    params_type = PortfolioMetricsParams

    async def sf_housing_stock_ownership(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioStockOwnership]:
        return await self._fetch(
            SF_HOUSING_STOCK_OWNERSHIP, PortfolioStockOwnership, parcl_id, params
        )

    async def sf_housing_event_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioHousingEventCounts]:
        return await self._fetch(
            SF_HOUSING_EVENT_COUNTS, PortfolioHousingEventCounts, parcl_id, params
        )

    async def sf_new_listings_for_sale_rolling_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioNewListingsRollingCounts]:
        return await self._fetch(
            SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS,
            PortfolioNewListingsRollingCounts,
            parcl_id,
            params,
        )

    async def sf_new_listings_for_rent_rolling_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioRentalListingsRollingCounts]:
        return await self._fetch(
            SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS,
            PortfolioRentalListingsRollingCounts,
            parcl_id,
            params,
        )

    async def batch_sf_housing_stock_ownership(
        self, parcl_ids: Sequence[int], params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioStockOwnership]:
        return await self._fetch_batch(
            BATCH_SF_HOUSING_STOCK_OWNERSHIP, PortfolioStockOwnership, parcl_ids, params
        )

    async def batch_sf_housing_event_counts(
        self, parcl_ids: Sequence[int], params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioHousingEventCounts]:
        return await self._fetch_batch(
            BATCH_SF_HOUSING_EVENT_COUNTS, PortfolioHousingEventCounts, parcl_ids, params
        )

    async def batch_sf_new_listings_for_sale_rolling_counts(
        self, parcl_ids: Sequence[int], params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioNewListingsRollingCounts]:
        return await self._fetch_batch(
            BATCH_SF_NEW_LISTINGS_FOR_SALE_ROLLING_COUNTS,
            PortfolioNewListingsRollingCounts,
            parcl_ids,
            params,
        )

    async def batch_sf_new_listings_for_rent_rolling_counts(
        self, parcl_ids: Sequence[int], params: PortfolioMetricsParams | None = None
    ) -> AggregatedResult[PortfolioRentalListingsRollingCounts]:
        return await self._fetch_batch(
            BATCH_SF_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS,
            PortfolioRentalListingsRollingCounts,
            parcl_ids,
            params,
        )
