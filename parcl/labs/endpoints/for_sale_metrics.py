"""For-sale market metrics endpoint definitions."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import ForSaleInventory, ForSaleInventoryPriceChanges, NewListingsRollingCounts
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import MetricsParams

_GROUP = "for_sale_market_metrics"
_PREFIX = "for_sale_metrics"

FOR_SALE_INVENTORY = metric_spec(_GROUP, "for_sale_inventory", prefix=_PREFIX)
FOR_SALE_INVENTORY_PRICE_CHANGES = metric_spec(
    _GROUP, "for_sale_inventory_price_changes", prefix=_PREFIX
)
NEW_LISTINGS_ROLLING_COUNTS = metric_spec(_GROUP, "new_listings_rolling_counts", prefix=_PREFIX)

BATCH_FOR_SALE_INVENTORY = batch_metric_spec(_GROUP, "for_sale_inventory", prefix=_PREFIX)
BATCH_FOR_SALE_INVENTORY_PRICE_CHANGES = batch_metric_spec(
    _GROUP, "for_sale_inventory_price_changes", prefix=_PREFIX
)
BATCH_NEW_LISTINGS_ROLLING_COUNTS = batch_metric_spec(
    _GROUP, "new_listings_rolling_counts", prefix=_PREFIX
)

SPECS = {
    spec.id: (spec, model)
    for spec, model in (
        (FOR_SALE_INVENTORY, ForSaleInventory),
        (FOR_SALE_INVENTORY_PRICE_CHANGES, ForSaleInventoryPriceChanges),
        (NEW_LISTINGS_ROLLING_COUNTS, NewListingsRollingCounts),
        (BATCH_FOR_SALE_INVENTORY, ForSaleInventory),
        (BATCH_FOR_SALE_INVENTORY_PRICE_CHANGES, ForSaleInventoryPriceChanges),
        (BATCH_NEW_LISTINGS_ROLLING_COUNTS, NewListingsRollingCounts),
    )
}


class ForSaleMetrics(MetricsEndpointGroup):
    """Inventory, price-change and new-listing metrics for homes on the market."""

    async def for_sale_inventory(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[ForSaleInventory]:
        """Total count of properties currently listed for sale."""
        return await self._fetch(FOR_SALE_INVENTORY, ForSaleInventory, parcl_id, params)

    async def for_sale_inventory_price_changes(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[ForSaleInventoryPriceChanges]:
        """Price cuts and increases across the listed inventory."""
        return await self._fetch(
            FOR_SALE_INVENTORY_PRICE_CHANGES, ForSaleInventoryPriceChanges, parcl_id, params
        )

    async def new_listings_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[NewListingsRollingCounts]:
        """Rolling 7/30/60/90 day counts of new for-sale listings."""
        return await self._fetch(
            NEW_LISTINGS_ROLLING_COUNTS, NewListingsRollingCounts, parcl_id, params
        )

    async def batch_for_sale_inventory(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[ForSaleInventory]:
        return await self._fetch_batch(BATCH_FOR_SALE_INVENTORY, ForSaleInventory, parcl_ids, params)

    async def batch_for_sale_inventory_price_changes(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[ForSaleInventoryPriceChanges]:
        return await self._fetch_batch(
            BATCH_FOR_SALE_INVENTORY_PRICE_CHANGES, ForSaleInventoryPriceChanges, parcl_ids, params
        )

    async def batch_new_listings_rolling_counts(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[NewListingsRollingCounts]:
        return await self._fetch_batch(
            BATCH_NEW_LISTINGS_ROLLING_COUNTS, NewListingsRollingCounts, parcl_ids, params
        )
