"""Rental market metrics endpoint definitions."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import GrossYield, RentalNewListingsRollingCounts, RentalUnitsConcentration
from ..runtime.paging import AggregatedResult
from .common import MetricsEndpointGroup, batch_metric_spec, metric_spec
from .params import MetricsParams

_GROUP = "rental_market_metrics"
_PREFIX = "rental_metrics"

GROSS_YIELD = metric_spec(_GROUP, "gross_yield", prefix=_PREFIX)
RENTAL_UNITS_CONCENTRATION = metric_spec(_GROUP, "rental_units_concentration", prefix=_PREFIX)
NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS = metric_spec(
    _GROUP, "new_listings_for_rent_rolling_counts", prefix=_PREFIX
)

BATCH_GROSS_YIELD = batch_metric_spec(_GROUP, "gross_yield", prefix=_PREFIX)
BATCH_RENTAL_UNITS_CONCENTRATION = batch_metric_spec(
    _GROUP, "rental_units_concentration", prefix=_PREFIX
)
BATCH_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS = batch_metric_spec(
    _GROUP, "new_listings_for_rent_rolling_counts", prefix=_PREFIX
)

SPECS = {
    spec.id: (spec, model)
    for spec, model in (
        (GROSS_YIELD, GrossYield),
        (RENTAL_UNITS_CONCENTRATION, RentalUnitsConcentration),
        (NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS, RentalNewListingsRollingCounts),
        (BATCH_GROSS_YIELD, GrossYield),
        (BATCH_RENTAL_UNITS_CONCENTRATION, RentalUnitsConcentration),
        (BATCH_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS, RentalNewListingsRollingCounts),
    )
}


class RentalMetrics(MetricsEndpointGroup):
    """Rental yield, concentration and listing activity."""

    async def gross_yield(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[GrossYield]:
        """Annual rental income divided by median sale price."""
        return await self._fetch(GROSS_YIELD, GrossYield, parcl_id, params)

    async def rental_units_concentration(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[RentalUnitsConcentration]:
        """Share of housing stock that are rental units."""
        return await self._fetch(
            RENTAL_UNITS_CONCENTRATION, RentalUnitsConcentration, parcl_id, params
        )

    async def new_listings_for_rent_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> AggregatedResult[RentalNewListingsRollingCounts]:
        return await self._fetch(
            NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS, RentalNewListingsRollingCounts, parcl_id, params
        )

    async def batch_gross_yield(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[GrossYield]:
        return await self._fetch_batch(BATCH_GROSS_YIELD, GrossYield, parcl_ids, params)

    async def batch_rental_units_concentration(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[RentalUnitsConcentration]:
        return await self._fetch_batch(
            BATCH_RENTAL_UNITS_CONCENTRATION, RentalUnitsConcentration, parcl_ids, params
        )

    async def batch_new_listings_for_rent_rolling_counts(
        self, parcl_ids: Sequence[int], params: MetricsParams | None = None
    ) -> AggregatedResult[RentalNewListingsRollingCounts]:
        return await self._fetch_batch(
            BATCH_NEW_LISTINGS_FOR_RENT_ROLLING_COUNTS,
            RentalNewListingsRollingCounts,
            parcl_ids,
            params,
        )
