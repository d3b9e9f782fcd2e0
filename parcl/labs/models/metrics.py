"""Metric series item models.

Every metric endpoint returns a dated series. Batch endpoints tag each item
with the ``parcl_id`` it belongs to, so the field lives on the shared base and
stays ``None`` for single-market calls.
"""

from pydantic import BaseModel, ConfigDict, Field


class MetricRecord(BaseModel):
    """Base for all dated metric items."""

    date: str
    parcl_id: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class RollingCounts(BaseModel):
    """Counts over 7/30/60/90 day windows."""

    rolling_7_day: int | None = None
    rolling_30_day: int | None = None
    rolling_60_day: int | None = None
    rolling_90_day: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RollingPercentages(BaseModel):
    """Percentages over 7/30/60/90 day windows."""

    rolling_7_day: float | None = None
    rolling_30_day: float | None = None
    rolling_60_day: float | None = None
    rolling_90_day: float | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


# Market metrics


class HousingEventCounts(MetricRecord):
    sales: int | None = None
    new_listings_for_sale: int | None = None
    new_rental_listings: int | None = None


class HousingStock(MetricRecord):
    single_family: int | None = None
    condo: int | None = None
    townhouse: int | None = None
    other: int | None = None
    all_properties: int | None = None


class EventPrices(BaseModel):
    sales: float | None = None
    new_listings_for_sale: float | None = None
    new_rental_listings: float | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PriceStats(BaseModel):
    median: EventPrices | None = None
    standard_deviation: EventPrices | None = None
    percentile_20th: EventPrices | None = None
    percentile_80th: EventPrices | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class HousingEventPrices(MetricRecord):
    price: PriceStats | None = None
    price_per_square_foot: PriceStats | None = None


class AllCash(MetricRecord):
    """All-cash transaction counts and shares."""

    count_sales: int | None = None
    pct_sales: float | None = None
    count_transfers: int | None = None
    pct_transfers: float | None = None


class HousingEventPropertyAttributes(MetricRecord):
    """Median physical attributes of properties involved in housing events."""

    beds: int | None = None
    baths: float | None = None
    sqft: int | None = None
    lot_size: int | None = None
    year_built: int | None = None


# Investor metrics


class InvestorHousingStockOwnership(MetricRecord):
    investor_owned_count: int | None = Field(default=None, alias="count")
    investor_owned_pct: float | None = Field(default=None, alias="pct_ownership")


class InvestorPurchaseToSaleRatio(MetricRecord):
    acquisitions: int | None = None
    dispositions: int | None = None
    purchase_to_sale_ratio: float | None = None


class InvestorHousingEventCounts(MetricRecord):
    acquisitions: int | None = None
    dispositions: int | None = None
    new_listings_for_sale: int | None = None
    new_rental_listings: int | None = None


class InvestorNewListingsRollingCounts(MetricRecord):
    count: RollingCounts | None = None
    pct_for_sale_market: RollingPercentages | None = None


# For-sale metrics


class ForSaleInventory(MetricRecord):
    for_sale_inventory: int | None = None


class ForSaleInventoryPriceChanges(MetricRecord):
    count_price_change: int | None = None
    count_price_drop: int | None = None
    median_days_bt_price_change: float | None = Field(
        default=None, alias="median_days_bt_change"
    )
    median_price_change: float | None = None
    median_pct_price_change: float | None = None
    pct_price_change: float | None = Field(default=None, alias="pct_inventory_price_change")
    pct_price_drop: float | None = Field(default=None, alias="pct_inventory_price_drop")


class NewListingsRollingCounts(MetricRecord):
    rolling_7_day_count: int | None = Field(default=None, alias="rolling_7_day")
    rolling_30_day_count: int | None = Field(default=None, alias="rolling_30_day")
    rolling_60_day_count: int | None = Field(default=None, alias="rolling_60_day")
    rolling_90_day_count: int | None = Field(default=None, alias="rolling_90_day")


# Rental metrics


class GrossYield(MetricRecord):
    gross_yield: float | None = None


class RentalUnitsConcentration(MetricRecord):
    rental_units_concentration: float | None = None


class RentalNewListingsRollingCounts(NewListingsRollingCounts):
    pass


# Portfolio metrics


class PortfolioSizeBreakdown(BaseModel):
    portfolio_2_to_9: int | None = None
    portfolio_10_to_99: int | None = None
    portfolio_100_to_999: int | None = None
    portfolio_1000_plus: int | None = None
    all_portfolios: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PortfolioSizePctBreakdown(BaseModel):
    portfolio_2_to_9: float | None = None
    portfolio_10_to_99: float | None = None
    portfolio_100_to_999: float | None = None
    portfolio_1000_plus: float | None = None
    all_portfolios: float | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PortfolioStockOwnership(MetricRecord):
    count: PortfolioSizeBreakdown | None = None
    pct_sf_housing_stock: PortfolioSizePctBreakdown | None = None


class PortfolioHousingEventCounts(MetricRecord):
    acquisitions: int | None = None
    dispositions: int | None = None
    new_listings_for_sale: int | None = None
    new_rental_listings: int | None = None
    transfers: int | None = None


class PortfolioNewListingsRollingCounts(MetricRecord):
    count: RollingCounts | None = None
    pct_sf_for_sale_market: RollingPercentages | None = None


class PortfolioRentalListingsRollingCounts(MetricRecord):
    count: RollingCounts | None = None
    pct_sf_for_rent_market: RollingPercentages | None = None


# Price feed


class PriceFeedEntry(MetricRecord):
    price: float
    price_feed_type: str | None = None
