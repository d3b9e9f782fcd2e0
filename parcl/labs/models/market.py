"""Market search result model."""

from pydantic import BaseModel, ConfigDict, Field


class Market(BaseModel):
    """A housing market returned from market search."""

    parcl_id: int
    name: str = Field(..., min_length=1)
    state_abbreviation: str | None = None
    state_fips_code: str | None = None
    location_type: str
    total_population: int | None = None
    median_income: int | None = None
    parcl_exchange_market: int | None = None
    pricefeed_market: int | None = None
    country: str | None = None
    geoid: str | None = None
    region: str | None = None
    case_shiller_10_market: int | None = None
    case_shiller_20_market: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    @property
    def is_exchange_market(self) -> bool:
        """Whether the market is tradeable on the Parcl exchange."""
        return self.parcl_exchange_market == 1

    @property
    def has_price_feed(self) -> bool:
        """Whether the market publishes a price feed."""
        return self.pricefeed_market == 1
