"""Data models."""

from .account import AccountUsage, CreditUsageRecord
from .market import Market
from .metrics import (
    AllCash,
    EventPrices,
    ForSaleInventory,
    ForSaleInventoryPriceChanges,
    GrossYield,
    HousingEventCounts,
    HousingEventPrices,
    HousingEventPropertyAttributes,
    HousingStock,
    InvestorHousingEventCounts,
    InvestorHousingStockOwnership,
    InvestorNewListingsRollingCounts,
    InvestorPurchaseToSaleRatio,
    MetricRecord,
    NewListingsRollingCounts,
    PortfolioHousingEventCounts,
    PortfolioNewListingsRollingCounts,
    PortfolioRentalListingsRollingCounts,
    PortfolioSizeBreakdown,
    PortfolioSizePctBreakdown,
    PortfolioStockOwnership,
    PriceFeedEntry,
    PriceStats,
    RentalNewListingsRollingCounts,
    RentalUnitsConcentration,
    RollingCounts,
    RollingPercentages,
)
from .property import (
    AddressSearchRequest,
    GeoCoordinates,
    OwnerFilters,
    Property,
    PropertyEvent,
    PropertyFilters,
    PropertyMetadata,
    PropertyV2,
    PropertyV2Event,
    PropertyV2Metadata,
    PropertyV2SearchRequest,
    PropertyWithEvents,
    V2EventFilters,
)

__all__ = [
    "AccountUsage",
    "CreditUsageRecord",
    "Market",
    "MetricRecord",
    "RollingCounts",
    "RollingPercentages",
    "HousingEventCounts",
    "HousingStock",
    "EventPrices",
    "PriceStats",
    "HousingEventPrices",
    "AllCash",
    "HousingEventPropertyAttributes",
    "InvestorHousingStockOwnership",
    "InvestorPurchaseToSaleRatio",
    "InvestorHousingEventCounts",
    "InvestorNewListingsRollingCounts",
    "ForSaleInventory",
    "ForSaleInventoryPriceChanges",
    "NewListingsRollingCounts",
    "GrossYield",
    "RentalUnitsConcentration",
    "RentalNewListingsRollingCounts",
    "PortfolioSizeBreakdown",
    "PortfolioSizePctBreakdown",
    "PortfolioStockOwnership",
    "PortfolioHousingEventCounts",
    "PortfolioNewListingsRollingCounts",
    "PortfolioRentalListingsRollingCounts",
    "PriceFeedEntry",
    "Property",
    "PropertyMetadata",
    "PropertyEvent",
    "PropertyWithEvents",
    "AddressSearchRequest",
    "PropertyV2",
    "PropertyV2Metadata",
    "PropertyV2Event",
    "PropertyV2SearchRequest",
    "GeoCoordinates",
    "PropertyFilters",
    "V2EventFilters",
    "OwnerFilters",
]
