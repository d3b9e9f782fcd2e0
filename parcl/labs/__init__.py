"""Parcl Labs - Async client for the Parcl Labs real estate data API."""

from .client import ParclClient
from .core import (
    ApiError,
    DecodeError,
    DecodeShape,
    EntityOwnerName,
    EventType,
    InvalidParameterError,
    LocationType,
    MissingCredentialsError,
    ParclError,
    PortfolioSize,
    PropertyType,
    RateLimitedError,
    SortBy,
    SortOrder,
    StalledPaginationError,
    TransportError,
    USRegion,
)
from .endpoints import (
    EventHistoryParams,
    MetricsParams,
    PortfolioMetricsParams,
    PropertySearchParams,
    SearchParams,
)
from .models import (
    AccountUsage,
    AddressSearchRequest,
    CreditUsageRecord,
    GeoCoordinates,
    Market,
    OwnerFilters,
    PropertyFilters,
    PropertyV2SearchRequest,
    V2EventFilters,
)
from .runtime import AggregatedResult, PaginationConfig, RetryConfig

__version__ = "0.1.0"

__all__ = [
    # Client
    "ParclClient",
    "RetryConfig",
    "PaginationConfig",
    "AggregatedResult",
    # Parameters
    "SearchParams",
    "MetricsParams",
    "PortfolioMetricsParams",
    "PropertySearchParams",
    "EventHistoryParams",
    # Models
    "AccountUsage",
    "AddressSearchRequest",
    "CreditUsageRecord",
    "Market",
    "PropertyV2SearchRequest",
    "GeoCoordinates",
    "PropertyFilters",
    "V2EventFilters",
    "OwnerFilters",
    # Enums
    "DecodeShape",
    "EntityOwnerName",
    "EventType",
    "LocationType",
    "PortfolioSize",
    "PropertyType",
    "SortBy",
    "SortOrder",
    "USRegion",
    # Exceptions
    "ParclError",
    "TransportError",
    "ApiError",
    "RateLimitedError",
    "DecodeError",
    "StalledPaginationError",
    "MissingCredentialsError",
    "InvalidParameterError",
]
