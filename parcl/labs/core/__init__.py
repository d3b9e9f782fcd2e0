"""Core components."""

from .enums import (
    DecodeShape,
    EntityOwnerName,
    EventType,
    LocationType,
    PortfolioSize,
    PropertyType,
    SortBy,
    SortOrder,
    USRegion,
)
from .exceptions import (
    ApiError,
    DecodeError,
    InvalidParameterError,
    MissingCredentialsError,
    ParclError,
    RateLimitedError,
    StalledPaginationError,
    TransportError,
)

__all__ = [
    "DecodeShape",
    "LocationType",
    "USRegion",
    "SortBy",
    "SortOrder",
    "PropertyType",
    "PortfolioSize",
    "EventType",
    "EntityOwnerName",
    "ParclError",
    "TransportError",
    "ApiError",
    "RateLimitedError",
    "DecodeError",
    "StalledPaginationError",
    "MissingCredentialsError",
    "InvalidParameterError",
]
