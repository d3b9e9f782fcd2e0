"""Request parameter containers for endpoint wrappers.

Each container maps caller-facing options onto the wire: ``to_query()`` for
GET endpoints and ``to_batch_body()`` for the POST batch variants. The page
window (``limit``/``offset``) and the client-side paging options
(``auto_paginate``, ``max_pages``, ``max_items``) are not part of either;
they travel through ``pagination()`` so the paging layer can apply them to
whichever request shape the endpoint uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.enums import (
    EntityOwnerName,
    EventType,
    LocationType,
    PortfolioSize,
    PropertyType,
    SortBy,
    SortOrder,
    USRegion,
)
from ..core.exceptions import InvalidParameterError
from ..runtime.paging import PaginationConfig


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


def _compact(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields and normalise enums and flags to wire values."""
    return {name: _wire(value) for name, value in fields.items() if value is not None}


@dataclass(frozen=True, kw_only=True)
class _Paging:
    limit: int | None = None
    offset: int | None = None
    auto_paginate: bool = False
    max_pages: int | None = None
    max_items: int | None = None

    def pagination(self) -> PaginationConfig:
        try:
            return PaginationConfig(
                auto_paginate=self.auto_paginate,
                limit=self.limit,
                offset=self.offset,
                max_pages=self.max_pages,
                max_items=self.max_items,
            )
        except ValueError as e:
            raise InvalidParameterError(str(e)) from e


@dataclass(frozen=True, kw_only=True)
class MetricsParams(_Paging):
    """Parameters shared by market, investor, for-sale, rental,
    new-construction and price feed metric endpoints.

    Attributes:
        start_date: Earliest date to include (YYYY-MM-DD)
        end_date: Latest date to include (YYYY-MM-DD)
        property_type: Restrict to one property type
    """

    start_date: str | None = None
    end_date: str | None = None
    property_type: PropertyType | None = None

    def to_query(self) -> dict[str, Any]:
        return _compact(
            {
                "start_date": self.start_date,
                "end_date": self.end_date,
                "property_type": self.property_type,
            }
        )

    def to_batch_body(self) -> dict[str, Any]:
        return self.to_query()


@dataclass(frozen=True, kw_only=True)
class PortfolioMetricsParams(_Paging):
    """Parameters for portfolio metric endpoints."""

    start_date: str | None = None
    end_date: str | None = None
    portfolio_size: PortfolioSize | None = None

    def to_query(self) -> dict[str, Any]:
        return _compact(
            {
                "start_date": self.start_date,
                "end_date": self.end_date,
                "portfolio_size": self.portfolio_size,
            }
        )

    def to_batch_body(self) -> dict[str, Any]:
        return self.to_query()


@dataclass(frozen=True, kw_only=True)
class SearchParams(_Paging):
    """Parameters for market search.

    ``state_abbreviation`` is upper-cased on construction.
    """

    query: str | None = None
    location_type: LocationType | None = None
    region: USRegion | None = None
    state_abbreviation: str | None = None
    state_fips_code: str | None = None
    parcl_id: int | None = None
    geoid: str | None = None
    sort_by: SortBy | None = None
    sort_order: SortOrder | None = None

    def __post_init__(self) -> None:
        if self.state_abbreviation is not None:
            object.__setattr__(self, "state_abbreviation", self.state_abbreviation.upper())

    def to_query(self) -> dict[str, Any]:
        return _compact(
            {
                "query": self.query,
                "location_type": self.location_type,
                "region": self.region,
                "state_abbreviation": self.state_abbreviation,
                "state_fips_code": self.state_fips_code,
                "parcl_id": self.parcl_id,
                "geoid": self.geoid,
                "sort_by": self.sort_by,
                "sort_order": self.sort_order,
            }
        )

    def to_batch_body(self) -> dict[str, Any]:
        raise InvalidParameterError("Market search has no batch variant")


@dataclass(frozen=True, kw_only=True)
class PropertySearchParams(_Paging):
    """Filters for property search within one market.

    ``parcl_id`` and ``property_type`` are required by the API. Boolean
    flags are sent as 0/1.
    """

    parcl_id: int
    property_type: PropertyType
    square_footage_min: int | None = None
    square_footage_max: int | None = None
    bedrooms_min: int | None = None
    bedrooms_max: int | None = None
    bathrooms_min: int | None = None
    bathrooms_max: int | None = None
    year_built_min: int | None = None
    year_built_max: int | None = None
    current_entity_owner_name: EntityOwnerName | None = None
    event_history_sale_flag: bool | None = None
    event_history_rental_flag: bool | None = None
    event_history_listing_flag: bool | None = None
    current_new_construction_flag: bool | None = None
    current_owner_occupied_flag: bool | None = None
    current_investor_owned_flag: bool | None = None
    current_on_market_flag: bool | None = None
    current_on_market_rental_flag: bool | None = None
    record_added_date_start: str | None = None
    record_added_date_end: str | None = None

    def to_query(self) -> dict[str, Any]:
        return _compact(
            {
                "parcl_id": self.parcl_id,
                "property_type": self.property_type,
                "square_footage_min": self.square_footage_min,
                "square_footage_max": self.square_footage_max,
                "bedrooms_min": self.bedrooms_min,
                "bedrooms_max": self.bedrooms_max,
                "bathrooms_min": self.bathrooms_min,
                "bathrooms_max": self.bathrooms_max,
                "year_built_min": self.year_built_min,
                "year_built_max": self.year_built_max,
                "current_entity_owner_name": self.current_entity_owner_name,
                "event_history_sale_flag": self.event_history_sale_flag,
                "event_history_rental_flag": self.event_history_rental_flag,
                "event_history_listing_flag": self.event_history_listing_flag,
                "current_new_construction_flag": self.current_new_construction_flag,
                "current_owner_occupied_flag": self.current_owner_occupied_flag,
                "current_investor_owned_flag": self.current_investor_owned_flag,
                "current_on_market_flag": self.current_on_market_flag,
                "current_on_market_rental_flag": self.current_on_market_rental_flag,
                "record_added_date_start": self.record_added_date_start,
                "record_added_date_end": self.record_added_date_end,
            }
        )

    def to_batch_body(self) -> dict[str, Any]:
        raise InvalidParameterError("Property search has no batch variant")


@dataclass(frozen=True, kw_only=True)
class EventHistoryParams(_Paging):
    """Filters for property event history.

    The property identifiers themselves are passed to the wrapper and sent
    under ``parcl_property_id`` in chunks of at most 1000.
    """

    event_type: EventType | None = None
    start_date: str | None = None
    end_date: str | None = None
    entity_owner_name: EntityOwnerName | None = None
    record_updated_date_start: str | None = None
    record_updated_date_end: str | None = None

    def to_query(self) -> dict[str, Any]:
        return {}

    def to_batch_body(self) -> dict[str, Any]:
        return _compact(
            {
                "event_type": self.event_type,
                "start_date": self.start_date,
                "end_date": self.end_date,
                "entity_owner_name": self.entity_owner_name,
                "record_updated_date_start": self.record_updated_date_start,
                "record_updated_date_end": self.record_updated_date_end,
            }
        )
