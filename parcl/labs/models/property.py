"""Property API models."""

from pydantic import BaseModel, ConfigDict, Field


class Property(BaseModel):
    """A property returned from the v1 property search endpoints."""

    parcl_property_id: int
    address: str | None = None
    unit: str | None = None
    city: str | None = None
    zip_code: str | None = None
    state_abbreviation: str | None = None
    county: str | None = None
    cbsa: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_footage: int | None = None
    year_built: int | None = None
    cbsa_parcl_id: int | None = None
    county_parcl_id: int | None = None
    city_parcl_id: int | None = None
    zip_parcl_id: int | None = None
    event_count: int | None = None
    event_history_sale_flag: int | None = None
    event_history_rental_flag: int | None = None
    event_history_listing_flag: int | None = None
    current_new_construction_flag: int | None = None
    current_owner_occupied_flag: int | None = None
    current_investor_owned_flag: int | None = None
    current_entity_owner_name: str | None = None
    current_on_market_flag: int | None = None
    current_on_market_rental_flag: int | None = None
    record_added_date: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PropertyMetadata(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_footage: int | None = None
    year_built: int | None = None
    property_type: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PropertyEvent(BaseModel):
    """A single sale, listing or rental event."""

    event_type: str | None = None
    event_name: str | None = None
    event_date: str | None = None
    price: int | None = None
    entity_owner_name: str | None = None
    investor_flag: int | None = None
    owner_occupied_flag: int | None = None
    new_construction_flag: int | None = None
    record_updated_date: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PropertyWithEvents(BaseModel):
    """A property with its event history."""

    parcl_property_id: int
    property_metadata: PropertyMetadata | None = None
    events: list[PropertyEvent] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")


class AddressSearchRequest(BaseModel):
    """One address to resolve to a ``parcl_property_id``."""

    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state_abbreviation: str = Field(..., min_length=2, max_length=2)
    zip_code: str = Field(..., min_length=5)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


# Property search v2


class PropertyV2Metadata(BaseModel):
    """Detailed property metadata returned by the v2 search."""

    bathrooms: float | None = None
    bedrooms: int | None = None
    sq_ft: int | None = None
    year_built: int | None = None
    property_type: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip5: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    city_name: str | None = None
    county_name: str | None = None
    metro_name: str | None = None
    record_added_date: str | None = None
    current_on_market_flag: int | None = None
    current_on_market_rental_flag: int | None = None
    current_new_construction_flag: int | None = None
    current_owner_occupied_flag: int | None = None
    current_investor_owned_flag: int | None = None
    current_entity_owner_name: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class PropertyV2Event(PropertyEvent):
    true_sale_index: int | None = None
    transfer_index: int | None = None
    current_owner_flag: int | None = None


class PropertyV2(BaseModel):
    """A property returned from the v2 search endpoint."""

    parcl_property_id: int
    property_metadata: PropertyV2Metadata | None = None
    events: list[PropertyV2Event] | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class GeoCoordinates(BaseModel):
    """Point-and-radius search area."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius_miles: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class PropertyFilters(BaseModel):
    include_property_details: bool | None = None
    property_types: list[str] | None = None
    min_beds: int | None = None
    max_beds: int | None = None
    min_baths: float | None = None
    max_baths: float | None = None
    min_sqft: int | None = None
    max_sqft: int | None = None
    min_year_built: int | None = None
    max_year_built: int | None = None
    current_entity_owner_name: str | None = None
    current_owner_occupied_flag: bool | None = None
    current_investor_owned_flag: bool | None = None
    current_on_market_flag: bool | None = None
    current_on_market_rental_flag: bool | None = None
    current_new_construction_flag: bool | None = None
    min_record_added_date: str | None = None
    max_record_added_date: str | None = None

    model_config = ConfigDict(frozen=True)


class V2EventFilters(BaseModel):
    event_names: list[str] | None = None
    min_event_date: str | None = None
    max_event_date: str | None = None
    min_event_price: int | None = None
    max_event_price: int | None = None
    include_events: bool | None = None
    include_full_event_history: bool | None = None
    is_new_construction: bool | None = None
    min_record_updated_date: str | None = None
    max_record_updated_date: str | None = None

    model_config = ConfigDict(frozen=True)


class OwnerFilters(BaseModel):
    owner_name: list[str] | None = None
    entity_seller_name: list[str] | None = None
    is_current_owner: bool | None = None
    is_investor_owned: bool | None = None
    is_owner_occupied: bool | None = None

    model_config = ConfigDict(frozen=True)


class PropertyV2SearchRequest(BaseModel):
    """Request body for the v2 property search.

    At least one of ``parcl_ids``, ``parcl_property_ids`` or
    ``geo_coordinates`` scopes the search; the filter groups narrow it.
    Unset fields are left out of the request body.
    """

    parcl_ids: list[int] | None = None
    parcl_property_ids: list[int] | None = None
    geo_coordinates: GeoCoordinates | None = None
    property_filters: PropertyFilters | None = None
    event_filters: V2EventFilters | None = None
    owner_filters: OwnerFilters | None = None

    model_config = ConfigDict(frozen=True)

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)
