"""Property endpoint definitions.

Property search within a market, lookup by street address, event history
for lists of property identifiers, and the nested-filter v2 search.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..config import DEFAULT_MAX_BATCH_SIZE
from ..core.exceptions import InvalidParameterError
from ..models import (
    AddressSearchRequest,
    Property,
    PropertyV2,
    PropertyV2SearchRequest,
    PropertyWithEvents,
)
from ..runtime.paging import AggregatedResult, PaginationConfig
from ..runtime.runner import RestEndpointSpec, RestRunner
from .params import EventHistoryParams, PropertySearchParams


def build_search_query(params: dict[str, Any]) -> dict[str, Any]:
    search: PropertySearchParams = params["params"]
    return search.to_query()


def build_address_body(params: dict[str, Any]) -> list[dict[str, Any]]:
    addresses: Sequence[AddressSearchRequest] = params["addresses"]
    return [address.model_dump() for address in addresses]


def build_event_history_body(params: dict[str, Any]) -> dict[str, Any]:
    history: EventHistoryParams = params["params"]
    return history.to_batch_body()


def build_search_v2_body(params: dict[str, Any]) -> dict[str, Any]:
    request: PropertyV2SearchRequest = params["request"]
    return request.to_body()


SEARCH = RestEndpointSpec(
    id="property.search",
    method="GET",
    build_path=lambda params: "/v1/property/search",
    build_query=build_search_query,
)

SEARCH_ADDRESS = RestEndpointSpec(
    id="property.search_address",
    method="POST",
    build_path=lambda params: "/v1/property/search_address",
    build_body=build_address_body,
)

EVENT_HISTORY = RestEndpointSpec(
    id="property.event_history",
    method="POST",
    build_path=lambda params: "/v1/property/event_history",
    build_body=build_event_history_body,
    items_field="properties",
    id_field="parcl_property_id",
    id_key="parcl_property_id",
    max_batch_size=DEFAULT_MAX_BATCH_SIZE,
)

SEARCH_V2 = RestEndpointSpec(
    id="property.search_v2",
    method="POST",
    build_path=lambda params: "/v2/property_search",
    build_body=build_search_v2_body,
    items_field="properties",
    window_in_query=True,
)

SPECS = {
    SEARCH.id: (SEARCH, Property),
    SEARCH_ADDRESS.id: (SEARCH_ADDRESS, Property),
    EVENT_HISTORY.id: (EVENT_HISTORY, PropertyWithEvents),
    SEARCH_V2.id: (SEARCH_V2, PropertyV2),
}


class PropertyEndpoints:
    """Property-level search and history."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def search(self, params: PropertySearchParams) -> AggregatedResult[Property]:
        """Search properties in one market by physical and ownership filters."""
        return await self._runner.run(
            spec=SEARCH,
            model=Property,
            params={"params": params},
            pagination=params.pagination(),
        )

    async def search_by_address(
        self, addresses: Sequence[AddressSearchRequest]
    ) -> AggregatedResult[Property]:
        """Look up property identifiers by street address."""
        if not addresses:
            raise InvalidParameterError("At least one address is required")
        return await self._runner.run(
            spec=SEARCH_ADDRESS,
            model=Property,
            params={"addresses": list(addresses)},
        )

    async def event_history(
        self,
        parcl_property_ids: Sequence[int],
        params: EventHistoryParams | None = None,
    ) -> AggregatedResult[PropertyWithEvents]:
        """Sale, listing and rental events for each property.

        Identifier lists longer than 1000 are split across requests; results
        are merged in input order.
        """
        params = params if params is not None else EventHistoryParams()
        return await self._runner.run_batch(
            spec=EVENT_HISTORY,
            model=PropertyWithEvents,
            ids=parcl_property_ids,
            params={"params": params},
            pagination=params.pagination(),
        )

    async def search_v2(
        self,
        request: PropertyV2SearchRequest,
        *,
        limit: int | None = None,
        offset: int | None = None,
        auto_paginate: bool = False,
        max_pages: int | None = None,
    ) -> AggregatedResult[PropertyV2]:
        """Search properties with nested property, event and owner filters.

        The filters travel in the JSON body; ``limit`` and ``offset`` are sent
        in the query string.
        """
        try:
            pagination = PaginationConfig(
                auto_paginate=auto_paginate, limit=limit, offset=offset, max_pages=max_pages
            )
        except ValueError as e:
            raise InvalidParameterError(str(e)) from e
        return await self._runner.run(
            spec=SEARCH_V2,
            model=PropertyV2,
            params={"request": request},
            pagination=pagination,
        )
