"""Parcl Labs REST endpoint registry.

This module collects the endpoint specifications and item models of every
endpoint group and exports the group wrappers used by the client.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..runtime.runner import RestEndpointSpec
from . import (
    for_sale_metrics,
    investor_metrics,
    market_metrics,
    new_construction_metrics,
    portfolio_metrics,
    price_feed,
    property,
    rental_metrics,
    search,
)
from .for_sale_metrics import ForSaleMetrics
from .investor_metrics import InvestorMetrics
from .market_metrics import MarketMetrics
from .new_construction_metrics import NewConstructionMetrics
from .params import (
    EventHistoryParams,
    MetricsParams,
    PortfolioMetricsParams,
    PropertySearchParams,
    SearchParams,
)
from .portfolio_metrics import PortfolioMetrics
from .price_feed import PriceFeed
from .property import PropertyEndpoints
from .rental_metrics import RentalMetrics
from .search import Search

# Registry mapping endpoint IDs to specs and item models
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[BaseModel]]] = {
    **search.SPECS,
    **market_metrics.SPECS,
    **investor_metrics.SPECS,
    **for_sale_metrics.SPECS,
    **rental_metrics.SPECS,
    **new_construction_metrics.SPECS,
    **portfolio_metrics.SPECS,
    **price_feed.SPECS,
    **property.SPECS,
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "market_metrics.housing_stock")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_model(endpoint_id: str) -> type[BaseModel] | None:
    """Get the item model decoded for an endpoint ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_model",
    "list_endpoints",
    "EventHistoryParams",
    "MetricsParams",
    "PortfolioMetricsParams",
    "PropertySearchParams",
    "SearchParams",
    "ForSaleMetrics",
    "InvestorMetrics",
    "MarketMetrics",
    "NewConstructionMetrics",
    "PortfolioMetrics",
    "PriceFeed",
    "PropertyEndpoints",
    "RentalMetrics",
    "Search",
]
