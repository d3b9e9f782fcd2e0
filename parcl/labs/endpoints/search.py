"""Market search endpoint definition."""

from __future__ import annotations

from typing import Any

from ..models import Market
from ..runtime.paging import AggregatedResult
from ..runtime.runner import RestEndpointSpec, RestRunner
from .params import SearchParams


def build_path(params: dict[str, Any]) -> str:
    return "/v1/search/markets"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    search: SearchParams = params["params"]
    return search.to_query()


SPEC = RestEndpointSpec(
    id="search.markets",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)

SPECS = {SPEC.id: (SPEC, Market)}


class Search:
    """Market discovery: resolve names, ZIPs and regions to ``parcl_id`` values."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def markets(self, params: SearchParams | None = None) -> AggregatedResult[Market]:
        """Search markets.

        Args:
            params: Search filters; ``auto_paginate`` follows next links

        Returns:
            Matching markets, in server order
        """
        params = params if params is not None else SearchParams()
        return await self._runner.run(
            spec=SPEC,
            model=Market,
            params={"params": params},
            pagination=params.pagination(),
        )
