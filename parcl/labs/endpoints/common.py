"""Shared endpoint definitions for per-market metric groups.

Every metric group follows the same pattern: a GET endpoint per market at
``/v1/{group}/{parcl_id}/{metric}`` and a POST batch variant at
``/v1/{group}/{metric}`` that takes a list of markets in the body and tags
each returned item with its ``parcl_id``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from ..runtime.paging import AggregatedResult
from ..runtime.rest.backoff import RetryConfig
from ..runtime.runner import RestEndpointSpec, RestRunner
from .params import MetricsParams, PortfolioMetricsParams

M = TypeVar("M", bound=BaseModel)

AnyMetricsParams = MetricsParams | PortfolioMetricsParams


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters from the request's parameter container."""
    return params["params"].to_query()


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the shared batch body; identifiers are added per chunk."""
    return params["params"].to_batch_body()


def _market_path(group: str, metric: str) -> Callable[[dict[str, Any]], str]:
    def build_path(params: dict[str, Any]) -> str:
        return f"/v1/{group}/{int(params['parcl_id'])}/{metric}"

    return build_path


def _batch_path(group: str, metric: str) -> Callable[[dict[str, Any]], str]:
    def build_path(params: dict[str, Any]) -> str:
        return f"/v1/{group}/{metric}"

    return build_path


def metric_spec(group: str, metric: str, *, prefix: str) -> RestEndpointSpec:
    """Build the per-market GET spec for one metric.

    Args:
        group: Path segment of the metric group (e.g. "market_metrics")
        metric: Path segment of the metric (e.g. "housing_stock")
        prefix: Endpoint id prefix used in the registry and telemetry
    """
    return RestEndpointSpec(
        id=f"{prefix}.{metric}",
        method="GET",
        build_path=_market_path(group, metric),
        build_query=build_query,
    )


def batch_metric_spec(group: str, metric: str, *, prefix: str) -> RestEndpointSpec:
    """Build the multi-market POST spec for one metric."""
    return RestEndpointSpec(
        id=f"{prefix}.batch_{metric}",
        method="POST",
        build_path=_batch_path(group, metric),
        build_body=build_body,
        id_field="parcl_id",
        id_key="parcl_id",
    )


class MetricsEndpointGroup:
    """Base for metric endpoint groups bound to a runner."""

    params_type: type[AnyMetricsParams] = MetricsParams

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def _params(self, params: AnyMetricsParams | None) -> AnyMetricsParams:
        return params if params is not None else self.params_type()

    async def _fetch(
        self,
        spec: RestEndpointSpec,
        model: type[M],
        parcl_id: int,
        params: AnyMetricsParams | None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[M]:
        params = self._params(params)
        return await self._runner.run(
            spec=spec,
            model=model,
            params={"parcl_id": parcl_id, "params": params},
            pagination=params.pagination(),
            retry=retry,
        )

    async def _fetch_batch(
        self,
        spec: RestEndpointSpec,
        model: type[M],
        parcl_ids: Sequence[int],
        params: AnyMetricsParams | None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[M]:
        params = self._params(params)
        return await self._runner.run_batch(
            spec=spec,
            model=model,
            ids=parcl_ids,
            params={"params": params},
            pagination=params.pagination(),
            retry=retry,
        )
