"""REST request runner using endpoint specs and the paging layer."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from ..core.enums import DecodeShape
from .paging import (
    AggregatedResult,
    BatchCoordinator,
    PaginationConfig,
    PaginationDriver,
    RequestDescriptor,
)
from .rest.backoff import RetryConfig

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    shape: DecodeShape = DecodeShape.LIST
    items_field: str = "items"
    # Item key the server tags batch results with
    id_field: str | None = None
    # Body key the identifier list is sent under for batch endpoints
    id_key: str = "parcl_id"
    max_batch_size: int | None = None
    # Page window goes in the query string even when the method is POST
    window_in_query: bool = False

    def describe(self, params: dict[str, Any]) -> RequestDescriptor:
        """Build the first-page request descriptor for ``params``."""
        return RequestDescriptor(
            method=self.method.upper(),
            path=self.build_path(params),
            query=self.build_query(params) if self.build_query else {},
            body=self.build_body(params) if self.build_body else None,
            shape=self.shape,
            items_field=self.items_field,
            id_field=self.id_field,
            window_in_query=self.window_in_query,
            endpoint_id=self.id,
        )


class RestRunner:
    """Executes endpoint specs through the pagination and batch layers."""

    def __init__(self, driver: PaginationDriver, *, max_batch_size: int = 1000) -> None:
        self._driver = driver
        self._max_batch_size = max_batch_size

    @property
    def driver(self) -> PaginationDriver:
        return self._driver

    def use_retry(self, retry: RetryConfig) -> None:
        """Replace the default retry policy for every caller sharing this runner."""
        self._driver = self._driver.with_retry(retry)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        model: type[M],
        params: dict[str, Any],
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[M]:
        descriptor = spec.describe(params)
        return await self._driver.fetch_all(descriptor, model, pagination, retry)

    async def run_batch(
        self,
        *,
        spec: RestEndpointSpec,
        model: type[M],
        ids: Sequence[Any],
        params: dict[str, Any],
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[M]:
        """Run a batch endpoint over ``ids``, splitting into chunks as needed.

        The endpoint's own ``max_batch_size`` wins over the runner default
        when it is smaller.
        """
        batch_size = self._max_batch_size
        if spec.max_batch_size is not None:
            batch_size = min(batch_size, spec.max_batch_size)

        coordinator = BatchCoordinator(self._driver, id_key=spec.id_key)
        return await coordinator.fetch_batch(
            ids,
            spec.describe(params),
            model,
            batch_size,
            pagination,
            retry,
        )
