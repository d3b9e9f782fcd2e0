"""Batch execution across identifier chunks.

This module provides the BatchCoordinator that fans a multi-identifier
request out into chunk requests, drives each chunk through the
PaginationDriver, and merges the chunk results in plan order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from ..rest.backoff import RetryConfig
from .definitions import AggregatedResult, PaginationConfig, RequestDescriptor
from .executors import PaginationDriver
from .planners import BatchPlanner
from .telemetry import log_batch_chunk_error

M = TypeVar("M", bound=BaseModel)


class BatchCoordinator:
    """Executes batch requests chunk by chunk.

    Chunks run sequentially so that merged output follows input order and
    throttling pressure stays the same as for single calls. A failing chunk
    fails the whole call.
    """

    def __init__(self, driver: PaginationDriver, *, id_key: str = "parcl_id") -> None:
        """Initialize batch coordinator.

        Args:
            driver: Pagination driver used for every chunk
            id_key: Body key the identifier list is sent under
        """
        self._driver = driver
        self._id_key = id_key

    async def fetch_batch(
        self,
        identifiers: Sequence[Any],
        template: RequestDescriptor,
        model: type[M],
        max_batch_size: int,
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
        *,
        id_key: str | None = None,
    ) -> AggregatedResult[M]:
        """Fetch results for every identifier.

        Args:
            identifiers: Identifiers in caller order
            template: POST descriptor whose body holds the shared parameters
            model: Item model
            max_batch_size: Maximum identifiers per chunk
            pagination: Pagination policy applied to every chunk
            retry: Retry policy applied to every page of every chunk
            id_key: Override for the body key holding the identifiers

        Returns:
            Merged AggregatedResult; ``identifiers`` carries the server's
            per-item tag when the template declares an ``id_field``

        Raises:
            InvalidParameterError: Empty identifiers or invalid batch size
        """
        key = id_key or self._id_key
        plans = BatchPlanner(template.endpoint_id).plan(identifiers, max_batch_size)
        base_body: Mapping[str, Any] = template.body if isinstance(template.body, Mapping) else {}

        merged: AggregatedResult[M] = AggregatedResult(
            identifiers=[] if template.id_field is not None else None
        )

        for plan in plans:
            chunk = template.with_body({**base_body, key: list(plan.identifiers)})
            try:
                result = await self._driver.fetch_all(chunk, model, pagination, retry)
            except Exception as e:
                log_batch_chunk_error(
                    endpoint_id=template.endpoint_id,
                    chunk_index=plan.chunk_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            merged.items.extend(result.items)
            if merged.identifiers is not None and result.identifiers is not None:
                merged.identifiers.extend(result.identifiers)
            merged.pages_fetched += result.pages_fetched
            merged.account = result.account
            if result.total is not None:
                merged.total = (merged.total or 0) + result.total

        return merged
