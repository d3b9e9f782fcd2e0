"""Batch planning logic for splitting identifier lists.

This module provides the BatchPlanner class that determines how to split
a caller's identifier list into chunks that respect an endpoint's maximum
batch size.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.exceptions import InvalidParameterError
from .definitions import BatchPlan
from .telemetry import log_batch_plan


class BatchPlanner:
    """Plans consecutive identifier chunks for batch requests.

    Chunks preserve input order and are filled greedily: every chunk but the
    last holds exactly ``max_batch_size`` identifiers.
    """

    def __init__(self, endpoint_id: str = "unknown") -> None:
        """Initialize batch planner.

        Args:
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._endpoint_id = endpoint_id

    def plan(self, identifiers: Sequence[Any], max_batch_size: int) -> list[BatchPlan]:
        """Plan chunks for a batch request.

        Args:
            identifiers: Identifiers to send, in caller order
            max_batch_size: Maximum identifiers per request

        Returns:
            List of batch plans, one per request

        Raises:
            InvalidParameterError: If identifiers is empty or max_batch_size < 1
        """
        if max_batch_size < 1:
            raise InvalidParameterError(f"max_batch_size must be >= 1, got {max_batch_size}")
        if not identifiers:
            raise InvalidParameterError("Cannot plan batch: no identifiers provided")

        plans: list[BatchPlan] = []
        remaining = list(identifiers)
        chunk_index = 0

        while remaining:
            plans.append(
                BatchPlan(
                    identifiers=tuple(remaining[:max_batch_size]),
                    chunk_index=chunk_index,
                )
            )
            remaining = remaining[max_batch_size:]
            chunk_index += 1

        log_batch_plan(
            endpoint_id=self._endpoint_id,
            total_identifiers=len(identifiers),
            total_chunks=len(plans),
            max_batch_size=max_batch_size,
        )

        return plans
