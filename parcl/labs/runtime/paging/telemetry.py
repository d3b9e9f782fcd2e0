"""Structured logging for paging operations.

This module provides telemetry hooks for pagination and batching, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import AggregatedResult

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    rows: int,
    has_next: bool,
    credits_used: int | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log a single decoded page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page within the logical call
        rows: Number of items decoded from this page
        has_next: Whether the server returned a continuation cursor
        credits_used: Credits the response reported, if any
        latency_ms: Latency including backoff in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "rows": rows,
            "has_next": has_next,
            "credits_used": credits_used,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    result: AggregatedResult,
    stop_reason: str,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a logical call.

    Args:
        endpoint_id: Endpoint identifier
        result: Aggregated result returned to the caller
        stop_reason: Why paging stopped ("exhausted", "single", "max_pages", "max_items")
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": result.pages_fetched,
            "total_items": len(result.items),
            "stop_reason": stop_reason,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failure that aborts a logical call.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Error message
    """
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_batch_plan(
    *,
    endpoint_id: str,
    total_identifiers: int,
    total_chunks: int,
    max_batch_size: int,
) -> None:
    """Log batch plan creation."""
    logger.info(
        "batch_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_identifiers": total_identifiers,
            "total_chunks": total_chunks,
            "max_batch_size": max_batch_size,
        },
    )


def log_batch_chunk_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a batch chunk failure."""
    logger.error(
        "batch_chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
