"""Paging layer for envelope decoding, pagination and batching.

Architecture:
    The paging layer consists of:
    - definitions.py: Request descriptors, cursors, policies and results
    - envelope.py: Response envelope decoding (items, cursor, credits)
    - executors.py: Pagination driver (follows next links for one call)
    - planners.py: Batch planning (splits identifier lists into chunks)
    - batching.py: Batch coordinator (runs chunks and merges results)
    - telemetry.py: Structured logging

Usage:
    Endpoint wrappers build a RequestDescriptor and hand it to the
    PaginationDriver, or to the BatchCoordinator for multi-identifier calls.
    Neither layer knows anything about the domain types being carried.
"""

from __future__ import annotations

from .batching import BatchCoordinator
from .definitions import (
    AggregatedResult,
    BatchPlan,
    DecodedPage,
    PageCursor,
    PaginationConfig,
    RequestDescriptor,
)
from .envelope import EnvelopeDecoder
from .executors import PaginationDriver
from .planners import BatchPlanner

__all__ = [
    "AggregatedResult",
    "BatchCoordinator",
    "BatchPlan",
    "BatchPlanner",
    "DecodedPage",
    "EnvelopeDecoder",
    "PageCursor",
    "PaginationConfig",
    "PaginationDriver",
    "RequestDescriptor",
]
