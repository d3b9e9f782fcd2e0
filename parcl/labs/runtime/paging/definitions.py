"""Pagination metadata definitions and result structures.

This module defines the data structures that flow through the paging layer:
the request descriptor handed in by an endpoint wrapper, the cursor decoded
from each response, the caller's pagination policy, and the aggregated result.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from ...core.enums import DecodeShape
from ...models.account import CreditUsageRecord

T = TypeVar("T")

Scalar = str | int | float | bool | None


@dataclass(frozen=True)
class PageCursor:
    """Continuation marker for the next page.

    Attributes:
        next_url: The server's ``links.next`` link (absolute URL, query included)
    """

    next_url: str


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable description of one physical request.

    Attributes:
        method: HTTP method ("GET" | "POST")
        path: Path relative to the base URL, or an absolute follow-up URL
        query: Query parameters; ``None`` values are dropped when sent
        body: JSON body for POST requests
        shape: Whether the envelope carries a list of items or one entity
        items_field: Envelope key holding the item list
        id_field: Item key the server uses to tag batch items (e.g. "parcl_id")
        window_in_query: Send limit/offset in the query string even for POST
        endpoint_id: Label used in telemetry
    """

    method: str
    path: str
    query: Mapping[str, Scalar] = field(default_factory=dict)
    body: Any = None
    shape: DecodeShape = DecodeShape.LIST
    items_field: str = "items"
    id_field: str | None = None
    window_in_query: bool = False
    endpoint_id: str = "unknown"

    def with_cursor(self, cursor: PageCursor) -> RequestDescriptor:
        """Derive the descriptor that fetches the page ``cursor`` points at.

        The next link already encodes every query parameter, so the follow-up
        is a bare GET on that URL.
        """
        return replace(self, method="GET", path=cursor.next_url, query={}, body=None)

    def with_body(self, body: Any) -> RequestDescriptor:
        return replace(self, body=body)

    def with_window(self, limit: int | None, offset: int | None) -> RequestDescriptor:
        """Apply a starting limit/offset to the query (GET) or body (POST).

        Endpoints flagged ``window_in_query`` take the window in the query
        string regardless of method.
        """
        window = {k: v for k, v in (("limit", limit), ("offset", offset)) if v is not None}
        if not window:
            return self
        if (
            not self.window_in_query
            and self.method.upper() == "POST"
            and isinstance(self.body, Mapping)
        ):
            return replace(self, body={**self.body, **window})
        return replace(self, query={**self.query, **window})

    def sendable_query(self) -> dict[str, str | int | float] | None:
        """Query parameters with ``None`` dropped and enums/bools normalised."""
        sent: dict[str, str | int | float] = {}
        for name, value in self.query.items():
            if value is None:
                continue
            if isinstance(value, bool):
                sent[name] = int(value)
            elif isinstance(value, Enum):
                sent[name] = value.value
            else:
                sent[name] = value
        return sent or None


@dataclass(frozen=True)
class PaginationConfig:
    """Caller's pagination policy for one logical call.

    Attributes:
        auto_paginate: Follow next links until the server stops returning one
        limit: Starting page size sent to the server
        offset: Starting offset sent to the server
        max_pages: Hard cap on pages fetched (None = unlimited)
        max_items: Hard cap on items returned (None = unlimited)
    """

    auto_paginate: bool = False
    limit: int | None = None
    offset: int | None = None
    max_pages: int | None = None
    max_items: int | None = None

    def __post_init__(self) -> None:
        """Validate pagination configuration."""
        if self.limit is not None and self.limit < 1:
            raise ValueError("limit must be >= 1")
        if self.offset is not None and self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.max_items is not None and self.max_items < 1:
            raise ValueError("max_items must be >= 1")


@dataclass(frozen=True)
class DecodedPage(Generic[T]):
    """One decoded response envelope."""

    items: list[T]
    cursor: PageCursor | None = None
    account: CreditUsageRecord | None = None
    identifiers: list[Any] | None = None
    total: int | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class AggregatedResult(Generic[T]):
    """Result of a logical call.

    Attributes:
        items: Decoded items, in page order then within-page order
        account: Credit record of the last response received (not a sum);
            ``None`` when that response carried none
        identifiers: Per-item server tag (batch calls), parallel to ``items``
        pages_fetched: Number of physical responses decoded
        total: Server-reported total from the last response, when present
    """

    items: list[T] = field(default_factory=list)
    account: CreditUsageRecord | None = None
    identifiers: list[Any] | None = None
    pages_fetched: int = 0
    total: int | None = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def tagged(self) -> list[tuple[Any, T]]:
        """Pair each item with its identifier tag."""
        if self.identifiers is None:
            raise ValueError("Result carries no identifier tags")
        return list(zip(self.identifiers, self.items, strict=True))


@dataclass(frozen=True)
class BatchPlan:
    """Plan for a single batch chunk.

    Attributes:
        identifiers: Identifiers sent in this chunk, in input order
        chunk_index: Zero-based index of this chunk in the overall plan
    """

    identifiers: tuple[Any, ...]
    chunk_index: int = 0
