"""Pagination execution for one logical call.

This module provides the PaginationDriver that turns a single request
descriptor into a complete result, following the server's next links and
feeding every response's credit record into the ledger.
"""

from __future__ import annotations

from time import perf_counter
from typing import TypeVar

from pydantic import BaseModel

from ..ledger import CreditLedger
from ..rest.backoff import BackoffController, RetryConfig
from .definitions import AggregatedResult, PageCursor, PaginationConfig, RequestDescriptor
from .envelope import EnvelopeDecoder
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error

M = TypeVar("M", bound=BaseModel)


class PaginationDriver:
    """Executes paginated logical calls.

    Pages are fetched strictly in sequence since each follow-up request is
    derived from the previous response. Either the whole call succeeds or
    nothing is returned; credits already recorded stay in the ledger.
    """

    def __init__(
        self,
        backoff: BackoffController,
        ledger: CreditLedger,
        *,
        decoder: EnvelopeDecoder | None = None,
        retry: RetryConfig | None = None,
    ) -> None:
        """Initialize pagination driver.

        Args:
            backoff: Controller that performs each physical request
            ledger: Credit ledger updated after every decoded response
            decoder: Envelope decoder (default: EnvelopeDecoder())
            retry: Default retry policy when a call does not pass one
        """
        self._backoff = backoff
        self._ledger = ledger
        self._decoder = decoder or EnvelopeDecoder()
        self._retry = retry or RetryConfig()

    @property
    def retry(self) -> RetryConfig:
        return self._retry

    def with_retry(self, retry: RetryConfig) -> PaginationDriver:
        """Return a driver sharing backoff, ledger and decoder with a new default retry."""
        return PaginationDriver(self._backoff, self._ledger, decoder=self._decoder, retry=retry)

    async def fetch_all(
        self,
        descriptor: RequestDescriptor,
        model: type[M],
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[M]:
        """Fetch one or all pages for ``descriptor``.

        Args:
            descriptor: First-page request
            model: Item model each page is decoded into
            pagination: Pagination policy (default: single page)
            retry: Retry policy for every page (default: the driver's)

        Returns:
            AggregatedResult with items in page order

        Raises:
            RateLimitedError, ApiError, TransportError: From the backoff layer
            DecodeError: Malformed response
            StalledPaginationError: The server repeated a cursor
        """
        pagination = pagination or PaginationConfig()
        retry = retry or self._retry
        current = descriptor.with_window(pagination.limit, pagination.offset)
        previous: PageCursor | None = None

        result: AggregatedResult[M] = AggregatedResult(
            identifiers=[] if descriptor.id_field is not None else None
        )
        start = perf_counter()
        stop_reason = "single"

        while True:
            page_start = perf_counter()
            try:
                response = await self._backoff.attempt(current, retry)
                page = self._decoder.decode(response.body, current, model, previous=previous)
            except Exception as e:
                log_pagination_error(
                    endpoint_id=descriptor.endpoint_id,
                    page_index=result.pages_fetched,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            self._ledger.record(page.account)
            log_page_fetched(
                endpoint_id=descriptor.endpoint_id,
                page_index=result.pages_fetched,
                rows=len(page.items),
                has_next=page.cursor is not None,
                credits_used=page.account.est_credits_used if page.account else None,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            result.pages_fetched += 1
            result.items.extend(page.items)
            if result.identifiers is not None:
                result.identifiers.extend(page.identifiers or [None] * len(page.items))
            result.account = page.account
            if page.total is not None:
                result.total = page.total

            if not pagination.auto_paginate:
                break
            if pagination.max_items is not None and len(result.items) >= pagination.max_items:
                stop_reason = "max_items"
                break
            if page.cursor is None:
                stop_reason = "exhausted"
                break
            if pagination.max_pages is not None and result.pages_fetched >= pagination.max_pages:
                stop_reason = "max_pages"
                break

            previous = page.cursor
            current = current.with_cursor(page.cursor)

        if pagination.max_items is not None and len(result.items) > pagination.max_items:
            del result.items[pagination.max_items :]
            if result.identifiers is not None:
                del result.identifiers[pagination.max_items :]

        log_pagination_complete(
            endpoint_id=descriptor.endpoint_id,
            result=result,
            stop_reason=stop_reason,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result
