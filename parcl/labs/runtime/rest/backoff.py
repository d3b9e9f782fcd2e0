"""Retry and backoff for throttled requests.

Architecture:
    The BackoffController wraps one physical request in an attempt-cycle:
    send, inspect the status, and either return, fail, or sleep and resend.
    State lives in a RetryState created per cycle, so concurrent logical calls
    never share retry bookkeeping. Sleeping goes through an injectable
    coroutine so tests can observe delays without waiting.

    Only throttling statuses are retried. Other non-success statuses fail
    immediately without consuming a retry slot, and transport failures
    propagate untouched.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from ...core.exceptions import ApiError, RateLimitedError
from .http_client import RawResponse

if TYPE_CHECKING:
    from ..paging.definitions import RequestDescriptor

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class Transport(Protocol):
    async def send(self, descriptor: RequestDescriptor) -> RawResponse: ...


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy for throttled requests.

    Attributes:
        max_retries: Retries after the first attempt (0 = single attempt)
        initial_backoff: Seconds slept after the first throttled attempt
        multiplier: Growth factor between consecutive sleeps
        max_backoff: Upper bound on a single sleep (None = unbounded)
        max_total_backoff: Budget for cumulative sleep; retrying stops once the
            next sleep would exceed it (None = no deadline)
        respect_retry_after: Sleep at least as long as a numeric Retry-After header
        throttle_statuses: Status codes treated as throttling
    """

    max_retries: int = 3
    initial_backoff: float = 1.0
    multiplier: float = 2.0
    max_backoff: float | None = None
    max_total_backoff: float | None = None
    respect_retry_after: bool = True
    throttle_statuses: frozenset[int] = field(default_factory=lambda: frozenset({429}))

    def __post_init__(self) -> None:
        """Validate retry configuration."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.initial_backoff < 0:
            raise ValueError("initial_backoff must be >= 0")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if self.max_backoff is not None and self.max_backoff < 0:
            raise ValueError("max_backoff must be >= 0")
        if self.max_total_backoff is not None and self.max_total_backoff < 0:
            raise ValueError("max_total_backoff must be >= 0")

    def backoff_for(self, attempt: int) -> float:
        """Sleep after the ``attempt``-th (1-based) throttled attempt."""
        delay = self.initial_backoff * self.multiplier ** (attempt - 1)
        if self.max_backoff is not None:
            delay = min(delay, self.max_backoff)
        return delay


@dataclass
class RetryState:
    """Bookkeeping for one attempt-cycle."""

    attempt: int = 0
    slept: float = 0.0
    delays: list[float] = field(default_factory=list)
    deadline: float | None = None
    last_message: str = ""

    def budget_allows(self, delay: float) -> bool:
        return self.deadline is None or self.slept + delay <= self.deadline


def parse_retry_after(value: str | None) -> float | None:
    """Parse a numeric Retry-After header; HTTP-date values are ignored."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


class BackoffController:
    """Runs attempt-cycles against a transport."""

    def __init__(self, transport: Transport, *, sleep: SleepFunc | None = None) -> None:
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    async def attempt(self, descriptor: RequestDescriptor, retry: RetryConfig) -> RawResponse:
        """Send ``descriptor``, retrying while throttled.

        Returns:
            The first successful (2xx) response

        Raises:
            RateLimitedError: Throttled on every allowed attempt
            ApiError: Non-throttling error status
            TransportError: Connection-level failure
        """
        state = RetryState(deadline=retry.max_total_backoff)

        while True:
            state.attempt += 1
            response = await self._transport.send(descriptor)

            if response.ok:
                return response

            if response.status not in retry.throttle_statuses:
                raise ApiError(response.body, status_code=response.status)

            state.last_message = response.body
            if state.attempt > retry.max_retries:
                break

            delay = retry.backoff_for(state.attempt)
            if retry.respect_retry_after:
                retry_after = parse_retry_after(response.header("Retry-After"))
                if retry_after is not None:
                    delay = max(delay, retry_after)

            if not state.budget_allows(delay):
                break

            logger.warning(
                "retry_scheduled",
                extra={
                    "endpoint_id": descriptor.endpoint_id,
                    "attempt": state.attempt,
                    "status": response.status,
                    "delay_s": delay,
                },
            )
            await self._sleep(delay)
            state.slept += delay
            state.delays.append(delay)

        logger.error(
            "rate_limit_exhausted",
            extra={
                "endpoint_id": descriptor.endpoint_id,
                "attempts": state.attempt,
                "slept_s": state.slept,
            },
        )
        raise RateLimitedError(state.last_message, attempts=state.attempt)
