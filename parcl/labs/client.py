"""Parcl Labs API client.

Architecture:
    The client owns one transport (one aiohttp session), one credit ledger
    and one RestRunner. Endpoint groups are thin wrappers that build request
    descriptors from parameter containers and hand them to the runner, so
    retry, pagination, batching and credit accounting behave identically
    across every endpoint.

    Configuration (API key, base URL, retry policy, timeout, batch size) is
    resolved once here and passed down as plain values.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .config import (
    DEFAULT_MAX_BATCH_SIZE,
    DEFAULT_TIMEOUT,
    resolve_api_key,
    resolve_base_url,
)
from .endpoints import (
    ForSaleMetrics,
    InvestorMetrics,
    MarketMetrics,
    NewConstructionMetrics,
    PortfolioMetrics,
    PriceFeed,
    PropertyEndpoints,
    RentalMetrics,
    Search,
    get_endpoint_model,
    get_endpoint_spec,
)
from .models import AccountUsage
from .runtime.ledger import CreditLedger
from .runtime.paging import AggregatedResult, PaginationConfig, PaginationDriver
from .runtime.rest import BackoffController, RESTTransport, RetryConfig
from .runtime.rest.backoff import SleepFunc
from .runtime.runner import RestRunner


class ParclClient:
    """Async client for the Parcl Labs REST API.

    Example:
        async with ParclClient() as client:
            markets = await client.search.markets(SearchParams(query="Los Angeles", limit=5))
            print(client.session_credits_used())
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        retry: RetryConfig | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        transport: RESTTransport | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key; falls back to the PARCL_LABS_API_KEY environment variable
            base_url: API root; falls back to PARCL_LABS_BASE_URL, then the public API
            retry: Default retry policy for throttled requests
            timeout: Per-request timeout in seconds
            max_batch_size: Maximum identifiers per batch request
            transport: Pre-built transport (tests, custom sessions)
            sleep: Coroutine used for backoff sleeps (default: asyncio.sleep)

        Raises:
            MissingCredentialsError: If no API key can be resolved
        """
        if max_batch_size < 1:
            raise ValueError("max_batch_size must be >= 1")

        self._api_key = resolve_api_key(api_key)
        self._base_url = resolve_base_url(base_url)
        self._transport = transport or RESTTransport(
            self._base_url, self._api_key, timeout=timeout
        )
        self._ledger = CreditLedger()
        self._backoff = BackoffController(self._transport, sleep=sleep)
        self._runner = RestRunner(
            PaginationDriver(self._backoff, self._ledger, retry=retry),
            max_batch_size=max_batch_size,
        )
        self._bind_groups()

    def _bind_groups(self) -> None:
        self.search = Search(self._runner)
        self.market_metrics = MarketMetrics(self._runner)
        self.investor_metrics = InvestorMetrics(self._runner)
        self.for_sale_metrics = ForSaleMetrics(self._runner)
        self.rental_metrics = RentalMetrics(self._runner)
        self.new_construction_metrics = NewConstructionMetrics(self._runner)
        self.portfolio_metrics = PortfolioMetrics(self._runner)
        self.price_feed = PriceFeed(self._runner)
        self.property = PropertyEndpoints(self._runner)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def retry_config(self) -> RetryConfig:
        return self._runner.driver.retry

    def with_retry_config(self, retry: RetryConfig) -> ParclClient:
        """Use ``retry`` as the default retry policy for subsequent calls.

        Endpoint groups share the client's runner, so group objects obtained
        before this call pick up the new policy too.

        Returns:
            This client, for chaining
        """
        self._runner.use_retry(retry)
        return self

    async def fetch(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        *,
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[Any]:
        """Fetch from any registered endpoint by ID.

        Args:
            endpoint_id: Endpoint identifier (e.g., "market_metrics.housing_stock")
            params: Inputs the endpoint's spec builds the request from
            pagination: Pagination policy (default: single page)
            retry: Retry policy override for this call

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        model = get_endpoint_model(endpoint_id)
        if spec is None or model is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        return await self._runner.run(
            spec=spec, model=model, params=params, pagination=pagination, retry=retry
        )

    async def fetch_batch(
        self,
        endpoint_id: str,
        ids: Sequence[Any],
        params: dict[str, Any],
        *,
        pagination: PaginationConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> AggregatedResult[Any]:
        """Fetch from a registered batch endpoint for every identifier in ``ids``."""
        spec = get_endpoint_spec(endpoint_id)
        model = get_endpoint_model(endpoint_id)
        if spec is None or model is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        return await self._runner.run_batch(
            spec=spec, model=model, ids=ids, params=params, pagination=pagination, retry=retry
        )

    def account_info(self) -> AccountUsage:
        """Credit usage accumulated by this client."""
        return self._ledger.snapshot()

    def session_credits_used(self) -> int:
        return self._ledger.session_used()

    def remaining_credits(self) -> int | None:
        return self._ledger.remaining()

    async def __aenter__(self) -> ParclClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._transport.close()

    def __repr__(self) -> str:
        return f"ParclClient(base_url={self._base_url!r}, api_key='***')"
