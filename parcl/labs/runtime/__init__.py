"""Runtime layer: transport, retry, paging, batching and credit accounting."""

from .ledger import CreditLedger
from .paging import (
    AggregatedResult,
    BatchCoordinator,
    EnvelopeDecoder,
    PageCursor,
    PaginationConfig,
    PaginationDriver,
    RequestDescriptor,
)
from .rest import BackoffController, HTTPClient, RawResponse, RESTTransport, RetryConfig
from .runner import RestEndpointSpec, RestRunner

__all__ = [
    "AggregatedResult",
    "BackoffController",
    "BatchCoordinator",
    "CreditLedger",
    "EnvelopeDecoder",
    "HTTPClient",
    "PageCursor",
    "PaginationConfig",
    "PaginationDriver",
    "RawResponse",
    "RequestDescriptor",
    "RESTTransport",
    "RestEndpointSpec",
    "RestRunner",
    "RetryConfig",
]
