"""REST runtime abstractions."""

from .backoff import BackoffController, RetryConfig, RetryState, parse_retry_after
from .http_client import HTTPClient, RawResponse
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "BackoffController",
    "RetryConfig",
    "RetryState",
    "parse_retry_after",
]
