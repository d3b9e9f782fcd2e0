"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..runtime.paging.definitions import PageCursor


class ParclError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(ParclError):
    """Connection-level failure (DNS, refused connection, timeout).

    Raised by the HTTP layer before any status code is available. The engine
    does not retry these; callers decide whether to repeat the logical call.
    """

    pass


class ApiError(ParclError):
    """Non-success response from the API that is not a throttling response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"API error ({status_code}): {message}")
        self.message = message
        self.status_code = status_code


class RateLimitedError(ApiError):
    """Retries exhausted while the API kept throttling the request."""

    def __init__(self, message: str, attempts: int, status_code: int = 429) -> None:
        super().__init__(message, status_code=status_code)
        self.attempts = attempts

    def __str__(self) -> str:
        return f"Rate limited after {self.attempts} attempt(s): {self.message}"


class DecodeError(ParclError):
    """Response body is malformed or violates the envelope contract."""

    pass


class StalledPaginationError(DecodeError):
    """Server returned the same continuation cursor twice in a row."""

    def __init__(self, message: str, cursor: PageCursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class MissingCredentialsError(ParclError):
    """No API key was passed and none was found in the environment."""

    pass


class InvalidParameterError(ParclError, ValueError):
    """Caller supplied an argument the engine cannot turn into a request."""

    pass
