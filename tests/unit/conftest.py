"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from parcl.labs.runtime.paging.definitions import RequestDescriptor
from parcl.labs.runtime.rest.http_client import RawResponse


class FakeTransport:
    """Transport double that replays scripted responses and records requests."""

    def __init__(self, responses: list[RawResponse | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.sent: list[RequestDescriptor] = []
        self.closed = False

    def queue(self, *responses: RawResponse | Exception) -> None:
        self.responses.extend(responses)

    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        self.sent.append(descriptor)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {descriptor.method} {descriptor.path}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


class RecordingSleep:
    """Sleep double that records requested delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def build_envelope(
    items: list[Any] | None = None,
    *,
    next_url: str | None = None,
    used: int | None = None,
    remaining: int | None = None,
    items_field: str = "items",
    **extra: Any,
) -> str:
    body: dict[str, Any] = {items_field: items if items is not None else []}
    body["links"] = {"next": next_url}
    if used is not None or remaining is not None:
        body["account"] = {"est_credits_used": used, "est_remaining_credits": remaining}
    body.update(extra)
    return json.dumps(body)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def envelope():
    """Build a JSON response envelope."""
    return build_envelope


@pytest.fixture
def ok():
    """Build a 200 response wrapping a JSON envelope."""

    def _ok(*args: Any, **kwargs: Any) -> RawResponse:
        return RawResponse(status=200, body=build_envelope(*args, **kwargs))

    return _ok


@pytest.fixture
def throttled():
    """Build a 429 response."""

    def _throttled(message: str = "Too Many Requests", retry_after: str | None = None) -> RawResponse:
        headers = {"Retry-After": retry_after} if retry_after is not None else {}
        return RawResponse(status=429, body=message, headers=headers)

    return _throttled
