"""Authenticated REST transport."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .http_client import HTTPClient, RawResponse

if TYPE_CHECKING:
    from ..paging.definitions import RequestDescriptor


class RESTTransport:
    """Turns a RequestDescriptor into one authenticated HTTP exchange."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        *,
        timeout: float = 30.0,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout)
        self._api_key = api_key

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = self._api_key
        return headers

    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        body = descriptor.body if descriptor.method.upper() != "GET" else None
        return await self._http.send(
            descriptor.method,
            descriptor.path,
            params=descriptor.sendable_query(),
            json=body,
            headers=self._headers(),
        )

    async def close(self) -> None:
        await self._http.close()

    def __repr__(self) -> str:
        return f"RESTTransport(base_url={self.base_url!r}, api_key='***')"
