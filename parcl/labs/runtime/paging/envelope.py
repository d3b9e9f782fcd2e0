"""Response envelope decoding.

Every API response is an envelope around the payload:

    {
        "items": [...],
        "links": {"first": ..., "next": ..., "prev": ..., "last": ...},
        "account": {"est_credits_used": 1, "est_remaining_credits": 9999},
        "total": 120, "limit": 12, "offset": 0
    }

The decoder pulls out the items (validated against the endpoint's item
model), the continuation cursor and the credit record, without knowing
anything about the domain type being carried.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.enums import DecodeShape
from ...core.exceptions import DecodeError, StalledPaginationError
from ...models.account import CreditUsageRecord
from .definitions import DecodedPage, PageCursor, RequestDescriptor

M = TypeVar("M", bound=BaseModel)

_ENVELOPE_KEYS = frozenset({"links", "account"})


class EnvelopeDecoder:
    """Decodes raw response bodies into DecodedPage values."""

    def decode(
        self,
        raw_body: str | bytes,
        descriptor: RequestDescriptor,
        model: type[M],
        previous: PageCursor | None = None,
    ) -> DecodedPage[M]:
        """Decode one response body.

        Args:
            raw_body: Undecoded response body
            descriptor: Descriptor of the request that produced the body
            model: Pydantic model each item is validated against
            previous: Cursor that was followed to fetch this page, if any

        Returns:
            DecodedPage with items, cursor and credit record

        Raises:
            DecodeError: Malformed JSON or items that fail validation
            StalledPaginationError: The next cursor repeats ``previous``
        """
        envelope = self._parse_json(raw_body)
        raw_items = self._extract_raw_items(envelope, descriptor)

        items: list[M] = []
        for index, raw in enumerate(raw_items):
            try:
                items.append(model.model_validate(raw))
            except PydanticValidationError as e:
                raise DecodeError(
                    f"{descriptor.endpoint_id}: item {index} does not match "
                    f"{model.__name__}: {e.error_count()} validation error(s)"
                ) from e

        identifiers = None
        if descriptor.id_field is not None:
            identifiers = [
                raw.get(descriptor.id_field) if isinstance(raw, Mapping) else None
                for raw in raw_items
            ]

        cursor = self._extract_cursor(envelope)
        if cursor is not None and cursor == previous:
            raise StalledPaginationError(
                f"{descriptor.endpoint_id}: server repeated cursor {cursor.next_url!r}",
                cursor=cursor,
            )

        return DecodedPage(
            items=items,
            cursor=cursor,
            account=self._extract_account(envelope),
            identifiers=identifiers,
            total=_optional_int(envelope.get("total")),
            limit=_optional_int(envelope.get("limit")),
            offset=_optional_int(envelope.get("offset")),
        )

    def _parse_json(self, raw_body: str | bytes) -> Mapping[str, Any]:
        try:
            envelope = json.loads(raw_body)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e
        if not isinstance(envelope, Mapping):
            raise DecodeError(
                f"Expected a JSON object envelope, got {type(envelope).__name__}"
            )
        return envelope

    def _extract_raw_items(
        self, envelope: Mapping[str, Any], descriptor: RequestDescriptor
    ) -> list[Any]:
        if descriptor.shape == DecodeShape.SINGLE:
            return [{k: v for k, v in envelope.items() if k not in _ENVELOPE_KEYS}]

        raw_items = envelope.get(descriptor.items_field)
        # Missing or null items is an empty page, not an error
        if raw_items is None:
            return []
        if not isinstance(raw_items, list):
            raise DecodeError(
                f"{descriptor.endpoint_id}: '{descriptor.items_field}' must be a list, "
                f"got {type(raw_items).__name__}"
            )
        return raw_items

    def _extract_cursor(self, envelope: Mapping[str, Any]) -> PageCursor | None:
        links = envelope.get("links")
        if links is None:
            return None
        if not isinstance(links, Mapping):
            raise DecodeError(f"'links' must be an object, got {type(links).__name__}")
        next_url = links.get("next")
        if not next_url:
            return None
        if not isinstance(next_url, str):
            raise DecodeError(f"'links.next' must be a string, got {type(next_url).__name__}")
        return PageCursor(next_url=next_url)

    def _extract_account(self, envelope: Mapping[str, Any]) -> CreditUsageRecord | None:
        account = envelope.get("account")
        if account is None:
            return None
        try:
            return CreditUsageRecord.model_validate(account)
        except PydanticValidationError as e:
            raise DecodeError(f"Malformed 'account' object: {e}") from e


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
