"""Unit tests for paging data structures."""

from __future__ import annotations

import pytest

from parcl.labs.core.enums import PropertyType
from parcl.labs.runtime.paging import AggregatedResult, PageCursor, PaginationConfig, RequestDescriptor


class TestRequestDescriptor:
    """Test descriptor derivation."""

    def test_with_cursor_is_bare_get(self):
        descriptor = RequestDescriptor(
            method="POST", path="/v1/price_feed/history", query={"a": 1}, body={"parcl_id": [1]}
        )
        cursor = PageCursor("https://api.parcllabs.com/v1/price_feed/history?offset=10")

        follow_up = descriptor.with_cursor(cursor)

        assert follow_up.method == "GET"
        assert follow_up.path == cursor.next_url
        assert follow_up.query == {}
        assert follow_up.body is None
        assert descriptor.method == "POST"

    def test_with_cursor_keeps_decode_settings(self):
        descriptor = RequestDescriptor(
            method="POST",
            path="/v1/property/event_history",
            items_field="properties",
            id_field="parcl_property_id",
            endpoint_id="property.event_history",
        )

        follow_up = descriptor.with_cursor(PageCursor("https://x/next"))

        assert follow_up.items_field == "properties"
        assert follow_up.id_field == "parcl_property_id"
        assert follow_up.endpoint_id == "property.event_history"

    def test_with_window_on_get(self):
        descriptor = RequestDescriptor(method="GET", path="/v1/x", query={"q": "a"})
        assert descriptor.with_window(10, None).query == {"q": "a", "limit": 10}

    def test_with_window_on_post(self):
        descriptor = RequestDescriptor(method="POST", path="/v1/x", body={"parcl_id": [1]})
        windowed = descriptor.with_window(50, 100)
        assert windowed.body == {"parcl_id": [1], "limit": 50, "offset": 100}
        assert windowed.query == {}

    def test_with_window_in_query_for_post(self):
        descriptor = RequestDescriptor(
            method="POST",
            path="/v2/property_search",
            body={"parcl_ids": [1]},
            window_in_query=True,
        )

        windowed = descriptor.with_window(10, 20)

        assert windowed.query == {"limit": 10, "offset": 20}
        assert windowed.body == {"parcl_ids": [1]}

    def test_with_cursor_keeps_window_in_query(self):
        descriptor = RequestDescriptor(method="POST", path="/v2/property_search", window_in_query=True)
        assert descriptor.with_cursor(PageCursor("https://x/next")).window_in_query is True

    def test_with_window_noop(self):
        descriptor = RequestDescriptor(method="GET", path="/v1/x")
        assert descriptor.with_window(None, None) is descriptor

    def test_sendable_query_normalises_values(self):
        descriptor = RequestDescriptor(
            method="GET",
            path="/v1/x",
            query={"property_type": PropertyType.SINGLE_FAMILY, "flag": True, "off": False, "gone": None},
        )
        assert descriptor.sendable_query() == {"property_type": "SINGLE_FAMILY", "flag": 1, "off": 0}

    def test_sendable_query_empty_is_none(self):
        descriptor = RequestDescriptor(method="GET", path="/v1/x", query={"gone": None})
        assert descriptor.sendable_query() is None


class TestPaginationConfig:
    """Test pagination policy validation."""

    def test_defaults_single_page(self):
        config = PaginationConfig()
        assert config.auto_paginate is False
        assert config.max_pages is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"limit": 0}, {"offset": -1}, {"max_pages": 0}, {"max_items": 0}],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            PaginationConfig(**kwargs)


class TestAggregatedResult:
    def test_len_and_iter(self):
        result = AggregatedResult(items=["a", "b"])
        assert len(result) == 2
        assert list(result) == ["a", "b"]

    def test_tagged_requires_identifiers(self):
        with pytest.raises(ValueError, match="no identifier tags"):
            AggregatedResult(items=["a"]).tagged()

    def test_tagged_pairs(self):
        result = AggregatedResult(items=["a", "b"], identifiers=[1, 2])
        assert result.tagged() == [(1, "a"), (2, "b")]
