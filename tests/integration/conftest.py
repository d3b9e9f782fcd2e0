"""Shared fixtures for integration tests."""

import os

import pytest

from parcl.labs.config import ENV_API_KEY


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless RUN_PARCL_NETWORK_TESTS=1 and an API key is set."""
    if os.environ.get("RUN_PARCL_NETWORK_TESTS") == "1" and os.environ.get(ENV_API_KEY):
        return
    skip = pytest.mark.skip(
        reason=f"Requires network access. Set RUN_PARCL_NETWORK_TESTS=1 and {ENV_API_KEY} to run"
    )
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(skip)
