"""Client configuration constants and resolution helpers.

This module centralizes the base URL, environment variable names and engine
defaults so the client facade can stay small and focused.
"""

from __future__ import annotations

import os

from .core.exceptions import MissingCredentialsError

DEFAULT_BASE_URL = "https://api.parcllabs.com"

# Environment variables consulted at client construction
ENV_API_KEY = "PARCL_LABS_API_KEY"
ENV_BASE_URL = "PARCL_LABS_BASE_URL"

# Seconds per physical request
DEFAULT_TIMEOUT = 30.0

# Maximum identifiers per batch request (property event history documents 1000)
DEFAULT_MAX_BATCH_SIZE = 1000


def resolve_api_key(api_key: str | None = None) -> str:
    """Resolve the API key from the argument or the environment.

    Raises:
        MissingCredentialsError: If neither source provides a non-empty key
    """
    key = api_key or os.environ.get(ENV_API_KEY)
    if not key:
        raise MissingCredentialsError(
            f"API key not provided; pass api_key or set the {ENV_API_KEY} environment variable"
        )
    return key


def resolve_base_url(base_url: str | None = None) -> str:
    """Resolve the base URL from the argument, the environment, or the default."""
    url = base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    return url.rstrip("/")
