"""Unit tests for configuration resolution."""

from __future__ import annotations

import pytest

from parcl.labs.config import (
    DEFAULT_BASE_URL,
    ENV_API_KEY,
    ENV_BASE_URL,
    resolve_api_key,
    resolve_base_url,
)
from parcl.labs.core.exceptions import MissingCredentialsError


class TestResolveApiKey:
    def test_argument_wins(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "env-key")
        assert resolve_api_key("arg-key") == "arg-key"

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "env-key")
        assert resolve_api_key() == "env-key"

    def test_empty_values_rejected(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "")
        with pytest.raises(MissingCredentialsError):
            resolve_api_key("")


class TestResolveBaseUrl:
    def test_default(self, monkeypatch):
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        assert resolve_base_url() == DEFAULT_BASE_URL

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_BASE_URL, "http://localhost:8080")
        assert resolve_base_url() == "http://localhost:8080"

    def test_trailing_slash_stripped(self, monkeypatch):
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        assert resolve_base_url("https://api.example.com///") == "https://api.example.com"
