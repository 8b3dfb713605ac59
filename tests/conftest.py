"""Shared fixtures."""

from __future__ import annotations

import httpx
import pytest


class StaticURL:
    """Minimal `CloneURL` provider for builder tests."""

    def __init__(self, base: str) -> None:
        self._base = httpx.URL(base)

    def url(self) -> httpx.URL:
        return self._base


@pytest.fixture
def connection() -> StaticURL:
    return StaticURL("https://host")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep project/user .env files and VAPI_REST_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for key in ("VAPI_REST_BASE_URL", "VAPI_REST_HTTP_TIMEOUT_SECONDS", "VAPI_REST_USER_AGENT", "VAPI_REST_VERIFY_TLS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def static_url() -> type[StaticURL]:
    return StaticURL
