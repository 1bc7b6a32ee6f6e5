"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

The OWO_* environment of whoever runs the suite must never leak into tests,
so it is cleared for every test along with the cached configuration.
"""

from typing import Any

import pytest

from owo.core.config import ClientConfig, get_app_config, get_settings

OWO_ENV_VARS = ("OWO_KEY", "OWO_RESULT_DOMAIN", "OWO_ASSOCIATED", "OWO_CONFIG_DIR")


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop OWO_* variables and clear lru_cache'd config around each test."""
    for name in OWO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# Client Configuration Fixtures
# =============================================================================


@pytest.fixture
def client_config() -> ClientConfig:
    """ClientConfig pointing at a fake API host with token "T"."""
    return ClientConfig(
        token="T",
        base_url="https://api.test",
        user_agent="WhatsThisClient (owo-cli, test)",
        timeout=5.0,
        result_domain="owo.whats-th.is",
    )


# =============================================================================
# API Payload Fixtures
# =============================================================================


@pytest.fixture
def file_object_json() -> dict[str, Any]:
    """A type 0 (file) object as returned by GET /objects."""
    return {
        "bucket": "public",
        "key": "abc123.png",
        "dir": "/",
        "type": 0,
        "content_type": "image/png",
        "content_length": 2048,
        "created_at": "2023-04-01T12:00:00Z",
        "md5_hash": "d41d8cd98f00b204e9800998ecf8427e",
        "sha256_hash": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        "associated_with_current_user": True,
    }


@pytest.fixture
def redirect_object_json() -> dict[str, Any]:
    """A type 1 (redirect) object."""
    return {
        "bucket": "links",
        "key": "xyz",
        "dir": "/",
        "type": 1,
        "dest_url": "https://example.com/a/long/path",
        "created_at": "2023-04-02T08:30:00Z",
    }


@pytest.fixture
def tombstone_object_json() -> dict[str, Any]:
    """A type 2 (tombstone) object."""
    return {
        "bucket": "public",
        "key": "gone.txt",
        "dir": "/",
        "type": 2,
        "created_at": "2023-03-01T00:00:00Z",
        "deleted_at": "2023-03-02T00:00:00Z",
        "delete_reason": "user requested",
    }


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
