"""
Pytest fixtures for the Paystack client tests.

Sections:
    - Configuration Fixtures
    - HTTP Fixtures
    - Cache Fixtures
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from paystack_client.cache import ResponseCache
from paystack_client.conf import PaystackConfig
from paystack_client.http_client import PaystackHTTPClient


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def paystack_config():
    """A valid config with caching on and a default callback URL."""
    return PaystackConfig(
        secret_key="sk_test_123",
        public_key="pk_test_123",
        webhook_secret="whsec_test",
        callback_url="https://shop.example.com/paystack/callback",
    )


# =============================================================================
# HTTP Fixtures
# =============================================================================


def make_response(
    status_code: int = 200,
    body: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
    reason: str = "OK",
) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    return response


@pytest.fixture
def session():
    """Real session whose request() is a mock, so nothing hits the network."""
    session = requests.Session()
    session.request = MagicMock(
        return_value=make_response(200, {"status": True, "message": "OK", "data": {}})
    )
    return session


@pytest.fixture
def http_client(paystack_config, session):
    """HTTP client wired to the mocked session."""
    return PaystackHTTPClient(paystack_config, session=session)


@pytest.fixture
def mock_http():
    """Stand-in HTTP client for façade tests."""
    http = MagicMock(spec=PaystackHTTPClient)
    envelope = {"status": True, "message": "OK", "data": {}}
    http.get.return_value = envelope
    http.post.return_value = envelope
    http.put.return_value = envelope
    http.delete.return_value = envelope
    return http


# =============================================================================
# Cache Fixtures
# =============================================================================


class InMemoryBackend:
    """Dict-backed CacheBackend that records every call."""

    def __init__(self):
        self.store: dict[str, Any] = {}
        self.calls: list[tuple[str, str]] = []

    def get(self, key, default=None):
        self.calls.append(("get", key))
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.calls.append(("set", key))
        self.store[key] = value

    def delete(self, key):
        self.calls.append(("delete", key))
        return self.store.pop(key, None) is not None


@pytest.fixture
def cache_backend():
    return InMemoryBackend()


@pytest.fixture
def response_cache(cache_backend):
    return ResponseCache(backend=cache_backend, enabled=True, prefix="paystack", default_ttl=3600)
