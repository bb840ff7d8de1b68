"""
HTTP request pipeline for the Paystack API.

All Paystack calls go through PaystackHTTPClient.send() so that headers,
timeouts, TLS verification, logging and error classification are applied
the same way everywhere.

Features:
- Bearer authentication and JSON headers on a shared requests.Session
- Separate connect and read timeouts on every call
- Optional request/response logging with recursive key redaction
- Every failure raised as a classified PaystackError
- No internal retries; transient errors are surfaced to the caller

Usage:
    from paystack_client.conf import PaystackConfig
    from paystack_client.http_client import HTTPMethod, PaystackHTTPClient, RequestDescriptor

    client = PaystackHTTPClient(PaystackConfig(secret_key="sk_test_xxx"))
    envelope = client.send(RequestDescriptor(HTTPMethod.GET, "/bank", query={"country": "nigeria"}))
    envelope = client.post("/transaction/initialize", {"email": "a@b.co", "amount": 10050})
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

import requests

from paystack_client.classifier import (
    classify_body,
    classify_network_failure,
    classify_transport_failure,
)
from paystack_client.exceptions import PaystackError

if TYPE_CHECKING:
    from typing import Any

    from paystack_client.conf import PaystackConfig


logger = logging.getLogger(__name__)

USER_AGENT = "paystack-client-python/1.0"

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset({"authorization", "secret", "password", "token", "cvv", "pin"})


# =============================================================================
# Data Types
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods used by the Paystack API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One Paystack API request, built fresh per call.

    Attributes:
        method: HTTP method
        path: Path relative to the base URL ("/transaction/initialize")
        query: Query-string parameters
        body: JSON body (POST/PUT, optional for DELETE)
    """

    method: HTTPMethod
    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        method = self.method.upper() if isinstance(self.method, str) else self.method
        object.__setattr__(self, "method", HTTPMethod(method))
        object.__setattr__(self, "query", MappingProxyType(dict(self.query or {})))
        if self.body is not None:
            object.__setattr__(self, "body", MappingProxyType(dict(self.body)))


def redact(data: Any) -> Any:
    """
    Return a copy of ``data`` with sensitive values replaced.

    Keys are matched case-insensitively against SENSITIVE_KEYS at every
    nesting level, inside mappings and lists alike. The input is not
    modified.
    """
    if isinstance(data, Mapping):
        return {
            key: REDACTED
            if isinstance(key, str) and key.lower() in SENSITIVE_KEYS
            else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [redact(item) for item in data]
    return data


# =============================================================================
# HTTP Client
# =============================================================================


class PaystackHTTPClient:
    """
    Sends requests to the Paystack API and classifies failures.

    Configuration is validated on construction, so a client that exists
    can always issue requests. Safe to share between threads as far as
    requests.Session allows; the client itself holds no per-call state.

    Raises from send():
        PaystackNetworkError: No response (DNS, connect, timeout, TLS)
        PaystackAuthenticationError / PaystackValidationError /
        PaystackRateLimitError / PaystackServerError / PaystackError:
            Non-2xx status or ``status: false`` envelope
        PaystackError: 2xx response whose body is not a JSON object
    """

    def __init__(
        self,
        config: PaystackConfig,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Paystack configuration (validated here)
            session: Optional pre-built session (tests, connection pooling)

        Raises:
            ConfigurationError: Missing secret key or base URL, or TLS
                verification disabled in production mode
        """
        self.config = config.validate()
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(self._default_headers())
        self._io_logger = logging.getLogger(config.logging_channel)

    def _default_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.secret_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Cache-Control": "no-cache",
            "User-Agent": USER_AGENT,
        }

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @property
    def timeout(self) -> tuple[float, float]:
        """(connect, read) timeout tuple passed to requests."""
        return (self.config.connect_timeout, self.config.timeout)

    # =========================================================================
    # Pipeline
    # =========================================================================

    def send(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        """
        Execute a request and return the decoded envelope.

        Args:
            descriptor: What to send

        Returns:
            The response envelope ({"status": True, "message": ..., "data": ...})
        """
        method = descriptor.method.value
        log_context = {"method": method, "endpoint": descriptor.path}

        options: dict[str, Any] = {}
        if descriptor.query:
            options["params"] = dict(descriptor.query)
        if descriptor.body is not None and descriptor.method is not HTTPMethod.GET:
            options["json"] = dict(descriptor.body)

        self._log_request(descriptor)

        start_time = time.time()
        try:
            response = self.session.request(
                method,
                self._url(descriptor.path),
                timeout=self.timeout,
                verify=self.config.verify_ssl,
                **options,
            )
        except requests.RequestException as e:
            error = classify_network_failure(e)
            error.context.update(log_context)
            logger.error(
                f"Paystack request failed without response: {type(e).__name__}",
                extra={**log_context, "network_kind": error.network_kind.value},
            )
            raise error from e

        duration_ms = (time.time() - start_time) * 1000
        log_context = {**log_context, "status_code": response.status_code, "duration_ms": duration_ms}
        data = self._decode(response)

        if not 200 <= response.status_code < 300:
            error = classify_transport_failure(
                response.status_code,
                data,
                headers=response.headers,
                reason=response.reason or "",
            )
            error.context.update(log_context)
            logger.warning(
                f"Paystack API error: {error.message}",
                extra={**log_context, "kind": error.kind.value},
            )
            raise error

        if not isinstance(data, dict):
            logger.error("Invalid JSON response from Paystack API", extra=log_context)
            raise PaystackError(
                "Invalid JSON response from Paystack API.",
                response.status_code,
                context=log_context,
                response=response.text,
            )

        self._log_response(data, log_context)

        if data.get("status") is False:
            error = classify_body(data)
            error.context.update(log_context)
            logger.warning(
                f"Paystack API returned status false: {error.message}",
                extra={**log_context, "kind": error.kind.value},
            )
            raise error

        return data

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Send a GET request with ``params`` as the query string."""
        return self.send(RequestDescriptor(HTTPMethod.GET, path, query=params or {}))

    def post(self, path: str, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Send a POST request with ``data`` as the JSON body."""
        return self.send(RequestDescriptor(HTTPMethod.POST, path, body=data or {}))

    def put(self, path: str, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Send a PUT request with ``data`` as the JSON body."""
        return self.send(RequestDescriptor(HTTPMethod.PUT, path, body=data or {}))

    def delete(self, path: str, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Send a DELETE request, with a JSON body only when ``data`` is given."""
        return self.send(RequestDescriptor(HTTPMethod.DELETE, path, body=data))

    # =========================================================================
    # Logging
    # =========================================================================

    def _log_request(self, descriptor: RequestDescriptor) -> None:
        if not self.config.logging_enabled:
            return
        self._io_logger.info(
            "Paystack API Request",
            extra={
                "method": descriptor.method.value,
                "endpoint": descriptor.path,
                "options": redact({"query": descriptor.query, "json": descriptor.body}),
            },
        )

    def _log_response(self, data: dict[str, Any], log_context: dict[str, Any]) -> None:
        if not self.config.logging_enabled:
            return
        self._io_logger.info(
            "Paystack API Response",
            extra={**log_context, "data": redact(data)},
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> PaystackHTTPClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
