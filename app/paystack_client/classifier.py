"""
Classification of Paystack failures into the error taxonomy.

Three entry points, one per failure shape:

- classify_body: HTTP 200 whose envelope says ``status: false``
- classify_transport_failure: Paystack answered with a non-2xx status
- classify_network_failure: no HTTP response at all

Each returns (never raises) exactly one PaystackError; the HTTP client
raises it. Rules are evaluated in a fixed order and the first match wins.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import requests

from paystack_client.exceptions import (
    NetworkErrorKind,
    PaystackAuthenticationError,
    PaystackError,
    PaystackNetworkError,
    PaystackRateLimitError,
    PaystackServerError,
    PaystackValidationError,
)

if TYPE_CHECKING:
    from typing import Any


UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

_TIMEOUT_MARKERS = ("timeout", "timed out")
_CONNECTION_MARKERS = ("connection", "could not connect")
_TLS_MARKERS = ("ssl", "certificate")


def _as_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _message_of(body: Any, fallback: str) -> str:
    if isinstance(body, Mapping) and body.get("message"):
        return str(body["message"])
    return fallback


def _errors_of(body: Any) -> dict[str, Any]:
    if isinstance(body, Mapping) and isinstance(body.get("errors"), Mapping):
        return dict(body["errors"])
    return {}


def classify_body(body: Mapping[str, Any]) -> PaystackError:
    """
    Classify a ``status: false`` envelope received with a 2xx status.

    Order:
        1. message mentions "authorization" -> Authentication
        2. message mentions "validation" or "invalid" -> Validation
        3. otherwise -> Generic, with the body's message and code

    Paystack sometimes sends a string ``code`` (e.g. "invalid_params");
    the numeric code is then 0 and the string is kept in context.
    """
    message = _message_of(body, UNKNOWN_ERROR_MESSAGE)
    raw_code = body.get("code") if isinstance(body, Mapping) else None
    code = _as_int(raw_code) or 0
    context: dict[str, Any] = {}
    if raw_code is not None and _as_int(raw_code) is None:
        context["api_code"] = raw_code

    lowered = message.lower()
    if "authorization" in lowered:
        return PaystackAuthenticationError(message, code, context=context, response=body)
    if "validation" in lowered or "invalid" in lowered:
        return PaystackValidationError(
            message, code, errors=_errors_of(body), context=context, response=body
        )
    return PaystackError(message, code, context=context, response=body)


def classify_transport_failure(
    status_code: int,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    reason: str = "",
) -> PaystackError:
    """
    Classify a non-2xx HTTP response.

    Fixed mapping:
        401 -> Authentication
        422 -> Validation (errors from body)
        429 -> RateLimit (Retry-After / X-RateLimit-* headers), body ignored
        5xx -> Server (maintenance on 503 or "maintenance" in message)
        anything else -> Generic

    Args:
        status_code: HTTP status
        body: Decoded JSON body, or None when it was not JSON
        headers: Response headers (case-insensitive mapping preferred)
        reason: HTTP reason phrase, used when the body has no message
    """
    headers = headers or {}
    message = _message_of(body, reason or f"HTTP {status_code}")
    context = {"status_code": status_code}

    if status_code == 401:
        return PaystackAuthenticationError(
            f"Authentication failed: {message}", status_code, context=context, response=body
        )
    if status_code == 422:
        return PaystackValidationError(
            f"Validation failed: {message}",
            status_code,
            errors=_errors_of(body),
            context=context,
            response=body,
        )
    if status_code == 429:
        return PaystackRateLimitError(
            "Rate limit exceeded. Please try again later.",
            status_code,
            retry_after=_as_int(headers.get("Retry-After")),
            limit=_as_int(headers.get("X-RateLimit-Limit")),
            remaining=_as_int(headers.get("X-RateLimit-Remaining")),
            context=context,
            response=body,
        )
    if 500 <= status_code < 600:
        return PaystackServerError(
            f"Paystack server error: {message}", status_code, context=context, response=body
        )
    return PaystackError(
        f"API request failed: {message}", status_code, context=context, response=body
    )


def network_kind_for(error: BaseException) -> NetworkErrorKind:
    """
    Work out the subkind of a response-less transport failure.

    requests' own SSLError and Timeout types are trusted first, since their
    messages embed "HTTPSConnectionPool" and would read as connection
    errors. Otherwise the message text decides; CONNECTION is the default.
    """
    if isinstance(error, requests.exceptions.SSLError):
        return NetworkErrorKind.TLS
    if isinstance(error, requests.exceptions.Timeout):
        return NetworkErrorKind.TIMEOUT

    text = str(error).lower()
    if any(marker in text for marker in _TIMEOUT_MARKERS):
        return NetworkErrorKind.TIMEOUT
    if any(marker in text for marker in _CONNECTION_MARKERS):
        return NetworkErrorKind.CONNECTION
    if any(marker in text for marker in _TLS_MARKERS):
        return NetworkErrorKind.TLS
    return NetworkErrorKind.CONNECTION


def classify_network_failure(error: BaseException) -> PaystackNetworkError:
    """Classify a failure where no HTTP response was received (DNS, timeout, TLS)."""
    return PaystackNetworkError(
        f"Request failed: {error}",
        network_kind=network_kind_for(error),
        context={"exception": type(error).__name__},
    )
