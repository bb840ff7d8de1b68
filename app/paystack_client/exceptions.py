"""
Paystack error taxonomy.

Every failed API call surfaces as exactly one PaystackError whose
``kind`` is drawn from the closed ErrorKind set. Subclasses exist so
callers can ``except`` a specific kind; behaviour that differs per kind
(end-user text, operator suggestion, retryability) lives in the
module-level functions user_message(), suggestion() and should_retry(),
which dispatch on ``kind``.

Exception Hierarchy:
    ExternalServiceError (core)
    └── PaystackError - Base for API failures (kind GENERIC when used directly)
        ├── PaystackAuthenticationError - Bad or mismatched API key (401)
        ├── PaystackValidationError - Rejected parameters (422), field errors
        ├── PaystackNotFoundError - Resource lookup failed (404)
        ├── PaystackRateLimitError - Too many requests (429, retry)
        ├── PaystackNetworkError - No HTTP response (timeout/connection/TLS, retry)
        └── PaystackServerError - Paystack 5xx or maintenance (retry)

    ValidationError (core)
    ├── InvalidArgumentError - Required request fields missing (also a ValueError)
    └── InvalidChoiceError - Field value outside its allowed set (also a ValueError)

    BaseApplicationError (core)
    └── WebhookError
        ├── InvalidSignatureError - Missing or wrong X-Paystack-Signature
        └── InvalidPayloadError - Body is not a JSON object

Usage:
    from paystack_client.exceptions import PaystackError, PaystackRateLimitError

    try:
        paystack.transactions.verify(reference)
    except PaystackRateLimitError as e:
        schedule_retry(countdown=e.retry_after or 60)
    except PaystackError as e:
        logger.error(e.suggestion(), extra=e.to_dict())
        return {"error": e.user_message()}
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from core.exceptions import (
    BaseApplicationError,
    ConfigurationError,
    ExternalServiceError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any, Callable


class ErrorKind(str, Enum):
    """Closed set of API failure kinds."""

    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    SERVER = "server"
    GENERIC = "generic"


class NetworkErrorKind(str, Enum):
    """Subkind of a transport failure that produced no HTTP response."""

    TIMEOUT = "timeout"
    CONNECTION = "connection"
    TLS = "tls"


# =============================================================================
# API Errors
# =============================================================================


class PaystackError(ExternalServiceError):
    """
    Base exception for all Paystack API failures.

    Used directly for the GENERIC kind: API-level failures that match no
    more specific classification.

    Attributes:
        message: Raw error message (from Paystack or the transport)
        code: Numeric code (HTTP status or Paystack body code, 0 if none)
        context: Extra structured context (endpoint, method, headers, ...)
        response: Raw decoded response body, if any
        kind: ErrorKind tag
    """

    default_error_code: str = "PAYSTACK_ERROR"
    default_message: str = "An error occurred while communicating with Paystack."
    default_code: int = 0
    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        context: dict[str, Any] | None = None,
        response: Any = None,
        error_code: str | None = None,
    ):
        self.code = self.default_code if code is None else code
        self.context = dict(context or {})
        self.response = response
        super().__init__(
            message or self.default_message,
            error_code=error_code,
            details=self.context,
        )

    @property
    def is_retryable(self) -> bool:
        return should_retry(self)

    @property
    def has_response(self) -> bool:
        return self.response is not None

    def user_message(self) -> str:
        """End-user safe text; never the raw API message."""
        return user_message(self)

    def suggestion(self) -> str:
        """Remediation hint for operators and logs."""
        return suggestion(self)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["kind"] = self.kind.value
        result["code"] = self.code
        if self.response is not None:
            result["response"] = self.response
        return result


class PaystackAuthenticationError(PaystackError):
    """
    Paystack rejected the API key.

    Raised for HTTP 401 or for a ``status: false`` body whose message
    mentions authorization. A message naming "test" or "live" usually means
    a test key is being used against live data or vice versa.
    """

    default_error_code: str = "PAYSTACK_AUTHENTICATION_FAILED"
    default_message: str = "Authentication failed. Please check your API keys."
    default_code: int = 401
    kind: ErrorKind = ErrorKind.AUTHENTICATION

    @property
    def is_key_mismatch(self) -> bool:
        lowered = self.message.lower()
        return "test" in lowered or "live" in lowered


class PaystackValidationError(PaystackError):
    """
    Paystack rejected the request parameters.

    Attributes:
        errors: Field name -> list of messages, as returned by Paystack
    """

    default_error_code: str = "PAYSTACK_VALIDATION_FAILED"
    default_message: str = "Validation failed."
    default_code: int = 422
    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        errors: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, code, **kwargs)
        self.errors: dict[str, Any] = dict(errors or {})

    def has_error(self, field: str) -> bool:
        return field in self.errors

    def error_messages(self) -> list[str]:
        """Flatten field errors into a single list of messages."""
        messages: list[str] = []
        for error in self.errors.values():
            if isinstance(error, (list, tuple)):
                messages.extend(str(item) for item in error)
            else:
                messages.append(str(error))
        return messages

    def first_error(self) -> str | None:
        messages = self.error_messages()
        return messages[0] if messages else None


class PaystackNotFoundError(PaystackError):
    """
    A Paystack resource could not be found.

    Attributes:
        resource_type: Resource family, e.g. "customer"
        resource_id: The identifier that was looked up
    """

    default_error_code: str = "PAYSTACK_NOT_FOUND"
    default_message: str = "Resource not found."
    default_code: int = 404
    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, code, **kwargs)
        self.resource_type = resource_type
        self.resource_id = resource_id


class PaystackRateLimitError(PaystackError):
    """
    Paystack is throttling this account.

    The library never retries on its own; ``retry_after`` (seconds, from
    the Retry-After header) tells the caller when it is reasonable to try
    again.

    Attributes:
        retry_after: Seconds to wait, if Paystack said
        limit: Request allowance for the window, if reported
        remaining: Requests left in the window, if reported
    """

    default_error_code: str = "PAYSTACK_RATE_LIMITED"
    default_message: str = "Rate limit exceeded. Please try again later."
    default_code: int = 429
    kind: ErrorKind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        retry_after: int | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, code, **kwargs)
        self.retry_after = retry_after
        self.limit = limit
        self.remaining = remaining


class PaystackNetworkError(PaystackError):
    """
    The request never produced an HTTP response.

    IMPORTANT: On TIMEOUT the operation may have completed on Paystack's
    side. Verify by reference before retrying a charge or transfer.

    Attributes:
        network_kind: TIMEOUT, CONNECTION or TLS
    """

    default_error_code: str = "PAYSTACK_NETWORK_ERROR"
    default_message: str = "Network error occurred."
    default_code: int = 0
    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        network_kind: NetworkErrorKind = NetworkErrorKind.CONNECTION,
        **kwargs: Any,
    ):
        super().__init__(message, code, **kwargs)
        self.network_kind = network_kind

    @property
    def is_timeout(self) -> bool:
        return self.network_kind is NetworkErrorKind.TIMEOUT

    @property
    def is_connection_error(self) -> bool:
        return self.network_kind is NetworkErrorKind.CONNECTION

    @property
    def is_tls_error(self) -> bool:
        return self.network_kind is NetworkErrorKind.TLS


class PaystackServerError(PaystackError):
    """
    Paystack answered with a 5xx status.

    ``is_maintenance`` is true for 503 or when the message mentions
    maintenance.
    """

    default_error_code: str = "PAYSTACK_SERVER_ERROR"
    default_message: str = "Server error occurred."
    default_code: int = 500
    kind: ErrorKind = ErrorKind.SERVER

    @property
    def is_maintenance(self) -> bool:
        return self.code == 503 or "maintenance" in self.message.lower()


# =============================================================================
# Caller and Webhook Errors
# =============================================================================


class InvalidArgumentError(ValidationError, ValueError):
    """
    Required request parameters are missing or empty.

    Raised before any request is sent. ``missing_fields`` lists every
    missing field, not just the first.
    """

    default_error_code: str = "MISSING_PARAMETERS"

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            "Missing required parameters: " + ", ".join(self.missing_fields),
            details={"missing_fields": self.missing_fields},
        )


class InvalidChoiceError(ValidationError, ValueError):
    """A request field holds a value outside its allowed set."""

    default_error_code: str = "INVALID_CHOICE"

    def __init__(self, field: str, value: Any, choices: Sequence[str]):
        self.field = field
        self.value = value
        self.choices = tuple(choices)
        super().__init__(
            f"Invalid {field} '{value}'; expected one of: " + ", ".join(self.choices),
            details={"field": field, "value": value, "choices": list(self.choices)},
        )


class WebhookError(BaseApplicationError):
    """Base exception for inbound webhook failures."""

    default_error_code: str = "WEBHOOK_ERROR"


class InvalidSignatureError(WebhookError):
    """The X-Paystack-Signature header is missing or does not match."""

    default_error_code: str = "INVALID_WEBHOOK_SIGNATURE"

    def __init__(self, message: str = "Invalid webhook signature.", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidPayloadError(WebhookError):
    """The verified webhook body is not a JSON object."""

    default_error_code: str = "INVALID_WEBHOOK_PAYLOAD"

    def __init__(self, message: str = "Invalid JSON payload.", **kwargs: Any):
        super().__init__(message, **kwargs)


# =============================================================================
# Kind Dispatch
# =============================================================================


_RETRYABLE_KINDS = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.NETWORK, ErrorKind.SERVER})


def _rate_limit_user_message(error: PaystackRateLimitError) -> str:
    if error.retry_after:
        minutes = math.ceil(error.retry_after / 60)
        return f"Rate limit exceeded. Please try again in {minutes} minute(s)."
    return "Too many requests. Please try again later."


def _validation_user_message(error: PaystackValidationError) -> str:
    return error.first_error() or "The provided data is invalid."


def _not_found_user_message(error: PaystackNotFoundError) -> str:
    if error.resource_type:
        return f"{error.resource_type.capitalize()} not found. Please check and try again."
    return "The requested resource was not found."


def _server_user_message(error: PaystackServerError) -> str:
    if error.is_maintenance:
        return "Payment system is temporarily unavailable. Please try again shortly."
    return "A temporary error occurred. Please try again in a moment."


_USER_MESSAGES: dict[ErrorKind, Callable[[Any], str]] = {
    ErrorKind.AUTHENTICATION: lambda e: "Payment service is misconfigured. Please contact support.",
    ErrorKind.VALIDATION: _validation_user_message,
    ErrorKind.NOT_FOUND: _not_found_user_message,
    ErrorKind.RATE_LIMIT: _rate_limit_user_message,
    ErrorKind.NETWORK: lambda e: "Connection issue. Please check your internet and try again.",
    ErrorKind.SERVER: _server_user_message,
    ErrorKind.GENERIC: lambda e: "An error occurred while processing your payment.",
}


def _not_found_suggestion(error: PaystackNotFoundError) -> str:
    if error.resource_type and error.resource_id:
        return (
            f"The {error.resource_type} with ID '{error.resource_id}' was not found. "
            "Please check the ID and try again."
        )
    return "Verify that the resource exists and you have access to it."


_NETWORK_SUGGESTIONS = {
    NetworkErrorKind.TIMEOUT: (
        "The request timed out. Check your internet connection or increase "
        "PAYSTACK_TIMEOUT / PAYSTACK_CONNECT_TIMEOUT."
    ),
    NetworkErrorKind.CONNECTION: (
        "Could not connect to Paystack API. Check your internet connection "
        "and firewall settings."
    ),
    NetworkErrorKind.TLS: (
        "SSL certificate verification failed. Ensure SSL verification is "
        "enabled and certificates are up to date."
    ),
}


def _server_suggestion(error: PaystackServerError) -> str:
    if error.is_maintenance:
        return "Paystack API is currently under maintenance. Please try again later."
    return (
        "Paystack API encountered an error. This is temporary - please try again "
        "in a few moments. If the problem persists, contact Paystack support."
    )


_SUGGESTIONS: dict[ErrorKind, Callable[[Any], str]] = {
    ErrorKind.AUTHENTICATION: lambda e: (
        "Verify that PAYSTACK_SECRET_KEY is correct and matches the environment "
        "(test vs live)."
    ),
    ErrorKind.VALIDATION: lambda e: (
        "Check that all required parameters are provided and in the correct format. "
        "Review the API documentation for the correct request structure."
    ),
    ErrorKind.NOT_FOUND: _not_found_suggestion,
    ErrorKind.RATE_LIMIT: lambda e: (
        "Implement exponential backoff in your application or reduce the frequency "
        "of API calls. Consider caching frequently accessed data."
    ),
    ErrorKind.NETWORK: lambda e: _NETWORK_SUGGESTIONS[e.network_kind],
    ErrorKind.SERVER: _server_suggestion,
    ErrorKind.GENERIC: lambda e: (
        "Inspect the error message and raw response; consult the Paystack API "
        "documentation for this endpoint."
    ),
}


def user_message(error: PaystackError) -> str:
    """Consumer-safe message for an API error, chosen by its kind."""
    return _USER_MESSAGES[error.kind](error)


def suggestion(error: PaystackError) -> str:
    """Operator-facing remediation text for an API error, chosen by its kind."""
    return _SUGGESTIONS[error.kind](error)


def should_retry(error: Exception) -> bool:
    """
    Whether an error is transient.

    Rate limits, network failures and server errors are transient. The
    library itself never retries; this is for the caller's retry policy.
    """
    return isinstance(error, PaystackError) and error.kind in _RETRYABLE_KINDS


__all__ = [
    "ErrorKind",
    "NetworkErrorKind",
    "PaystackError",
    "PaystackAuthenticationError",
    "PaystackValidationError",
    "PaystackNotFoundError",
    "PaystackRateLimitError",
    "PaystackNetworkError",
    "PaystackServerError",
    "InvalidArgumentError",
    "InvalidChoiceError",
    "ConfigurationError",
    "WebhookError",
    "InvalidSignatureError",
    "InvalidPayloadError",
    "user_message",
    "suggestion",
    "should_retry",
]
