"""
Base exception classes for application-wide error handling.

This module provides the exception roots that every package in the
project derives from. Keeping a single root gives:
- Consistent structured logging (``to_dict()``)
- Machine-readable error codes
- A place to hang free-form context without subclass-specific plumbing

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Caller supplied bad or incomplete input
    ├── ConfigurationError - Misconfiguration detected at construction time
    └── ExternalServiceError - A third-party service call failed

Usage:
    from core.exceptions import ValidationError

    raise ValidationError(
        "Missing required parameters: email, amount",
        error_code="MISSING_PARAMETERS",
        details={"missing_fields": ["email", "amount"]},
    )

    try:
        ...
    except BaseApplicationError as e:
        logger.error("Operation failed", extra=e.to_dict())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to a dictionary for logs or API responses.

        Example:
            {
                "error": "Missing required parameters: email",
                "error_code": "MISSING_PARAMETERS",
                "details": {"missing_fields": ["email"]}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails before any I/O happens.

    Example:
        raise ValidationError(
            "Validation failed",
            details={"email": ["Required"], "amount": ["Required"]},
        )
    """

    default_error_code: str = "VALIDATION_ERROR"


class ConfigurationError(BaseApplicationError):
    """
    Raised when a component is constructed with unusable configuration.

    Configuration problems are fatal: components raise this from their
    constructor so a misconfigured object never performs any work.

    Example:
        if not secret_key:
            raise ConfigurationError(
                "Paystack secret key is not set.",
                error_code="MISSING_SECRET_KEY",
            )
    """

    default_error_code: str = "CONFIGURATION_ERROR"


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Use for:
    - Third-party API error responses
    - Network timeouts and connection failures
    - Unexpected or unparseable external responses

    Note:
        Log the original error for debugging but don't expose
        internal details to end users.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
