"""
Result type for service-layer outcomes.

ServiceResult is the standard wrapper for operations whose failures are
expected and should be reported rather than raised, such as webhook
event handlers: a handler that cannot process an event returns a failed
result, and the webhook endpoint decides what to do with it.

Pattern Comparison:
    - ServiceResult: Use for expected failures (unknown event, bad payload data)
    - Exceptions: Use for unexpected failures and API errors

Usage:
    from core.services import ServiceResult

    def handle_charge_success(data: dict) -> ServiceResult[str]:
        reference = data.get("reference")
        if not reference:
            return ServiceResult.failure(
                "charge.success without reference",
                error_code="INVALID_WEBHOOK_PAYLOAD",
            )
        return ServiceResult.success(reference)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from typing import Any

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Attributes:
        success: Whether the operation succeeded
        data: Result data if successful (None if failed)
        error: Error message if failed (None if successful)
        error_code: Machine-readable error code
        errors: Field-level errors for validation failures

    Usage:
        result = dispatcher.dispatch(payload)
        if result.success:
            ...
        else:
            logger.warning(f"Handler failed: {result.error} ({result.error_code})")
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None
    errors: dict[str, list[str]] | None = field(default=None)

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Alias for success() - use whichever reads better in context."""
        return cls(success=True, data=data)

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """
        Create a successful result.

        Args:
            data: The result data

        Returns:
            ServiceResult with success=True and data set
        """
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        errors: dict[str, list[str]] | None = None,
    ) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code
            errors: Field-level errors (for validation failures)

        Returns:
            ServiceResult with success=False and error details
        """
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            errors=errors,
        )

    @classmethod
    def from_exception(cls, exc: Exception, error_code: str | None = None) -> ServiceResult[T]:
        """
        Create a failed result from an exception.

        Uses the exception's own ``error_code`` when it has one (all
        BaseApplicationError subclasses do), otherwise the class name.

        Example:
            try:
                paystack.transactions.verify(reference)
            except PaystackError as e:
                return ServiceResult.from_exception(e)
        """
        code = error_code or getattr(exc, "error_code", None) or exc.__class__.__name__.upper()
        return cls(
            success=False,
            error=getattr(exc, "message", None) or str(exc),
            error_code=code,
        )

    def to_response(self) -> dict[str, Any]:
        """
        Convert to a JSON-serializable response body.

        Returns:
            Dict with success status and data or error details
        """
        if self.success:
            return {"success": True, "data": self.data}

        response: dict[str, Any] = {
            "success": False,
            "error": self.error,
        }
        if self.error_code:
            response["error_code"] = self.error_code
        if self.errors:
            response["errors"] = self.errors
        return response

    def __bool__(self) -> bool:
        return self.success
