"""
Core - Infrastructure & Base Classes

Generic, reusable building blocks with no Paystack-specific logic.

Services (import from core.services):
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input validation failures
    - ConfigurationError: Missing or unsafe configuration
    - ExternalServiceError: Third-party service failures

Protocols (import from core.protocols):
    - CacheBackend: Generic cache interface

Usage:
    from core.services import ServiceResult
    from core.exceptions import BaseApplicationError, ExternalServiceError
    from core.protocols import CacheBackend

Note:
    - Business logic should NOT go here. Extend core classes in your domain apps.
"""

# Services (no Django dependencies)
from .services import ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    ConfigurationError,
    ExternalServiceError,
    ValidationError,
)

# Protocols (no Django dependencies)
from .protocols import CacheBackend

__all__ = [
    # Services
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "ConfigurationError",
    "ExternalServiceError",
    # Protocols
    "CacheBackend",
]
