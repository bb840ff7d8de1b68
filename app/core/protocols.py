"""
Protocol definitions for generic infrastructure services.

Protocols specify the contracts infrastructure collaborators must meet,
so components depend on an interface instead of a concrete backend.

Available Protocols:
    CacheBackend: Key-value cache with per-key expiry

Usage:
    from core.protocols import CacheBackend

    def cached_operation(cache: CacheBackend, key: str):
        value = cache.get(key)
        if value is None:
            value = expensive_computation()
            cache.set(key, value, timeout=3600)
        return value

Note:
    Django's cache objects (``django.core.cache.cache`` and every entry of
    ``django.core.cache.caches``) satisfy CacheBackend without adaptation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class CacheBackend(Protocol):
    """
    Protocol for cache backends.

    Compatible with Django's cache interface. Any store (in-process dict,
    Redis, Memcached) that offers these three operations can back the
    response cache.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache.

        Args:
            key: Cache key
            default: Value to return if key not found

        Returns:
            Cached value or default
        """
        ...

    def set(self, key: str, value: Any, timeout: int | None = None) -> None:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            timeout: Expiration time in seconds (None never expires, as in Django)
        """
        ...

    def delete(self, key: str) -> bool:
        """
        Delete value from cache.

        Returns:
            True if key was deleted, False if it didn't exist
        """
        ...
