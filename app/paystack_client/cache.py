"""
Response cache for read-mostly Paystack endpoints.

ResponseCache memoizes envelopes behind any core.protocols.CacheBackend
(Django's cache by default). Entries expire passively: the TTL is checked
when an entry is read, and also handed to the backend so stores with
native expiry reclaim space on their own.

Design Notes:
    - A miss computes under one of a fixed set of lock stripes chosen by
      key hash, so concurrent callers for the same key compute once and
      the lock table never grows with the key space
    - Entries are written whole (a single backend.set of a CacheEntry),
      so readers see either the old entry or the new one
    - Failed computations are not cached
    - With caching disabled the backend is never touched

Usage:
    cache = ResponseCache(enabled=True, prefix="paystack", default_ttl=3600)

    envelope = cache.get_or_compute(
        cache.family_key("plans", query_fingerprint(query)),
        lambda: http.get("/plan", query),
    )
    cache.invalidate_family("plans")

List endpoints cache one entry per query. Rather than enumerate them,
every family has a generation token that is part of its list keys;
invalidate_family() replaces the token, orphaning the old entries until
their TTL runs out. A missing token (never set, or evicted by the backend)
is replaced by a fresh one, never by a fixed default, so eviction cannot
bring orphaned entries back.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from core.protocols import CacheBackend
    from paystack_client.conf import PaystackConfig

logger = logging.getLogger(__name__)

LOCK_STRIPES = 64


@dataclass(frozen=True)
class CacheEntry:
    """A cached envelope with its lifetime."""

    value: Any
    ttl: int
    created_at: float

    def is_expired(self, now: float | None = None) -> bool:
        now = time.time() if now is None else now
        return now - self.created_at >= self.ttl


def query_fingerprint(query: Mapping[str, Any]) -> str:
    """Stable short hash of a query mapping, independent of key order."""
    encoded = json.dumps(dict(query), sort_keys=True, default=str)
    return hashlib.md5(encoded.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    Keyed memoization with TTL and explicit invalidation.

    Attributes:
        enabled: Global switch; when False every call computes
        prefix: Namespace joined to keys as "{prefix}:{key}"
        default_ttl: TTL in seconds when get_or_compute gets none
    """

    def __init__(
        self,
        backend: CacheBackend | None = None,
        enabled: bool = True,
        prefix: str = "paystack",
        default_ttl: int = 3600,
    ) -> None:
        if backend is None:
            from django.core.cache import cache as backend
        self.backend = backend
        self.enabled = enabled
        self.prefix = prefix
        self.default_ttl = default_ttl
        self._locks = tuple(threading.RLock() for _ in range(LOCK_STRIPES))

    @classmethod
    def from_config(cls, config: PaystackConfig, backend: CacheBackend | None = None) -> ResponseCache:
        """Build a cache from the cache_* fields of a PaystackConfig."""
        return cls(
            backend=backend,
            enabled=config.cache_enabled,
            prefix=config.cache_prefix,
            default_ttl=config.cache_ttl,
        )

    def make_key(self, key: str) -> str:
        """Namespace a logical key with the configured prefix."""
        return f"{self.prefix}:{key}" if self.prefix else key

    def _lock_for(self, full_key: str) -> threading.RLock:
        return self._locks[hash(full_key) % len(self._locks)]

    def _read(self, full_key: str) -> CacheEntry | None:
        entry = self.backend.get(full_key)
        if not isinstance(entry, CacheEntry):
            return None
        if entry.is_expired():
            self.backend.delete(full_key)
            return None
        return entry

    def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Any],
        ttl: int | None = None,
    ) -> Any:
        """
        Return the cached value for ``key`` or compute and store it.

        Args:
            key: Logical key (prefix is added here)
            compute: Zero-argument callable producing the value
            ttl: Lifetime in seconds (default_ttl when None)

        Returns:
            The cached or freshly computed value
        """
        if not self.enabled:
            return compute()

        full_key = self.make_key(key)
        entry = self._read(full_key)
        if entry is not None:
            return entry.value

        with self._lock_for(full_key):
            # Another caller may have filled the entry while we waited
            entry = self._read(full_key)
            if entry is not None:
                return entry.value

            ttl = self.default_ttl if ttl is None else ttl
            value = compute()
            self.backend.set(full_key, CacheEntry(value, ttl, time.time()), timeout=ttl)
            logger.debug(f"Cached {full_key} for {ttl}s")
            return value

    def invalidate(self, key: str) -> None:
        """Remove an entry; no-op when absent or when caching is disabled."""
        if not self.enabled:
            return
        self.backend.delete(self.make_key(key))

    def _generation_key(self, family: str) -> str:
        return self.make_key(f"{family}:generation")

    def generation(self, family: str) -> str:
        """
        Current generation token of a key family.

        A family without a token gets a fresh one, so a token lost to
        backend eviction starts a new generation instead of reviving an
        old one. Disabled caches always report "0".
        """
        if not self.enabled:
            return "0"
        generation_key = self._generation_key(family)
        token = self.backend.get(generation_key)
        if token is None:
            token = uuid.uuid4().hex
            self.backend.set(generation_key, token, timeout=None)
            logger.debug(f"Seeded generation for {family}")
        return str(token)

    def family_key(self, family: str, key: str) -> str:
        """Logical key scoped to the current generation of ``family``."""
        return f"{family}:{self.generation(family)}:{key}"

    def invalidate_family(self, family: str) -> None:
        """Orphan every key built with family_key() for ``family``."""
        if not self.enabled:
            return
        self.backend.set(self._generation_key(family), uuid.uuid4().hex, timeout=None)
