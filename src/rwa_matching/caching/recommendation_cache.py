"""
Recommendation Cache - TTL-based Caching with LRU Eviction.

Caches ranked recommendation lists so that repeated dashboard requests
for an unchanged profile and catalog are not re-scored.

Design Notes:
    - Keys embed profile id, profile version, catalog version, config
      hash and the query, so any change upstream misses naturally
    - TTL-based expiration for freshness
    - LRU eviction when max entry count exceeded
    - Thread-safe with RLock
"""

from __future__ import annotations

import hashlib
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from rwa_matching.config.models import CacheConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class RecommendationCacheProtocol(Protocol):
    """Protocol for recommendation cache implementations."""

    @property
    def enabled(self) -> bool:
        """Whether lookups and stores take effect."""
        ...

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value in cache."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute and store it."""
        ...

    def invalidate_profile(self, profile_id: str) -> int:
        """Drop all entries of one profile."""
        ...

    def clear(self) -> None:
        """Clear all cache entries."""
        ...


@dataclass
class CacheEntry:
    """A single cache entry with its expiry time."""

    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now > self.expires_at


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    current_entries: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class RecommendationCache:
    """
    TTL-based cache with LRU eviction policy.

    Cache Key Format:
        f"{profile_id}:{params_hash}"

        Example: "inv-001:3b1f0c9d2a4e7f60"

    The profile id prefix allows dropping every entry of one investor
    with ``invalidate_profile``.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize cache.

        Args:
            config: Cache configuration
            clock: Time source in seconds
        """
        self.config = config or CacheConfig()
        self._clock = clock
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found/expired
        """
        if not self.enabled:
            return None

        with self._lock:
            entry = self._cache.get(key)

            if entry is None:
                self._stats.misses += 1
                return None

            if entry.is_expired(self._clock()):
                del self._cache[key]
                self._stats.expirations += 1
                self._stats.misses += 1
                logger.debug(f"Cache EXPIRED: {key}")
                return None

            # Move to end for LRU
            self._cache.move_to_end(key)
            self._stats.hits += 1
            return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Store value in cache.

        Args:
            key: Cache key
            value: Value to cache (should be immutable)
        """
        if not self.enabled:
            return

        ttl = self.config.ttl_seconds
        expires_at = self._clock() + ttl if ttl > 0 else None

        with self._lock:
            self._cache.pop(key, None)
            while len(self._cache) >= self.config.max_entries:
                evicted, _ = self._cache.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Cache EVICTED (LRU): {evicted}")
            self._cache[key] = CacheEntry(value=value, expires_at=expires_at)

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """
        Return the cached value or compute and store it.

        Args:
            key: Cache key
            compute_fn: Called on a miss

        Returns:
            Cached or freshly computed value
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        value = compute_fn()
        self.set(key, value)
        return value

    def invalidate_profile(self, profile_id: str) -> int:
        """
        Drop all entries of one profile.

        Returns:
            Number of entries invalidated
        """
        with self._lock:
            keys = [k for k in self._cache if k.rsplit(":", 1)[0] == profile_id]
            for key in keys:
                del self._cache[key]
            if keys:
                logger.debug(f"Cache INVALIDATED {len(keys)} entries of '{profile_id}'")
            return len(keys)

    def clear(self) -> None:
        """Clear all cache entries."""
        with self._lock:
            self._cache.clear()
            logger.info("Recommendation cache CLEARED")

    def get_stats(self) -> CacheStats:
        """Get a snapshot of cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                expirations=self._stats.expirations,
                current_entries=len(self._cache),
            )

    @staticmethod
    def make_key(
        profile_id: str,
        profile_version: int,
        catalog_version: int,
        config_hash: str,
        query: Tuple[Any, ...] = (),
    ) -> str:
        """
        Create a cache key for one recommendation request.

        Args:
            profile_id: Investor profile id
            profile_version: Version of the profile that was scored
            catalog_version: Version of the asset catalog snapshot
            config_hash: Hash of the matching configuration
            query: Request parameters (limit, floor, type filter)

        Returns:
            Cache key in format "profile_id:params_hash"
        """
        param_str = repr((profile_version, catalog_version, config_hash, query))
        param_hash = hashlib.sha256(param_str.encode()).hexdigest()[:16]
        return f"{profile_id}:{param_hash}"
