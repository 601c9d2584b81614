"""
Caching Layer.

Provides caching infrastructure for repeated recommendation requests:
    - RecommendationCache: TTL-based caching with LRU eviction
    - CacheStats: Statistics tracking for cache operations
"""

from rwa_matching.caching.recommendation_cache import (
    CacheEntry,
    CacheStats,
    RecommendationCache,
    RecommendationCacheProtocol,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "RecommendationCache",
    "RecommendationCacheProtocol",
]
