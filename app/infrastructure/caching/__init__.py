"""Infrastructure cache.

Provides a TTL cache with memory, disk and hybrid strategies. It backs
translation catalog loads and project configuration loads.

Usage:

    from infrastructure.caching import CacheService

    cache = CacheService(strategy="hybrid", directory=".cache")

    cached = cache.get("language:fr-FR")
    if cached is None:
        catalog = load_catalog(...)
        cache.set("language:fr-FR", catalog.to_dict(), ttl_seconds=3600)
"""

from infrastructure.caching.disk import DiskCacheStore, sanitize_key
from infrastructure.caching.errors import CacheError, CacheIOError
from infrastructure.caching.factory import create_cache_service
from infrastructure.caching.models import CacheEntry, CacheStrategy, estimate_size
from infrastructure.caching.service import CacheService
from infrastructure.caching.store import MemoryCacheStore
from infrastructure.caching.sweeper import CacheSweeper

__all__ = [
    "CacheEntry",
    "CacheError",
    "CacheIOError",
    "CacheService",
    "CacheStrategy",
    "CacheSweeper",
    "DiskCacheStore",
    "MemoryCacheStore",
    "create_cache_service",
    "estimate_size",
    "sanitize_key",
]
