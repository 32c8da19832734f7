"""Feature-level fixtures for cache tests."""

import pytest

from infrastructure.caching import CacheService, DiskCacheStore, MemoryCacheStore


@pytest.fixture
def memory_store():
    """Memory store with room for two 12-byte entries."""
    return MemoryCacheStore(max_size_bytes=30)


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def disk_store(cache_dir):
    return DiskCacheStore(cache_dir)


@pytest.fixture
def memory_cache():
    service = CacheService(strategy="memory", ttl_seconds=60)
    yield service
    service.stop_sweeper(timeout=1)


@pytest.fixture
def disk_cache(cache_dir):
    return CacheService(strategy="disk", ttl_seconds=60, directory=cache_dir)


@pytest.fixture
def hybrid_cache(cache_dir):
    service = CacheService(strategy="hybrid", ttl_seconds=60, directory=cache_dir)
    yield service
    service.stop_sweeper(timeout=1)
