"""Cache service selecting memory, disk or hybrid storage.

Provides one get/set/delete/clear surface over the configured tiers.
Caching is best-effort: disk failures are logged and downgraded to a miss,
never raised to the caller.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from infrastructure.caching.disk import DiskCacheStore
from infrastructure.caching.errors import CacheIOError
from infrastructure.caching.models import CacheEntry, CacheStrategy, Clock, now_ms
from infrastructure.caching.store import DEFAULT_TTL_SECONDS, MemoryCacheStore
from infrastructure.caching.sweeper import (
    DEFAULT_SWEEP_INTERVAL_SECONDS,
    CacheSweeper,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BYTES_PER_MB = 1024 * 1024


class CacheService:
    """Class-based cache service.

    Strategies:
        - memory: entries live in a MemoryCacheStore only.
        - disk: entries are JSON files under `directory`.
        - hybrid: writes go to both tiers; reads check memory first, fall
          back to disk, and copy a disk hit back into memory.

    Usage:
        cache = CacheService(strategy="hybrid", directory=".cache")

        cache.set("language:fr-FR", catalog.to_dict(), ttl_seconds=3600)
        payload = cache.get("language:fr-FR")

        with CacheService(strategy="memory") as cache:
            cache.start_sweeper()
            ...

    Attributes:
        strategy: Selected CacheStrategy.
        default_ttl: TTL applied when set() gets none.
        memory: Memory tier (None for the disk strategy).
        disk: Disk tier (None for the memory strategy).
    """

    def __init__(
        self,
        strategy: CacheStrategy | str = CacheStrategy.MEMORY,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_size_mb: int = 50,
        directory: Path | str = ".cache",
        sweep_interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        memory_store: Optional[MemoryCacheStore] = None,
        disk_store: Optional[DiskCacheStore] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize cache service.

        Args:
            strategy: Storage strategy (memory, disk or hybrid).
            ttl_seconds: Default time-to-live for entries.
            max_size_mb: Memory tier capacity in megabytes.
            directory: Disk tier directory.
            sweep_interval_seconds: Interval for the background sweep.
            memory_store: Optional pre-configured memory tier.
            disk_store: Optional pre-configured disk tier.
            clock: Callable returning epoch seconds (default: time.time).
        """
        if isinstance(strategy, str):
            strategy = CacheStrategy.from_string(strategy)
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be greater than zero: {ttl_seconds}")

        self.strategy = strategy
        self.default_ttl = ttl_seconds
        self.clock = clock

        self.memory: Optional[MemoryCacheStore] = None
        if strategy.uses_memory:
            self.memory = memory_store or MemoryCacheStore(
                max_size_bytes=max_size_mb * BYTES_PER_MB,
                strategy_name=strategy.value,
                clock=clock,
            )

        self.disk: Optional[DiskCacheStore] = None
        if strategy.uses_disk:
            self.disk = disk_store or DiskCacheStore(directory, clock=clock)
            try:
                self.disk.ensure_directory()
            except CacheIOError as e:
                logger.error("disk_cache_init_failed", error=str(e))

        self._sweeper: Optional[CacheSweeper] = None
        if self.memory is not None:
            self._sweeper = CacheSweeper(
                self.memory.purge_expired,
                interval_seconds=sweep_interval_seconds,
            )

        logger.info(
            "initialized_cache_service",
            strategy=strategy.value,
            ttl_seconds=ttl_seconds,
            directory=str(self.disk.directory) if self.disk else None,
        )

    def get(self, key: str) -> Optional[Any]:
        """Get cached data for key.

        Args:
            key: Cache key.

        Returns:
            Cached data, or None if not found or expired.
        """
        if self.memory is not None:
            data = self.memory.get(key)
            if data is not None:
                logger.debug("cache_hit", key=key, tier="memory")
                return data

        if self.disk is not None:
            entry = self._read_disk(key)
            if entry is not None and not entry.is_expired(now_ms(self.clock)):
                logger.debug("cache_hit", key=key, tier="disk")
                if self.strategy is CacheStrategy.HYBRID and self.memory is not None:
                    self.memory.put_entry(key, entry)
                return entry.data

        logger.debug("cache_miss", key=key)
        return None

    def set(self, key: str, data: Any, ttl_seconds: Optional[int] = None) -> None:
        """Cache data under key.

        Args:
            key: Cache key.
            data: JSON-serializable value (required for disk tiers).
            ttl_seconds: Time-to-live in seconds (uses default if None).

        Raises:
            ValueError: If ttl_seconds is zero or negative.
        """
        ttl = self.default_ttl if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError(f"ttl_seconds must be greater than zero: {ttl}")

        entry = CacheEntry.create(data, ttl, self.clock)

        if self.memory is not None:
            self.memory.put_entry(key, entry)

        if self.disk is not None:
            try:
                self.disk.set_entry(key, entry)
            except CacheIOError as e:
                logger.warning("disk_cache_write_failed", key=key, error=str(e))

        logger.debug("cache_set", key=key, ttl_seconds=ttl, size=entry.size)

    def delete(self, key: str) -> None:
        """Remove key from every tier."""
        if self.memory is not None:
            self.memory.delete(key)

        if self.disk is not None:
            try:
                self.disk.delete(key)
            except CacheIOError as e:
                logger.warning("disk_cache_delete_failed", key=key, error=str(e))

        logger.debug("cache_deleted", key=key)

    def clear(self) -> None:
        """Remove all entries from every tier."""
        if self.memory is not None:
            self.memory.clear()

        if self.disk is not None:
            try:
                self.disk.clear()
            except CacheIOError as e:
                logger.warning("disk_cache_clear_failed", error=str(e))

        logger.info("cache_cleared", strategy=self.strategy.value)

    def purge_expired(self) -> int:
        """Remove expired memory entries now. Disk files are not swept."""
        if self.memory is None:
            return 0
        return self.memory.purge_expired()

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with entries, size_bytes, max_size_bytes and strategy,
            plus disk_directory and disk_entries when a disk tier exists.
        """
        if self.memory is not None:
            stats = self.memory.stats()
        else:
            stats = {"entries": 0, "size_bytes": 0, "max_size_bytes": 0}
        stats["strategy"] = self.strategy.value

        if self.disk is not None:
            stats["disk_directory"] = str(self.disk.directory)
            stats["disk_entries"] = self.disk.count()

        return stats

    def start_sweeper(self) -> None:
        """Start the background sweep of expired memory entries."""
        if self._sweeper is not None:
            self._sweeper.start()

    def stop_sweeper(self, timeout: Optional[float] = None) -> None:
        if self._sweeper is not None:
            self._sweeper.stop(timeout)

    @property
    def sweeper(self) -> Optional[CacheSweeper]:
        return self._sweeper

    def __enter__(self) -> "CacheService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop_sweeper()

    def _read_disk(self, key: str) -> Optional[CacheEntry]:
        try:
            return self.disk.get_entry(key)
        except CacheIOError as e:
            logger.warning("disk_cache_read_failed", key=key, error=str(e))
            return None
