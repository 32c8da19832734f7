"""In-memory cache store with TTL expiry and size-bounded eviction."""

import threading
from typing import Any, Dict, Optional

from infrastructure.caching.models import CacheEntry, Clock, now_ms
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TTL_SECONDS = 3600


class MemoryCacheStore:
    """Key-value store holding CacheEntry objects in process memory.

    Capacity is a soft bound on the sum of entry sizes. When a write would
    exceed it, entries are evicted oldest-written first (by timestamp, not
    by last access) until the new entry fits.

    A lock guards the mapping and the size counter so the background sweep
    and request threads never observe a half-removed entry.

    Attributes:
        max_size_bytes: Capacity before eviction starts.
        strategy_name: Label reported by stats().
        clock: Callable returning epoch seconds; time.time when None.
    """

    def __init__(
        self,
        max_size_bytes: int,
        strategy_name: str = "memory",
        clock: Optional[Clock] = None,
    ):
        if max_size_bytes <= 0:
            raise ValueError("max_size_bytes must be greater than zero")
        self.max_size_bytes = max_size_bytes
        self.strategy_name = strategy_name
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._current_size = 0
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached data, or None when absent or expired.

        An expired entry is removed as a side effect.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_expired(now_ms(self.clock)):
                self._remove(key)
                logger.debug("memory_cache_expired", key=key)
                return None

            return entry.data

    def set(self, key: str, data: Any, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> CacheEntry:
        """Store or replace an entry.

        Args:
            key: Cache key.
            data: Value to cache.
            ttl_seconds: Time-to-live in seconds, must be positive.

        Returns:
            The stored CacheEntry.

        Raises:
            ValueError: If ttl_seconds is zero or negative.
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be greater than zero: {ttl_seconds}")

        entry = CacheEntry.create(data, ttl_seconds, self.clock)
        self.put_entry(key, entry)
        return entry

    def put_entry(self, key: str, entry: CacheEntry) -> None:
        """Store a prebuilt entry, keeping its timestamp and TTL."""
        with self._lock:
            # Replacement: drop the old entry so its size is not counted twice
            # and the key moves to the end of the insertion order.
            self._remove(key)

            while (
                self._entries
                and self._current_size + entry.size > self.max_size_bytes
            ):
                self._evict_oldest()

            self._entries[key] = entry
            self._current_size += entry.size

    def delete(self, key: str) -> None:
        """Remove an entry if present."""
        with self._lock:
            self._remove(key)

    def clear(self) -> None:
        """Remove all entries and reset the size counter."""
        with self._lock:
            self._entries.clear()
            self._current_size = 0

    def purge_expired(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            reference = now_ms(self.clock)
            expired_keys = [
                key
                for key, entry in self._entries.items()
                if entry.is_expired(reference)
            ]
            for key in expired_keys:
                self._remove(key)

        if expired_keys:
            logger.debug(
                "memory_cache_cleanup",
                expired_count=len(expired_keys),
                remaining_count=len(self),
            )
        return len(expired_keys)

    def stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        with self._lock:
            return {
                "entries": len(self._entries),
                "size_bytes": self._current_size,
                "max_size_bytes": self.max_size_bytes,
                "strategy": self.strategy_name,
            }

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _remove(self, key: str) -> Optional[CacheEntry]:
        # Caller holds the lock.
        entry = self._entries.pop(key, None)
        if entry is not None:
            self._current_size -= entry.size
        return entry

    def _evict_oldest(self) -> None:
        # Caller holds the lock. min() keeps the first of equal timestamps,
        # which is the earliest inserted.
        oldest_key = min(self._entries, key=lambda k: self._entries[k].timestamp)
        self._remove(oldest_key)
        logger.debug("memory_cache_evicted", key=oldest_key)
