"""Unit tests for infrastructure.caching.store module.

Tests cover:
- get/set round trip and TTL expiry
- Size accounting on replacement
- Write-time eviction order
- purge_expired()
"""

from datetime import timedelta

import pytest

from infrastructure.caching.store import MemoryCacheStore

pytestmark = pytest.mark.unit


class TestMemoryCacheStore:
    """Tests for MemoryCacheStore."""

    def test_rejects_non_positive_capacity(self):
        """Capacity must be greater than zero."""
        with pytest.raises(ValueError):
            MemoryCacheStore(max_size_bytes=0)

    def test_set_then_get(self, memory_store):
        """A stored value is returned by get()."""
        memory_store.set("k", {"greeting": "Hello"}, 60)

        assert memory_store.get("k") == {"greeting": "Hello"}

    def test_get_missing_returns_none(self, memory_store):
        """get() returns None for unknown keys."""
        assert memory_store.get("missing") is None

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_set_rejects_non_positive_ttl(self, memory_store, ttl):
        """set() raises ValueError for a TTL of zero or less."""
        with pytest.raises(ValueError):
            memory_store.set("k", "v", ttl)
        assert "k" not in memory_store

    def test_expired_entry_removed_on_get(self, memory_store, frozen_clock):
        """get() drops an entry once its TTL has elapsed."""
        memory_store.set("k", "aaaa", 10)

        frozen_clock.tick(timedelta(seconds=9))
        assert memory_store.get("k") == "aaaa"

        frozen_clock.tick(timedelta(seconds=1))
        assert memory_store.get("k") is None
        assert len(memory_store) == 0
        assert memory_store.stats()["size_bytes"] == 0

    def test_replacement_does_not_double_count(self, memory_store):
        """Replacing a key subtracts the previous entry's size."""
        memory_store.set("k", "aaaa", 60)
        memory_store.set("k", "bb", 60)

        stats = memory_store.stats()
        assert stats["entries"] == 1
        assert stats["size_bytes"] == 8

    def test_evicts_oldest_written_first(self, memory_store, frozen_clock):
        """A write that overflows capacity evicts the oldest entry."""
        memory_store.set("first", "aaaa", 60)
        frozen_clock.tick(timedelta(seconds=1))
        memory_store.set("second", "bbbb", 60)
        frozen_clock.tick(timedelta(seconds=1))

        memory_store.set("third", "cccc", 60)

        assert "first" not in memory_store
        assert memory_store.get("second") == "bbbb"
        assert memory_store.get("third") == "cccc"
        assert memory_store.stats()["size_bytes"] == 24

    def test_eviction_ignores_reads(self, memory_store, frozen_clock):
        """Reading an entry does not protect it from eviction."""
        memory_store.set("first", "aaaa", 60)
        frozen_clock.tick(timedelta(seconds=1))
        memory_store.set("second", "bbbb", 60)
        memory_store.get("first")

        memory_store.set("third", "cccc", 60)

        assert "first" not in memory_store
        assert "second" in memory_store

    def test_equal_timestamps_evict_earliest_inserted(self, memory_store, frozen_clock):
        """Ties on timestamp evict in insertion order."""
        memory_store.set("first", "aaaa", 60)
        memory_store.set("second", "bbbb", 60)

        memory_store.set("third", "cccc", 60)

        assert "first" not in memory_store
        assert "second" in memory_store

    def test_size_bounded_by_capacity_plus_one_entry(self):
        """An oversized entry is still stored after evicting everything."""
        store = MemoryCacheStore(max_size_bytes=30)
        store.set("small", "aaaa", 60)

        store.set("big", "x" * 40, 60)

        assert "small" not in store
        assert store.get("big") == "x" * 40
        assert store.stats()["size_bytes"] == 84

    def test_purge_expired(self, frozen_clock):
        """purge_expired() removes only entries past their TTL."""
        store = MemoryCacheStore(max_size_bytes=1024)
        store.set("short", "a", 5)
        store.set("long", "b", 60)

        frozen_clock.tick(timedelta(seconds=5))

        assert store.purge_expired() == 1
        assert "short" not in store
        assert "long" in store

    def test_clear_resets_size(self, memory_store):
        """clear() empties the store and its size counter."""
        memory_store.set("k", "aaaa", 60)

        memory_store.clear()

        assert len(memory_store) == 0
        assert memory_store.stats()["size_bytes"] == 0

    def test_delete(self, memory_store):
        """delete() removes one key and ignores unknown keys."""
        memory_store.set("k", "aaaa", 60)

        memory_store.delete("k")
        memory_store.delete("unknown")

        assert memory_store.get("k") is None

    def test_stats(self):
        """stats() reports entries, size, capacity and strategy."""
        store = MemoryCacheStore(max_size_bytes=100, strategy_name="hybrid")
        store.set("k", "aaaa", 60)

        assert store.stats() == {
            "entries": 1,
            "size_bytes": 12,
            "max_size_bytes": 100,
            "strategy": "hybrid",
        }

    def test_injected_clock_drives_expiry_and_purge(self):
        """A store given a clock stamps and expires entries with it."""
        now = [500.0]
        store = MemoryCacheStore(max_size_bytes=100, clock=lambda: now[0])
        store.set("short", "v", 5)
        store.set("long", "v", 50)

        assert store.set("other", "v", 5).timestamp == 500_000

        now[0] += 5
        assert store.get("short") is None
        assert store.purge_expired() == 1
        assert store.get("long") == "v"
