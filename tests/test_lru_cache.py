"""
Tests for the in-memory LRU content cache.
"""

import threading

import pytest

from content_cache.config import Settings
from content_cache.protocols import ContentStore
from content_cache.repositories import LRUContentCache


def test_satisfies_content_store_protocol():
    """LRUContentCache is usable wherever a ContentStore is expected."""
    assert isinstance(LRUContentCache(capacity=1), ContentStore)


@pytest.mark.parametrize("capacity", [0, -1])
def test_rejects_non_positive_capacity(capacity):
    """Zero and negative capacities are configuration sentinels, not cache sizes."""
    with pytest.raises(ValueError):
        LRUContentCache(capacity=capacity)


def test_create_sizes_cache_from_settings():
    """The factory maps the configured capacity, including the unbounded sentinel."""
    assert LRUContentCache.create(Settings(cache_capacity=3)).capacity == 3
    assert LRUContentCache.create(Settings(cache_capacity=0)).capacity is None


def test_hit_returns_unchanged_content():
    """A stored entry comes back with the exact type and bytes."""
    cache = LRUContentCache(capacity=4)
    cache.put("K", "text/plain", b"hello")

    entry = cache.get("K")

    assert entry is not None
    assert entry.key == "K"
    assert entry.content_type == "text/plain"
    assert entry.content == b"hello"
    assert entry.size == 5


def test_miss_returns_none_without_side_effects():
    """Looking up an unknown key changes neither entries nor order."""
    cache = LRUContentCache(capacity=2)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")

    assert cache.get("missing") is None
    assert cache.keys() == ["A", "B"]
    assert len(cache) == 2


def test_lru_order_evicts_least_recently_used():
    """put A, put B, get A, put C with capacity 2 evicts B."""
    cache = LRUContentCache(capacity=2)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")
    cache.get("A")
    cache.put("C", "text/plain", b"c")

    assert "B" not in cache
    assert "A" in cache
    assert "C" in cache
    assert cache.get("B") is None


def test_untouched_entries_evict_in_insertion_order():
    """With capacity 1, put A then put B leaves only B."""
    cache = LRUContentCache(capacity=1)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")

    assert cache.keys() == ["B"]
    assert cache.get("A") is None


def test_oldest_never_accessed_entry_goes_first():
    """Several untouched entries are evicted oldest first."""
    cache = LRUContentCache(capacity=3)
    for key in ["A", "B", "C", "D", "E"]:
        cache.put(key, "text/plain", key.encode())

    assert cache.keys() == ["C", "D", "E"]


def test_capacity_never_exceeded():
    """After every put the entry count stays within capacity."""
    cache = LRUContentCache(capacity=3)
    for i in range(50):
        cache.put(f"key-{i % 7}", "text/plain", str(i).encode())
        if i % 3 == 0:
            cache.get(f"key-{(i + 2) % 7}")
        assert len(cache) <= 3


def test_replacement_overwrites_whole_entry():
    """Re-putting a key replaces type and content and keeps the size of the cache."""
    cache = LRUContentCache(capacity=4)
    cache.put("K", "text/plain", b"v1")
    cache.put("other", "text/plain", b"x")

    cache.put("K", "text/html", b"v2")

    entry = cache.get("K")
    assert entry is not None
    assert entry.content_type == "text/html"
    assert entry.content == b"v2"
    assert len(cache) == 2


def test_replacement_makes_key_most_recent():
    """A replaced key is no longer the eviction candidate."""
    cache = LRUContentCache(capacity=2)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")
    cache.put("A", "text/plain", b"a2")
    cache.put("C", "text/plain", b"c")

    assert cache.keys() == ["A", "C"]


def test_replacement_does_not_mutate_previous_entry():
    """Entries handed out earlier keep their first content."""
    cache = LRUContentCache(capacity=2)
    first = cache.put("K", "text/plain", b"v1")
    cache.put("K", "text/html", b"v2")

    assert first.content == b"v1"
    assert first.content_type == "text/plain"


def test_unbounded_cache_never_evicts():
    """capacity=None keeps every entry."""
    cache = LRUContentCache(capacity=None)
    for i in range(200):
        cache.put(str(i), "text/plain", b"x")

    assert len(cache) == 200
    assert cache.get_stats()["evictions"] == 0


def test_contains_does_not_touch_recency():
    """Membership checks leave the eviction order alone."""
    cache = LRUContentCache(capacity=2)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")

    assert "A" in cache
    cache.put("C", "text/plain", b"c")

    assert cache.keys() == ["B", "C"]


def test_delete_and_clear():
    """Entries can be dropped one at a time or all at once."""
    cache = LRUContentCache(capacity=3)
    cache.put("A", "text/plain", b"a")
    cache.put("B", "text/plain", b"b")
    cache.put("C", "text/plain", b"c")

    assert cache.delete("B") is True
    assert cache.delete("B") is False
    assert cache.keys() == ["A", "C"]

    assert cache.clear_all() == 2
    assert cache.keys() == []
    assert cache.count_all() == 0

    cache.put("D", "text/plain", b"d")
    assert cache.keys() == ["D"]


def test_stats_count_hits_misses_and_evictions():
    """get_stats reports lookups and evictions."""
    cache = LRUContentCache(capacity=1)
    cache.put("A", "text/plain", b"a")
    cache.get("A")
    cache.get("nope")
    cache.put("B", "text/plain", b"b")

    assert cache.get_stats() == {
        "total_entries": 1,
        "capacity": 1,
        "hits": 1,
        "misses": 1,
        "evictions": 1,
    }


def test_concurrent_puts_respect_capacity():
    """Parallel writers never push the cache past its capacity."""
    cache = LRUContentCache(capacity=8)

    def writer(offset: int) -> None:
        for i in range(200):
            cache.put(f"{offset}-{i % 20}", "text/plain", b"x")
            cache.get(f"{offset}-{(i + 5) % 20}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 8
    assert len(cache.keys()) == 8
