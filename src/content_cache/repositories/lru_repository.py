"""In-memory LRU implementation of ContentStore.

Entries live in a dict index for O(1) lookup, and every entry also sits
in a circular doubly linked recency list anchored on a sentinel node.
The node right after the sentinel is the most recently used; the node
right before it is the next eviction victim.
"""

import logging
import threading
from collections.abc import Iterator

from content_cache.config import Settings, settings
from content_cache.entities import CacheEntryEntity

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("key", "entry", "prev", "next")

    def __init__(self, key: str = "", entry: CacheEntryEntity | None = None) -> None:
        self.key = key
        self.entry = entry
        self.prev: _Node = self
        self.next: _Node = self


class LRUContentCache:
    """Bounded least-recently-used cache of response bodies.

    This class satisfies the ContentStore protocol through structural
    typing - no explicit inheritance needed.

    A single lock guards the index, the recency list and the counters.
    Callers never perform I/O while it is held.

    Example:
        ```python
        cache = LRUContentCache(capacity=10)
        cache.put("./serverroot/index.html", "text/html", b"<h1>hi</h1>")
        entry = cache.get("./serverroot/index.html")
        ```
    """

    def __init__(self, capacity: int | None = None) -> None:
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries. None means unbounded.

        Raises:
            ValueError: If capacity is zero or negative
        """
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be a positive integer or None, got {capacity}")

        self._capacity = capacity
        self._index: dict[str, _Node] = {}
        self._root = _Node()
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @classmethod
    def create(cls, app_settings: Settings | None = None) -> "LRUContentCache":
        """Factory method to create LRUContentCache from settings.

        Args:
            app_settings: Settings to size the cache from. If None, uses the
                global settings.

        Returns:
            Configured LRUContentCache
        """
        return cls(capacity=(app_settings or settings).capacity_limit)

    # Recency list primitives; callers hold self._lock.

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    def _push_front(self, node: _Node) -> None:
        node.prev = self._root
        node.next = self._root.next
        self._root.next.prev = node
        self._root.next = node

    def _evict_lru(self) -> None:
        victim = self._root.prev
        self._unlink(victim)
        del self._index[victim.key]
        self._evictions += 1
        logger.debug("Evicted %s", victim.key)

    def get(self, key: str) -> CacheEntryEntity | None:
        """Look up an entry and mark it most recently used.

        Args:
            key: The resolution key

        Returns:
            The stored entry unchanged, or None on a miss
        """
        with self._lock:
            node = self._index.get(key)
            if node is None:
                self._misses += 1
                return None

            self._unlink(node)
            self._push_front(node)
            self._hits += 1
            return node.entry

    def put(self, key: str, content_type: str, content: bytes) -> CacheEntryEntity:
        """Insert or fully replace the entry for a key.

        A new key arriving at a full cache first evicts the least recently
        used entry. Entries that were never read after insertion are evicted
        oldest first.

        Args:
            key: The resolution key
            content_type: MIME type of the content
            content: The response body

        Returns:
            The stored entry
        """
        entry = CacheEntryEntity(key=key, content_type=content_type, content=bytes(content))

        with self._lock:
            node = self._index.get(key)
            if node is not None:
                node.entry = entry
                self._unlink(node)
                self._push_front(node)
                return entry

            if self._capacity is not None and len(self._index) >= self._capacity:
                self._evict_lru()

            node = _Node(key, entry)
            self._index[key] = node
            self._push_front(node)
            return entry

    def delete(self, key: str) -> bool:
        """Delete a specific entry by key.

        Args:
            key: The key to delete

        Returns:
            True if deleted, False otherwise
        """
        with self._lock:
            node = self._index.pop(key, None)
            if node is None:
                return False
            self._unlink(node)
            return True

    def clear_all(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries deleted
        """
        with self._lock:
            count = len(self._index)
            self._index.clear()
            self._root.prev = self._root
            self._root.next = self._root
            return count

    def count_all(self) -> int:
        """Count total entries in the cache."""
        with self._lock:
            return len(self._index)

    def keys(self) -> list[str]:
        """Return cached keys from least to most recently used."""
        with self._lock:
            return list(self._iter_lru())

    def _iter_lru(self) -> Iterator[str]:
        node = self._root.prev
        while node is not self._root:
            yield node.key
            node = node.prev

    def health_check(self) -> bool:
        """An in-process cache is always reachable."""
        return True

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with entry count, capacity and hit/miss/eviction counters
        """
        with self._lock:
            return {
                "total_entries": len(self._index),
                "capacity": self._capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    @property
    def capacity(self) -> int | None:
        """Maximum entry count, or None when unbounded."""
        return self._capacity

    def __len__(self) -> int:
        return self.count_all()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._index
