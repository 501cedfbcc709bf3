"""Content store protocol.

Defines the interface for any bounded store that keeps resolved
response bodies in memory, keyed by the storage path they came from.

Implementations can include:
- In-process LRU cache (default)
- A size-bounded or TTL-based variant
"""

from typing import Protocol, runtime_checkable

from content_cache.entities import CacheEntryEntity


@runtime_checkable
class ContentStore(Protocol):
    """Protocol for content cache backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Example:
        ```python
        from content_cache.protocols import ContentStore

        store: ContentStore = LRUContentCache(capacity=10)
        ```
    """

    def get(self, key: str) -> CacheEntryEntity | None:
        """Look up an entry and mark it most recently used.

        Args:
            key: The resolution key

        Returns:
            The stored entry, or None on a miss
        """
        ...

    def put(self, key: str, content_type: str, content: bytes) -> CacheEntryEntity:
        """Insert or fully replace the entry for a key.

        Args:
            key: The resolution key
            content_type: MIME type of the content
            content: The response body

        Returns:
            The stored entry
        """
        ...

    def __contains__(self, key: object) -> bool:
        """Check membership without touching the recency order."""
        ...

    def delete(self, key: str) -> bool:
        """Delete a specific entry by key.

        Args:
            key: The key to delete

        Returns:
            True if deleted, False otherwise
        """
        ...

    def clear_all(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries deleted
        """
        ...

    def count_all(self) -> int:
        """Count total entries in the cache.

        Returns:
            Total number of cached entries
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
