"""Resolution service for core business logic.

This service turns request targets into servable entries by coordinating
the path resolver, the content store (in-memory cache) and the storage
reader (disk).
"""

import logging
import threading
import time
import weakref
from collections.abc import Callable

from content_cache.config import settings
from content_cache.entities import CacheEntryEntity
from content_cache.exceptions import NotFoundAssetError
from content_cache.mime import mime_type_for
from content_cache.models import ResolutionMetrics
from content_cache.protocols import ContentStore, StorageReader
from content_cache.services.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ResolutionService:
    """Core content resolution service.

    This service depends on PROTOCOLS, not concrete implementations:
    - ContentStore: the in-memory LRU cache, or any other bounded store
    - StorageReader: local disk, or any other whole-file backend

    Cache entries are keyed by the storage path that was actually loaded.
    When a target is served through directory-index fallback, the entry
    is keyed by the index path (``root/docs/index.html``), not by the
    primary path (``root/docs``). A repeated request for the same target
    therefore misses on the primary path and reads the index file again.

    Concurrent misses for the same primary path are serialized by a
    per-path lock, so only one of them reads storage. The cache's own
    lock is never held across a storage read.

    Example:
        ```python
        from content_cache.repositories import FileStorageReader, LRUContentCache
        from content_cache.services import PathResolver, ResolutionService

        service = ResolutionService(
            cache=LRUContentCache(capacity=10),
            storage=FileStorageReader(),
            resolver=PathResolver("./serverroot"),
            not_found_path="./serverfiles/404.html",
        )
        entry = service.resolve_for_serving("/index.html")
        ```
    """

    def __init__(
        self,
        cache: ContentStore,
        storage: StorageReader,
        resolver: PathResolver,
        not_found_path: str,
        mime_type: Callable[[str], str] = mime_type_for,
    ) -> None:
        """Initialize the resolution service.

        Args:
            cache: In-memory content store (required).
            storage: Persistent storage reader (required).
            resolver: Maps request targets to storage paths (required).
            not_found_path: Path of the page served for unresolved targets.
            mime_type: Content-type inference from a path.
        """
        self._cache = cache
        self._storage = storage
        self._resolver = resolver
        self._not_found_path = not_found_path
        self._mime_type = mime_type

        self._key_locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._key_locks_guard = threading.Lock()
        self._metrics = ResolutionMetrics()
        self._metrics_lock = threading.Lock()

    @classmethod
    def create(
        cls,
        cache: ContentStore,
        storage: StorageReader,
        resolver: PathResolver | None = None,
        not_found_path: str | None = None,
    ) -> "ResolutionService":
        """Factory method to create ResolutionService with sensible defaults.

        Args:
            cache: In-memory content store (required).
            storage: Persistent storage reader (required).
            resolver: Path resolver. If None, built from settings.
            not_found_path: Not-found asset path. If None, uses settings.

        Returns:
            Configured ResolutionService
        """
        return cls(
            cache=cache,
            storage=storage,
            resolver=resolver or PathResolver.create(),
            not_found_path=not_found_path or settings.not_found_path,
        )

    def _lock_for(self, key: str) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[key] = lock
            return lock

    def _store(self, path: str, content: bytes) -> CacheEntryEntity:
        content_type = self._mime_type(path)
        return self._cache.put(path, content_type, content)

    def resolve_for_serving(self, request_target: str) -> CacheEntryEntity | None:
        """Resolve a request target to a servable entry.

        Business logic:
        1. Compute the primary storage path for the target
        2. Serve from cache on a hit, without touching storage
        3. On a miss, load the primary path and cache it
        4. If that is absent, load the directory index and cache it
           under the index path
        5. If both are absent, report not found

        Args:
            request_target: The request path, e.g. ``/about``

        Returns:
            CacheEntryEntity if resolved, None if not found
        """
        start_time = time.time()
        path = self._resolver.resolve(request_target)

        if not self._resolver.is_contained(path):
            logger.warning("Rejected request target outside server root: %s", request_target)
            self._record("not_found", start_time, rejected=True)
            return None

        entry = self._cache.get(path)
        if entry is not None:
            logger.debug("Cache hit: %s", path)
            self._record("hit", start_time)
            return entry

        with self._lock_for(path):
            # Another request may have loaded it while we waited.
            entry = self._cache.get(path)
            if entry is not None:
                self._record("hit", start_time)
                return entry

            logger.debug("Cache miss: %s", path)
            content = self._storage.load(path)
            if content is not None:
                entry = self._store(path, content)
                self._record("load", start_time)
                return entry

            fallback_path = self._resolver.resolve_index_fallback(request_target)
            content = self._storage.load(fallback_path)
            if content is not None:
                entry = self._store(fallback_path, content)
                self._record("load", start_time, fallback=True)
                return entry

        logger.info("Not found: %s", request_target)
        self._record("not_found", start_time)
        return None

    def load_not_found_page(self) -> CacheEntryEntity:
        """Load the not-found page from storage.

        The page is read on every call and never cached.

        Returns:
            CacheEntryEntity for the not-found page

        Raises:
            NotFoundAssetError: If the page cannot be loaded
        """
        content = self._storage.load(self._not_found_path)
        if content is None:
            logger.critical("Cannot find system not-found file: %s", self._not_found_path)
            raise NotFoundAssetError(self._not_found_path)

        return CacheEntryEntity(
            key=self._not_found_path,
            content_type=self._mime_type(self._not_found_path),
            content=content,
        )

    def _record(
        self,
        outcome: str,
        start_time: float,
        fallback: bool = False,
        rejected: bool = False,
    ) -> None:
        lookup_time_ms = (time.time() - start_time) * 1000
        with self._metrics_lock:
            if outcome == "hit":
                self._metrics.record_hit(lookup_time_ms)
            elif outcome == "load":
                self._metrics.record_load(lookup_time_ms, fallback=fallback)
            else:
                self._metrics.record_not_found(lookup_time_ms, rejected=rejected)

    def evict(self, key: str) -> bool:
        """Drop one cache entry by its resolution key.

        Args:
            key: The storage path the entry was cached under

        Returns:
            True if deleted, False otherwise
        """
        return self._cache.delete(key)

    def clear(self) -> int:
        """Clear all cache entries.

        Returns:
            Number of entries deleted
        """
        count = self._cache.clear_all()
        logger.info("Cleared %d cache entries", count)
        return count

    def get_stats(self) -> dict:
        """Get cache and resolution statistics.

        Returns:
            Dictionary with cache statistics and resolution metrics
        """
        stats = self._cache.get_stats()
        with self._metrics_lock:
            stats["resolution"] = self._metrics.to_dict()
        stats["server_root"] = self._resolver.server_root
        return stats

    def is_healthy(self) -> bool:
        """Check if the service can serve content.

        Returns:
            True if the cache, the server root and the not-found page are all reachable
        """
        return (
            self._cache.health_check()
            and self._storage.is_available(self._resolver.server_root)
            and self._storage.is_available(self._not_found_path)
        )

    @property
    def cache(self) -> ContentStore:
        """Get the underlying content store (for testing)."""
        return self._cache

    @property
    def storage(self) -> StorageReader:
        """Get the underlying storage reader (for testing)."""
        return self._storage

    @property
    def resolver(self) -> PathResolver:
        """Get the path resolver."""
        return self._resolver
