"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (LRU → TTL cache, disk → object storage)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from content_cache.protocols import ContentStore, StorageReader

    store: ContentStore = LRUContentCache(capacity=10)
    storage: StorageReader = FileStorageReader()
    ```
"""

from .content_store import ContentStore
from .storage_reader import StorageReader

__all__ = [
    "ContentStore",
    "StorageReader",
]
