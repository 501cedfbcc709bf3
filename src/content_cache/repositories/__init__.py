"""Repository layer for data access.

This layer abstracts storage and in-memory caching behind
protocol-based interfaces. This enables:
- Easy swapping of implementations (disk → object storage, LRU → TTL, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from content_cache.protocols import ContentStore, StorageReader

from .file_storage_reader import FileStorageReader
from .lru_repository import LRUContentCache

__all__ = [
    "ContentStore",
    "StorageReader",
    "FileStorageReader",
    "LRUContentCache",
]
