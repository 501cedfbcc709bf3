"""Content Cache - static file server with an in-memory LRU cache.

This package provides a layered architecture for serving files:

Layers:
    - protocols: Interface contracts (ContentStore, StorageReader)
    - repositories: LRU cache and filesystem implementations
    - services: Path resolution and the resolution pipeline
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from content_cache import FileStorageReader, LRUContentCache, ResolutionService

    service = ResolutionService.create(
        cache=LRUContentCache.create(),
        storage=FileStorageReader.create(),
    )
    entry = service.resolve_for_serving("/index.html")
    ```

For HTTP API:
    ```python
    from content_cache.api.app import app
    ```
"""

from content_cache.config import Settings, get_settings, settings
from content_cache.entities import CacheEntryEntity
from content_cache.exceptions import ContentCacheError, NotFoundAssetError
from content_cache.handlers import ContentHandler
from content_cache.mime import mime_type_for
from content_cache.protocols import ContentStore, StorageReader
from content_cache.repositories import FileStorageReader, LRUContentCache
from content_cache.services import PathResolver, ResolutionService

__all__ = [
    # Configuration
    "Settings",
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "ContentStore",
    "StorageReader",
    # Services (business logic)
    "PathResolver",
    "ResolutionService",
    # Handlers (HTTP)
    "ContentHandler",
    # Repositories (data access)
    "FileStorageReader",
    "LRUContentCache",
    # Entities (domain models)
    "CacheEntryEntity",
    # Errors
    "ContentCacheError",
    "NotFoundAssetError",
    # Helpers
    "mime_type_for",
]
