"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from content_cache.services import ResolutionService

    service = ResolutionService.create(cache=cache, storage=storage)
    entry = service.resolve_for_serving("/about")
    ```
"""

from .path_resolver import PathResolver
from .resolution_service import ResolutionService

__all__ = [
    "PathResolver",
    "ResolutionService",
]
