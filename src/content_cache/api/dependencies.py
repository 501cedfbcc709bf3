"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from content_cache.config import Settings, settings
from content_cache.handlers import ContentHandler
from content_cache.repositories import FileStorageReader, LRUContentCache
from content_cache.services import PathResolver, ResolutionService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ContentHandler:
    """Dependency injection for ContentHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ContentHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "content_handler", None)
    if handler is None:
        raise RuntimeError("ContentHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (cache + storage) - created explicitly
    2. Service (business logic) - stored in app.state.resolution_service
    3. Handler (HTTP endpoints) - stored in app.state.content_handler

    Startup fails if the not-found page cannot be loaded, since the
    server could not answer unresolved requests without it.

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Raises:
        NotFoundAssetError: If the not-found page is missing
    """
    app_settings: Settings = getattr(app.state, "settings", None) or settings

    # One cache per application, owned here and injected below
    cache = LRUContentCache.create(app_settings)
    storage = FileStorageReader.create()
    resolver = PathResolver(app_settings.server_root, index_file=app_settings.index_file)

    resolution_service = ResolutionService.create(
        cache=cache,
        storage=storage,
        resolver=resolver,
        not_found_path=app_settings.not_found_path,
    )
    resolution_service.load_not_found_page()

    content_handler = ContentHandler(resolution_service=resolution_service)

    # Store in app.state (FastAPI pattern)
    app.state.resolution_service = resolution_service
    app.state.content_handler = content_handler

    logger.info("Serving %s", app_settings.server_root)
    logger.info("Cache capacity: %s", cache.capacity or "unbounded")

    yield

    # Cleanup - remove from app.state
    del app.state.content_handler
    del app.state.resolution_service
    logger.info("Content cache shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ContentHandler, Depends(get_handler)]