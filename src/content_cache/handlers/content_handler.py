"""HTTP handlers for content and cache operations.

Handlers convert between service results and HTTP responses.
They handle HTTP concerns like status codes, content types, and error handling.
"""

import random

from fastapi import HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from content_cache.dto import (
    CacheClearResponse,
    CacheStatsResponse,
    HealthCheckResponse,
)
from content_cache.services import ResolutionService


class ContentHandler:
    """HTTP handlers for content serving.

    This handler delegates resolution to ResolutionService
    and handles HTTP-specific concerns like:
    - Turning entries into responses with the right content type
    - Answering unresolved targets with the not-found page
    - Converting statistics to DTOs

    Example:
        ```python
        from content_cache.handlers import ContentHandler

        handler = ContentHandler(resolution_service=service)

        @app.get("/{request_target:path}")
        def serve(request_target: str):
            return handler.serve("/" + request_target)
        ```
    """

    def __init__(self, resolution_service: ResolutionService) -> None:
        """Initialize the content handler.

        Args:
            resolution_service: The resolution service for business logic (required).
        """
        self._service = resolution_service

    def serve(self, request_target: str) -> Response:
        """Handle GET requests for stored content.

        Args:
            request_target: The request path, e.g. ``/about``

        Returns:
            200 response with the content, or 404 with the not-found page

        Raises:
            NotFoundAssetError: If the not-found page itself is missing
        """
        entry = self._service.resolve_for_serving(request_target)
        if entry is None:
            return self.not_found()

        return Response(
            content=entry.content,
            status_code=status.HTTP_200_OK,
            media_type=entry.content_type,
        )

    def not_found(self) -> Response:
        """Build the 404 response from a fresh read of the not-found page."""
        page = self._service.load_not_found_page()
        return Response(
            content=page.content,
            status_code=status.HTTP_404_NOT_FOUND,
            media_type=page.content_type,
        )

    def roll_d20(self) -> PlainTextResponse:
        """Handle GET /d20 requests with a random number from 1 to 20."""
        return PlainTextResponse(str(random.randint(1, 20)))

    def get_stats(self) -> CacheStatsResponse:
        """Handle GET /_cache/stats requests.

        Returns:
            CacheStatsResponse with cache statistics

        Raises:
            HTTPException: If an error occurs while fetching stats
        """
        try:
            stats = self._service.get_stats()
            return CacheStatsResponse(**stats)

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

    def clear_cache(self, key: str | None = None) -> CacheClearResponse:
        """Handle DELETE /_cache requests.

        Args:
            key: Resolution key to drop. If None, clears everything.

        Returns:
            CacheClearResponse with the number of removed entries
        """
        try:
            if key is not None:
                deleted = self._service.evict(key)
                return CacheClearResponse(
                    success=deleted,
                    deleted_count=int(deleted),
                    message="Entry evicted" if deleted else f"No cache entry for {key}",
                )

            count = self._service.clear()
            return CacheClearResponse(
                success=True,
                deleted_count=count,
                message="Cache cleared successfully",
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._service.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            storage_healthy=is_healthy,
        )
