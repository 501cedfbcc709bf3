import logging
import os
import signal

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse

from content_cache.api.dependencies import HandlerDep, lifespan
from content_cache.config import Settings, settings
from content_cache.dto import CacheClearResponse, CacheStatsResponse, HealthCheckResponse
from content_cache.exceptions import NotFoundAssetError

logger = logging.getLogger(__name__)


async def not_found_asset_handler(request: Request, exc: NotFoundAssetError) -> Response:
    """Halt the server when the not-found page disappears.

    Requests can no longer be answered correctly, so the current one gets
    a 500 and the process is asked to shut down.
    """
    logger.critical("Shutting down: %s", exc)
    os.kill(os.getpid(), signal.SIGTERM)
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings for this app. If None, uses the global settings.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Content Cache Server",
        description="Static file server with an in-memory LRU content cache",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings or settings
    app.add_exception_handler(NotFoundAssetError, not_found_asset_handler)  # type: ignore[arg-type]

    # Fixed routes go first; the catch-all below would shadow them.

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.get("/d20", response_class=PlainTextResponse)
    def d20(handler: HandlerDep) -> Response:
        """Roll a twenty-sided die."""
        return handler.roll_d20()

    @app.get("/_cache/stats", response_model=CacheStatsResponse)
    def cache_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Get cache statistics."""
        return handler.get_stats()

    @app.delete("/_cache", response_model=CacheClearResponse)
    def clear_cache(handler: HandlerDep, key: str | None = None) -> CacheClearResponse:
        """Clear the cache, or drop a single entry by its resolution key."""
        return handler.clear_cache(key)

    @app.get("/{request_target:path}")
    def serve(request_target: str, handler: HandlerDep) -> Response:
        """Serve a file from the cache or the server root."""
        return handler.serve("/" + request_target)

    return app


app = create_app()


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "content_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
