"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ResolutionStats(BaseModel):
    """Request resolution counters (nested in cache stats)."""

    total_requests: int = Field(..., description="Requests resolved since startup", ge=0)
    served_from_cache: int = Field(..., description="Requests answered from memory", ge=0)
    loaded_from_storage: int = Field(..., description="Requests that read storage", ge=0)
    index_fallbacks: int = Field(
        ...,
        description="Storage loads answered by the directory index file",
        ge=0,
    )
    not_found: int = Field(..., description="Requests that resolved to nothing", ge=0)
    rejected: int = Field(
        ...,
        description="Not-found requests whose target escaped the server root",
        ge=0,
    )
    hit_rate: float = Field(..., description="Share of requests served from memory", ge=0.0, le=1.0)
    avg_lookup_time_ms: float = Field(..., description="Mean resolution time in milliseconds", ge=0.0)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    total_entries: int = Field(
        ...,
        description="Total number of cached entries",
        ge=0,
    )
    capacity: int | None = Field(
        None,
        description="Maximum number of entries (null = unbounded)",
        gt=0,
    )
    hits: int = Field(..., description="Cache lookups that found an entry", ge=0)
    misses: int = Field(..., description="Cache lookups that found nothing", ge=0)
    evictions: int = Field(..., description="Entries dropped to honour the capacity", ge=0)
    server_root: str = Field(..., description="Directory request targets are resolved under")
    resolution: ResolutionStats


class CacheClearResponse(BaseModel):
    """Response DTO for cache clear and evict operations."""

    success: bool = Field(..., description="Whether anything was removed")
    deleted_count: int = Field(..., description="Number of entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    storage_healthy: bool = Field(
        ...,
        description="Whether the server root and not-found page are reachable",
    )
