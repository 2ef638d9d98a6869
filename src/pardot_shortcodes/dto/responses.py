"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ShortcodeResponse(BaseModel):
    """Response DTO for a rendered shortcode.

    ``markup`` is always safe to drop into the page: it is empty whenever
    the shortcode could not be resolved.
    """

    markup: str = Field(..., description="Embed markup, empty if unresolved")
    outcome: str = Field(
        ...,
        description="One of 'found', 'not_found', 'fetch_failed', 'no_identifier'",
    )
    found: bool = Field(..., description="Whether an entity matched")
    refreshed: bool = Field(..., description="Whether the catalog was fetched from Pardot")
    lookup_time_ms: float = Field(..., description="Time taken to resolve in milliseconds")


class RefreshResponse(BaseModel):
    """Response DTO for a catalog refresh."""

    success: bool = Field(..., description="Whether the operation succeeded")
    forms: int = Field(..., description="Number of forms cached", ge=0)
    dynamic_content: int = Field(..., description="Number of dynamic content entries cached", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
