"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class LinkItem(BaseModel):
    """Single stored URL (in link lists)."""

    key: str = Field(..., description="The URL or pattern as stored")
    is_wildcard: bool = Field(..., description="Whether the key contains '*'")
    handled: bool = Field(..., description="Whether this site would serve the URL at all")


class GoneListResponse(BaseModel):
    """Response DTO for listing Gone patterns, sorted by key."""

    specific: list[LinkItem] = Field(default_factory=list, description="Patterns without wildcards")
    wildcards: list[LinkItem] = Field(default_factory=list, description="Patterns with wildcards")
    total: int = Field(..., description="Total number of Gone patterns", ge=0)


class MissListResponse(BaseModel):
    """Response DTO for listing logged misses, newest first."""

    misses: list[str] = Field(default_factory=list, description="Logged URLs, newest first")
    total: int = Field(..., ge=0)
    max_entries: int = Field(..., description="Current miss log limit", ge=0)


class AddGoneResponse(BaseModel):
    """Response DTO for adding Gone patterns."""

    added: list[str] = Field(default_factory=list)
    already_exists: list[str] = Field(default_factory=list)
    rejected: list[str] = Field(
        default_factory=list,
        description="URLs this site does not serve; not added",
    )
    message: str = Field(..., description="Human-readable status message")


class PromoteMissResponse(BaseModel):
    """Response DTO for promoting logged misses."""

    promoted: list[str] = Field(default_factory=list)
    not_found: list[str] = Field(
        default_factory=list,
        description="URLs that were not in the miss log",
    )


class DeleteResponse(BaseModel):
    """Response DTO for delete and purge operations."""

    deleted_count: int = Field(..., ge=0)
    message: str = Field(..., description="Human-readable status message")


class MissLimitResponse(BaseModel):
    """Response DTO for changing the miss log limit."""

    max_entries: int = Field(..., ge=0)
    trimmed: int = Field(..., description="Entries deleted to honour the new limit", ge=0)


class ClassifyResponse(BaseModel):
    """Response DTO for classifying a URL."""

    url: str
    outcome: str = Field(..., description="'matched' (410) or 'unmatched' (404)")
    witness: str | None = Field(None, description="Gone pattern that matched")


class ContentSavedResponse(BaseModel):
    """Response DTO for a content save notification."""

    removed_count: int = Field(..., description="Gone entries cleared for the content", ge=0)


class StatsResponse(BaseModel):
    """Response DTO for engine statistics."""

    backend: str
    gone_entries: int = Field(..., ge=0)
    miss_entries: int = Field(..., ge=0)
    max_miss_entries: int = Field(..., ge=0)
    home_url: str
    pretty_permalinks: bool


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the entry store is reachable")
