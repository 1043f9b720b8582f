"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class UrlListRequest(BaseModel):
    """Request DTO carrying fully qualified URLs or wildcard patterns.

    The handler will convert this to one engine call per URL.
    """

    urls: list[str] = Field(
        ...,
        description="Fully qualified URLs; '*' is a wildcard",
        min_length=1,
    )


class AddGoneRequest(UrlListRequest):
    """Request DTO for adding Gone patterns."""


class RemoveGoneRequest(UrlListRequest):
    """Request DTO for removing entries by exact key."""


class PromoteMissRequest(UrlListRequest):
    """Request DTO for promoting logged misses to the Gone list."""


class MissLimitRequest(BaseModel):
    """Request DTO for changing the miss log limit."""

    max_entries: int = Field(
        ...,
        description="Maximum number of logged misses to keep (0 disables logging)",
        ge=0,
    )


class ClassifyRequest(BaseModel):
    """Request DTO for classifying a URL."""

    url: str = Field(..., description="Normalized, percent-decoded request URL", min_length=1)


class ContentSavedRequest(BaseModel):
    """Request DTO for a content create/save notification."""

    permalink: str = Field(..., description="Primary URL of the content item", min_length=1)
    status: str = Field("publish", description="Publication status, e.g. 'publish' or 'draft'")
    kind: str = Field("post", description="Item type, e.g. 'post', 'page' or 'revision'")
    feed_link: str | None = Field(None, description="Comment feed URL of the item")
