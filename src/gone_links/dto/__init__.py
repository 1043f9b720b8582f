"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    AddGoneRequest,
    ClassifyRequest,
    ContentSavedRequest,
    MissLimitRequest,
    PromoteMissRequest,
    RemoveGoneRequest,
)
from .responses import (
    AddGoneResponse,
    ClassifyResponse,
    ContentSavedResponse,
    DeleteResponse,
    GoneListResponse,
    HealthCheckResponse,
    LinkItem,
    MissLimitResponse,
    MissListResponse,
    PromoteMissResponse,
    StatsResponse,
)

__all__ = [
    "AddGoneRequest",
    "RemoveGoneRequest",
    "PromoteMissRequest",
    "MissLimitRequest",
    "ClassifyRequest",
    "ContentSavedRequest",
    "LinkItem",
    "GoneListResponse",
    "MissListResponse",
    "AddGoneResponse",
    "PromoteMissResponse",
    "DeleteResponse",
    "MissLimitResponse",
    "ClassifyResponse",
    "ContentSavedResponse",
    "StatsResponse",
    "HealthCheckResponse",
]
