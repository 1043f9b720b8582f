from typing import Any

from fastapi import APIRouter, FastAPI

from gone_links.api.dependencies import HandlerDep, build_lifespan
from gone_links.api.gone_hook import install_gone_hook
from gone_links.config import Settings, settings
from gone_links.dto import (
    AddGoneRequest,
    AddGoneResponse,
    ClassifyRequest,
    ClassifyResponse,
    ContentSavedRequest,
    ContentSavedResponse,
    DeleteResponse,
    GoneListResponse,
    HealthCheckResponse,
    MissLimitRequest,
    MissLimitResponse,
    MissListResponse,
    PromoteMissRequest,
    PromoteMissResponse,
    RemoveGoneRequest,
    StatsResponse,
)
from gone_links.protocols import EntryStore

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Gone Links API",
        "version": "0.1.0",
        "description": "HTTP 410 (Gone) responses for permanently removed URLs",
        "endpoints": {
            "gone": "/admin/gone",
            "misses": "/admin/misses",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@router.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(handler: HandlerDep) -> StatsResponse:
    """Get engine statistics."""
    return await handler.get_stats()


@router.get("/admin/gone", response_model=GoneListResponse)
async def list_gone(handler: HandlerDep) -> GoneListResponse:
    """List Gone patterns, specific URLs and wildcards separately."""
    return await handler.list_gone()


@router.post("/admin/gone", response_model=AddGoneResponse)
async def add_gone(request: AddGoneRequest, handler: HandlerDep) -> AddGoneResponse:
    """
    Add URLs or wildcard patterns to the Gone list.

    Args:
        request: URLs to add, one pattern each.

    Returns:
        Which URLs were added, already listed, or rejected.
    """
    return await handler.add_gone(request)


@router.delete("/admin/gone", response_model=DeleteResponse)
async def remove_gone(request: RemoveGoneRequest, handler: HandlerDep) -> DeleteResponse:
    """Remove entries by exact key."""
    return await handler.remove_gone(request)


@router.get("/admin/misses", response_model=MissListResponse)
async def list_misses(handler: HandlerDep) -> MissListResponse:
    """List recently logged misses, newest first."""
    return await handler.list_misses()


@router.delete("/admin/misses", response_model=DeleteResponse)
async def purge_misses(handler: HandlerDep) -> DeleteResponse:
    """Delete every logged miss."""
    return await handler.purge_misses()


@router.post("/admin/misses/promote", response_model=PromoteMissResponse)
async def promote_misses(request: PromoteMissRequest, handler: HandlerDep) -> PromoteMissResponse:
    """Move logged misses to the Gone list."""
    return await handler.promote_misses(request)


@router.put("/admin/misses/limit", response_model=MissLimitResponse)
async def set_miss_limit(request: MissLimitRequest, handler: HandlerDep) -> MissLimitResponse:
    """
    Change how many misses are kept.

    Args:
        request: New limit; 0 disables miss logging.

    Returns:
        The new limit and how many entries were trimmed.
    """
    return await handler.set_miss_limit(request)


@router.post("/admin/classify", response_model=ClassifyResponse)
async def classify(request: ClassifyRequest, handler: HandlerDep) -> ClassifyResponse:
    """Classify a URL as a request that found no content would be."""
    return await handler.classify(request)


@router.post("/admin/content", response_model=ContentSavedResponse)
async def content_saved(request: ContentSavedRequest, handler: HandlerDep) -> ContentSavedResponse:
    """Notify that content was created or saved under a permalink."""
    return await handler.content_saved(request)


def create_app(store: EntryStore | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        store: Entry store to use. If None, connects to Redis on startup.
        app_settings: Engine configuration. If None, uses environment settings.

    Returns:
        The configured app, with the 404 → 410 hook installed
    """
    app = FastAPI(
        title="Gone Links API",
        description="HTTP 410 (Gone) responses for permanently removed URLs",
        version="0.1.0",
        lifespan=build_lifespan(store=store, settings=app_settings),
    )
    app.include_router(router)
    install_gone_hook(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gone_links.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
