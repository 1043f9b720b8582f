"""HTTP handlers for the administrative surface.

Handlers convert between DTOs (API contracts) and engine calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

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
    LinkItem,
    MissLimitRequest,
    MissLimitResponse,
    MissListResponse,
    PromoteMissRequest,
    PromoteMissResponse,
    RemoveGoneRequest,
    StatsResponse,
)
from gone_links.entities import AddResult, PublishedContent
from gone_links.errors import StoreUnavailable
from gone_links.services import GoneEngine


def _unavailable(action: str, error: StoreUnavailable) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Failed to {action}: {error}",
    )


class GoneHandler:
    """HTTP handlers for Gone list and miss log administration.

    This handler delegates business logic to GoneEngine
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Rejecting URLs this site does not serve
    - Mapping store failures to 503 responses

    Example:
        ```python
        from gone_links.handlers import GoneHandler

        handler = GoneHandler(engine=engine)

        @router.post("/admin/gone", response_model=AddGoneResponse)
        async def add_gone(request: AddGoneRequest):
            return await handler.add_gone(request)
        ```
    """

    def __init__(self, engine: GoneEngine) -> None:
        """Initialize the handler.

        Args:
            engine: The Gone engine for business logic (required).
        """
        self._engine = engine

    def _link_item(self, key: str, is_wildcard: bool) -> LinkItem:
        return LinkItem(key=key, is_wildcard=is_wildcard, handled=self._engine.is_handled_url(key))

    async def list_gone(self) -> GoneListResponse:
        """Handle GET /admin/gone requests."""
        try:
            entries = self._engine.list_gone()
        except StoreUnavailable as e:
            raise _unavailable("list Gone patterns", e) from e

        items = [self._link_item(entry.key, entry.is_wildcard) for entry in entries]
        return GoneListResponse(
            specific=[item for item in items if not item.is_wildcard],
            wildcards=[item for item in items if item.is_wildcard],
            total=len(items),
        )

    async def add_gone(self, request: AddGoneRequest) -> AddGoneResponse:
        """Handle POST /admin/gone requests.

        URLs this site would never serve are reported back in ``rejected``
        and not added.
        """
        response = AddGoneResponse(message="")
        try:
            for url in request.urls:
                url = url.strip()
                if not url:
                    continue
                if not self._engine.is_handled_url(url):
                    response.rejected.append(url)
                    continue
                if self._engine.add_gone(url) is AddResult.INSERTED:
                    response.added.append(url)
                else:
                    response.already_exists.append(url)
        except StoreUnavailable as e:
            raise _unavailable("add Gone patterns", e) from e

        response.message = (
            f"{len(response.added)} added, {len(response.already_exists)} already listed, "
            f"{len(response.rejected)} rejected"
        )
        return response

    async def remove_gone(self, request: RemoveGoneRequest) -> DeleteResponse:
        """Handle DELETE /admin/gone requests."""
        try:
            deleted = sum(self._engine.remove_gone(url) for url in request.urls)
        except StoreUnavailable as e:
            raise _unavailable("remove entries", e) from e

        return DeleteResponse(deleted_count=deleted, message=f"Deleted {deleted} entries")

    async def list_misses(self) -> MissListResponse:
        """Handle GET /admin/misses requests."""
        try:
            entries = self._engine.list_miss()
            max_entries = self._engine.max_miss_entries
        except StoreUnavailable as e:
            raise _unavailable("list logged misses", e) from e

        return MissListResponse(
            misses=[entry.key for entry in entries],
            total=len(entries),
            max_entries=max_entries,
        )

    async def promote_misses(self, request: PromoteMissRequest) -> PromoteMissResponse:
        """Handle POST /admin/misses/promote requests."""
        response = PromoteMissResponse()
        try:
            for url in request.urls:
                if self._engine.promote(url):
                    response.promoted.append(url)
                else:
                    response.not_found.append(url)
        except StoreUnavailable as e:
            raise _unavailable("promote logged misses", e) from e
        return response

    async def purge_misses(self) -> DeleteResponse:
        """Handle DELETE /admin/misses requests."""
        try:
            deleted = self._engine.purge_miss()
        except StoreUnavailable as e:
            raise _unavailable("purge logged misses", e) from e

        return DeleteResponse(deleted_count=deleted, message=f"Purged {deleted} logged misses")

    async def set_miss_limit(self, request: MissLimitRequest) -> MissLimitResponse:
        """Handle PUT /admin/misses/limit requests."""
        try:
            trimmed = self._engine.set_max_miss_entries(request.max_entries)
        except StoreUnavailable as e:
            raise _unavailable("update the miss log limit", e) from e

        return MissLimitResponse(max_entries=request.max_entries, trimmed=trimmed)

    async def classify(self, request: ClassifyRequest) -> ClassifyResponse:
        """Handle POST /admin/classify requests.

        Goes through the normal classification path, so an unmatched URL is
        logged as a miss.
        """
        try:
            result = self._engine.classify(request.url)
        except StoreUnavailable as e:
            raise _unavailable("classify URL", e) from e

        return ClassifyResponse(url=result.url, outcome=result.outcome.value, witness=result.witness)

    async def content_saved(self, request: ContentSavedRequest) -> ContentSavedResponse:
        """Handle POST /admin/content requests."""
        item = PublishedContent(
            permalink=request.permalink,
            status=request.status,
            kind=request.kind,
            feed_link=request.feed_link,
        )
        try:
            removed = self._engine.on_content_saved(item)
        except StoreUnavailable as e:
            raise _unavailable("reconcile content", e) from e

        return ContentSavedResponse(removed_count=removed)

    async def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests."""
        try:
            stats = self._engine.get_stats()
        except StoreUnavailable as e:
            raise _unavailable("get stats", e) from e

        return StatsResponse(
            backend=stats.get("backend", "unknown"),
            gone_entries=stats.get("gone_entries", 0),
            miss_entries=stats.get("miss_entries", 0),
            max_miss_entries=stats.get("max_miss_entries", 0),
            home_url=stats.get("home_url", ""),
            pretty_permalinks=stats.get("pretty_permalinks", True),
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._engine.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            store_healthy=is_healthy,
        )
