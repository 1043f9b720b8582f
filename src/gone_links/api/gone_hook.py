"""Not-Found hook that turns known removed URLs into 410 responses.

FastAPI raises a 404 ``HTTPException`` both for unknown routes and for
routes that found nothing to serve. The hook classifies those requests: a
Gone match is answered with 410 and a plain message, anything else keeps
the normal 404 response and is logged as a miss.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gone_links.api.dependencies import get_engine
from gone_links.errors import StoreUnavailable

logger = logging.getLogger(__name__)


def request_uri(request: Request) -> str:
    """Raw path plus query string, still percent-encoded.

    Raw bytes are read as UTF-8, the same encoding percent escapes are
    decoded with, so unescaped and escaped forms of a URL agree.
    """
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("utf-8", "replace") if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("utf-8", "replace")
    return f"{path}?{query}" if query else path


async def gone_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Exception handler for Starlette HTTP exceptions."""
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)

    engine = get_engine(request)
    host = request.headers.get("host") or request.url.netloc
    try:
        result = engine.classify_request(request.url.scheme, host, request_uri(request))
    except StoreUnavailable:
        logger.exception("Could not classify %s; answering 404", request.url)
        return await http_exception_handler(request, exc)

    if not result.is_gone:
        return await http_exception_handler(request, exc)

    return PlainTextResponse(
        engine.settings.gone_message,
        status_code=status.HTTP_410_GONE,
        headers={"Cache-Control": "no-store"},
    )


def install_gone_hook(app: FastAPI) -> None:
    """Register the 404 → 410 hook on an app whose lifespan sets up the engine."""
    app.add_exception_handler(StarletteHTTPException, gone_exception_handler)
