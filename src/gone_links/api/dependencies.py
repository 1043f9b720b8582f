"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Engine and handler stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from gone_links.config import Settings, configure_logging
from gone_links.handlers import GoneHandler
from gone_links.protocols import EntryStore
from gone_links.repositories import RedisEntryRepository
from gone_links.services import GoneEngine

logger = logging.getLogger(__name__)


def get_engine(request: Request) -> GoneEngine:
    """Dependency injection for GoneEngine from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The GoneEngine instance from app.state

    Raises:
        RuntimeError: If engine is not initialized
    """
    engine = getattr(request.app.state, "gone_engine", None)
    if engine is None:
        raise RuntimeError("GoneEngine not initialized. Check lifespan setup.")
    return engine


def get_handler(request: Request) -> GoneHandler:
    """Dependency injection for GoneHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The GoneHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "gone_handler", None)
    if handler is None:
        raise RuntimeError("GoneHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    store: EntryStore | None = None,
    settings: Settings | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan context manager for a FastAPI app.

    Args:
        store: Entry store to use. If None, connects to Redis on startup.
        settings: Engine configuration. If None, uses environment settings.

    Returns:
        Lifespan callable for ``FastAPI(lifespan=...)``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Repository (data access) - created explicitly unless injected
        2. Engine (business logic) - stored in app.state.gone_engine
        3. Handler (HTTP endpoints) - stored in app.state.gone_handler
        """
        configure_logging(settings.log_level if settings else None)

        repository = store if store is not None else RedisEntryRepository.create()
        engine = GoneEngine.create(store=repository, settings=settings)
        handler = GoneHandler(engine=engine)

        app.state.gone_engine = engine
        app.state.gone_handler = handler

        logger.info("Gone engine initialized (home %s)", engine.settings.home_url)
        logger.info("Miss log limit: %d", engine.max_miss_entries)
        if not engine.is_healthy():
            logger.warning("Entry store is not reachable; requests will fail until it is")

        yield

        # Cleanup - remove from app.state
        del app.state.gone_handler
        del app.state.gone_engine
        logger.info("Gone engine shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[GoneHandler, Depends(get_handler)]
EngineDep = Annotated[GoneEngine, Depends(get_engine)]
