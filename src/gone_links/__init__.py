"""Gone Links - HTTP 410 (Gone) responses for permanently removed URLs.

This package provides a layered architecture for classifying requests
that found no content:

Layers:
    - patterns: Wildcard URL pattern compiler
    - protocols: Interface contracts (EntryStore)
    - repositories: Data access implementations (Redis, in-memory)
    - services: Business logic (Gone set, miss log, classifier, reconciliation)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from gone_links.repositories import RedisEntryRepository
    from gone_links.services import GoneEngine

    engine = GoneEngine.create(store=RedisEntryRepository.create())
    engine.add_gone("http://example.com/*/old-section/")
    engine.classify("http://example.com/news/old-section/").is_gone  # True
    ```

For HTTP API:
    ```python
    from gone_links.api.app import app
    ```
"""

from gone_links.config import Settings, get_redis_client, settings
from gone_links.entities import AddResult, Category, Classification, Entry, Outcome, PublishedContent
from gone_links.errors import GoneLinksError, MatchEngineFault, StoreUnavailable
from gone_links.handlers import GoneHandler
from gone_links.patterns import Matcher, compile_pattern
from gone_links.protocols import EntryStore
from gone_links.repositories import InMemoryEntryRepository, RedisEntryRepository
from gone_links.services import GoneEngine

__all__ = [
    # Configuration
    "Settings",
    "settings",
    "get_redis_client",
    # Pattern compiler
    "Matcher",
    "compile_pattern",
    # Protocols (interfaces)
    "EntryStore",
    # Services (business logic)
    "GoneEngine",
    # Handlers (HTTP)
    "GoneHandler",
    # Repositories (data access)
    "RedisEntryRepository",
    "InMemoryEntryRepository",
    # Entities (domain models)
    "AddResult",
    "Category",
    "Classification",
    "Entry",
    "Outcome",
    "PublishedContent",
    # Errors
    "GoneLinksError",
    "MatchEngineFault",
    "StoreUnavailable",
]
