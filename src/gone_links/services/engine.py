"""Gone engine: one object wiring the services around a store.

The engine is built explicitly from a store and settings; nothing is looked
up globally, so each process (or each test) owns its own instance.
"""

import logging

from gone_links.config import Settings, settings as default_settings
from gone_links.entities import AddResult, Classification, Entry, PublishedContent
from gone_links.protocols import EntryStore
from gone_links.services.classifier import RequestClassifier, normalize_request_url
from gone_links.services.gone_set_service import GoneSetService
from gone_links.services.miss_log_service import MissLogService
from gone_links.services.reconciliation_service import ReconciliationService
from gone_links.services.site_identity import SiteIdentity

logger = logging.getLogger(__name__)


class GoneEngine:
    """Request classification plus the administrative surface.

    Example:
        ```python
        from gone_links.repositories import RedisEntryRepository
        from gone_links.services import GoneEngine

        engine = GoneEngine.create(store=RedisEntryRepository.create())
        engine.add_gone("http://example.com/old-post/")

        result = engine.classify("http://example.com/old-post/")
        result.is_gone  # True
        ```
    """

    def __init__(self, store: EntryStore, settings: Settings | None = None) -> None:
        """Initialize the engine.

        Args:
            store: Entry storage backend (required).
            settings: Configuration. Defaults to the environment settings.
        """
        self._store = store
        self._settings = settings or default_settings

        self._gone_set = GoneSetService(store)
        self._miss_log = MissLogService(store, default_max_entries=self._settings.max_miss_entries)
        self._classifier = RequestClassifier(self._gone_set, self._miss_log)
        self._reconciler = ReconciliationService(
            self._gone_set,
            pretty_permalinks=self._settings.pretty_permalinks,
        )
        self._site = SiteIdentity(self._settings.home_url, self._settings.pretty_permalinks)

    @classmethod
    def create(cls, store: EntryStore, settings: Settings | None = None) -> "GoneEngine":
        """Factory method to create GoneEngine with default settings.

        Args:
            store: Entry storage backend (required).
            settings: Configuration. If None, uses environment settings.

        Returns:
            Configured GoneEngine instance
        """
        return cls(store=store, settings=settings)

    # Request pipeline

    def classify(self, url: str) -> Classification:
        """Classify a normalized URL that produced no content."""
        return self._classifier.classify(url)

    def classify_request(self, scheme: str, host: str, request_uri: str) -> Classification:
        """Normalize request parts, then classify."""
        return self.classify(normalize_request_url(scheme, host, request_uri))

    def on_content_saved(self, item: PublishedContent) -> int:
        """Clear Gone entries shadowing newly published content."""
        return self._reconciler.on_content_saved(item)

    # Administrative surface

    def add_gone(self, key: str) -> AddResult:
        return self._gone_set.add(key)

    def remove_gone(self, key: str) -> int:
        return self._gone_set.remove(key)

    def list_gone(self) -> list[Entry]:
        """Gone entries sorted by key for stable display."""
        return sorted(self._gone_set.list(), key=lambda entry: entry.key)

    def list_miss(self) -> list[Entry]:
        """Miss entries, newest first."""
        return self._miss_log.list()

    def promote(self, key: str) -> bool:
        return self._gone_set.promote(key)

    def purge_miss(self) -> int:
        return self._miss_log.purge_all()

    def set_max_miss_entries(self, max_entries: int) -> int:
        """Change the miss log limit; returns the number of entries trimmed."""
        trimmed = self._miss_log.set_max_entries(max_entries)
        logger.info("Miss log limit set to %d (%d trimmed)", max_entries, trimmed)
        return trimmed

    @property
    def max_miss_entries(self) -> int:
        return self._miss_log.max_entries

    def is_handled_url(self, url: str) -> bool:
        """Whether this site would serve ``url`` at all."""
        return self._site.is_handled(url)

    def get_stats(self) -> dict:
        """Get engine statistics.

        Returns:
            Dictionary with store statistics and the current limit
        """
        stats = self._store.get_stats()
        stats["max_miss_entries"] = self.max_miss_entries
        stats["home_url"] = self._settings.home_url
        stats["pretty_permalinks"] = self._settings.pretty_permalinks
        return stats

    def is_healthy(self) -> bool:
        return self._store.health_check()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def store(self) -> EntryStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def gone_set(self) -> GoneSetService:
        return self._gone_set

    @property
    def miss_log(self) -> MissLogService:
        return self._miss_log
