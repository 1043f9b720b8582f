"""Miss log service.

Keeps a bounded log of recent requests that found no content and matched no
Gone pattern, for an administrator to review and promote.
"""

import logging

from gone_links.config import settings
from gone_links.entities import Category, Entry
from gone_links.patterns import compile_pattern
from gone_links.protocols import EntryStore

logger = logging.getLogger(__name__)

MAX_ENTRIES_SETTING = "max_miss_entries"


class MissLogService:
    """Record, trim, list and purge Miss entries.

    The limit is persisted in the store so every process sharing the store
    trims to the same bound. A limit of 0 disables logging.
    """

    def __init__(self, store: EntryStore, default_max_entries: int | None = None) -> None:
        """Initialize the miss log.

        Args:
            store: Entry storage backend (required).
            default_max_entries: Limit used until one is set. Defaults to settings.
        """
        self._store = store
        if default_max_entries is None:
            default_max_entries = settings.max_miss_entries
        self._default_max_entries = default_max_entries

    @property
    def max_entries(self) -> int:
        """Current maximum number of Miss entries."""
        stored = self._store.get_setting(MAX_ENTRIES_SETTING)
        if stored is None:
            return self._default_max_entries
        try:
            return int(stored)
        except ValueError:
            logger.warning("Ignoring invalid stored %s=%r", MAX_ENTRIES_SETTING, stored)
            return self._default_max_entries

    def set_max_entries(self, max_entries: int) -> int:
        """Change the limit and trim to it right away.

        Args:
            max_entries: New limit, 0 disables logging

        Returns:
            Number of entries trimmed

        Raises:
            ValueError: If max_entries is negative
        """
        if max_entries < 0:
            raise ValueError("Maximum number of logged misses must be zero or positive")
        self._store.set_setting(MAX_ENTRIES_SETTING, str(max_entries))
        return self._trim_to(max_entries)

    def record_miss(self, url: str) -> bool:
        """Log a URL that produced no content.

        Args:
            url: Normalized request URL

        Returns:
            True if a new Miss entry was created
        """
        limit = self.max_entries
        if limit == 0:
            return False

        if self._store.exists_by_key(url):
            return False

        if self._store.insert(url, compile_pattern(url), Category.MISS) is None:
            return False
        logger.debug("Logged miss %s", url)
        self._trim_to(limit)
        return True

    def trim(self) -> int:
        """Delete the oldest Miss entries above the current limit.

        Returns:
            Number of entries deleted
        """
        return self._trim_to(self.max_entries)

    def _trim_to(self, limit: int) -> int:
        surplus = self._store.count_by_category(Category.MISS) - limit
        if surplus <= 0:
            return 0
        deleted = self._store.delete_oldest(Category.MISS, surplus)
        logger.debug("Trimmed %d logged misses (limit %d)", deleted, limit)
        return deleted

    def list(self) -> list[Entry]:
        """Miss entries, newest first."""
        return self._store.list_by_category(Category.MISS, newest_first=True)

    def purge_all(self) -> int:
        """Delete every Miss entry.

        Returns:
            Number of entries deleted
        """
        total = self._store.count_by_category(Category.MISS)
        deleted = self._store.delete_oldest(Category.MISS, total)
        logger.info("Purged %d logged misses", deleted)
        return deleted
