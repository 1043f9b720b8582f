"""Gone set service.

Owns the curated collection of "permanently removed" URL patterns.
"""

import logging

from gone_links.entities import AddResult, Category, Entry
from gone_links.patterns import compile_pattern
from gone_links.protocols import EntryStore

logger = logging.getLogger(__name__)


class GoneSetService:
    """Add, remove, list and promote Gone entries.

    Keys are stored exactly as given; callers pass fully qualified,
    percent-decoded URLs.
    """

    def __init__(self, store: EntryStore) -> None:
        self._store = store

    def add(self, key: str) -> AddResult:
        """Add a Gone pattern unless the key already exists in any category.

        Args:
            key: URL, optionally containing ``*`` wildcards

        Returns:
            AddResult.INSERTED, or AddResult.ALREADY_EXISTS with no write
        """
        matcher = compile_pattern(key)

        # Keys can exceed index limits, so uniqueness is checked explicitly
        if self._store.exists_by_key(key):
            logger.debug("Gone pattern already present: %s", key)
            return AddResult.ALREADY_EXISTS

        if self._store.insert(key, matcher, Category.GONE) is None:
            logger.debug("Gone pattern inserted concurrently: %s", key)
            return AddResult.ALREADY_EXISTS
        logger.info("Added Gone pattern %s", key)
        return AddResult.INSERTED

    def remove(self, key: str) -> int:
        """Delete the entry with this exact key, Gone or Miss.

        Returns:
            Number of entries deleted
        """
        deleted = self._store.delete_by_key(key)
        if deleted:
            logger.info("Removed %s", key)
        return deleted

    def list(self) -> list[Entry]:
        """All Gone entries, in no guaranteed order."""
        return self._store.list_by_category(Category.GONE)

    def promote(self, key: str) -> bool:
        """Turn a Miss entry into a Gone entry, keeping its sequence.

        Returns:
            True if a Miss entry was promoted, False if there was none
        """
        promoted = self._store.set_category(key, Category.GONE)
        if promoted:
            logger.info("Promoted %s to Gone", key)
        return promoted
