"""Entry storage protocol.

Defines the narrow interface the engine needs from the persistent store
holding Gone and Miss entries.

Implementations can include:
- Redis (default)
- In-process memory (tests, single-process tools)
- Any SQL database with a sequence column
"""

from typing import Protocol, runtime_checkable

from gone_links.entities import Category, Entry
from gone_links.patterns import Matcher


@runtime_checkable
class EntryStore(Protocol):
    """Protocol for entry storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Implementations raise ``StoreUnavailable``
    when the backend fails.

    Example:
        ```python
        from gone_links.protocols import EntryStore

        store: EntryStore = RedisEntryRepository.create()
        store: EntryStore = InMemoryEntryRepository()
        ```
    """

    def count_by_category(self, category: Category) -> int:
        """Count entries in one category.

        Args:
            category: The category to count

        Returns:
            Number of entries
        """
        ...

    def exists_by_key(self, key: str) -> bool:
        """Check whether any entry (any category) has this exact key.

        Args:
            key: The entry key

        Returns:
            True if present, False otherwise
        """
        ...

    def insert(self, key: str, matcher: Matcher, category: Category) -> int | None:
        """Insert a new entry unless the key is already present.

        The existence check and the write are one atomic step; an existing
        entry is never overwritten.

        Args:
            key: The entry key
            matcher: Matcher compiled from the key
            category: Category of the new entry

        Returns:
            The sequence number assigned to the entry, or None if an entry
            with this key already exists
        """
        ...

    def delete_by_key(self, key: str) -> int:
        """Delete entries with this exact key, whatever their category.

        Args:
            key: The entry key

        Returns:
            Number of entries deleted
        """
        ...

    def delete_oldest(self, category: Category, n: int) -> int:
        """Delete the ``n`` lowest-sequence entries of a category.

        Args:
            category: The category to trim
            n: How many entries to delete at most

        Returns:
            Number of entries deleted
        """
        ...

    def list_by_category(self, category: Category, newest_first: bool = False) -> list[Entry]:
        """List the entries of a category ordered by sequence.

        Args:
            category: The category to list
            newest_first: Descending sequence order when True

        Returns:
            The entries
        """
        ...

    def set_category(self, key: str, category: Category) -> bool:
        """Move an entry to another category, keeping its sequence.

        Args:
            key: The entry key
            category: The new category

        Returns:
            True if an entry changed category, False otherwise
        """
        ...

    def get_setting(self, name: str) -> str | None:
        """Read a persisted engine setting.

        Args:
            name: Setting name

        Returns:
            The stored value, or None if unset
        """
        ...

    def set_setting(self, name: str, value: str) -> None:
        """Persist an engine setting.

        Args:
            name: Setting name
            value: Value to store
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
