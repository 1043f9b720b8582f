"""In-memory implementation of EntryStore.

Keeps entries in a dict guarded by a lock. Useful for tests, demos and
single-process tools; nothing survives a restart.
"""

import itertools
import threading

from gone_links.entities import Category, Entry
from gone_links.patterns import Matcher


class InMemoryEntryRepository:
    """Process-local entry store.

    This class satisfies the EntryStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._settings: dict[str, str] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def count_by_category(self, category: Category) -> int:
        with self._lock:
            return sum(1 for entry in self._entries.values() if entry.category is category)

    def exists_by_key(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def insert(self, key: str, matcher: Matcher, category: Category) -> int | None:
        with self._lock:
            if key in self._entries:
                return None
            sequence = next(self._sequence)
            self._entries[key] = Entry(key=key, matcher=matcher, category=category, sequence=sequence)
            return sequence

    def delete_by_key(self, key: str) -> int:
        with self._lock:
            return 1 if self._entries.pop(key, None) is not None else 0

    def delete_oldest(self, category: Category, n: int) -> int:
        if n <= 0:
            return 0
        with self._lock:
            oldest = sorted(
                (entry for entry in self._entries.values() if entry.category is category),
                key=lambda entry: entry.sequence,
            )[:n]
            for entry in oldest:
                del self._entries[entry.key]
            return len(oldest)

    def list_by_category(self, category: Category, newest_first: bool = False) -> list[Entry]:
        with self._lock:
            entries = [entry for entry in self._entries.values() if entry.category is category]
        entries.sort(key=lambda entry: entry.sequence, reverse=newest_first)
        return entries

    def set_category(self, key: str, category: Category) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.category is category:
                return False
            self._entries[key] = Entry(
                key=entry.key,
                matcher=entry.matcher,
                category=category,
                sequence=entry.sequence,
            )
            return True

    def get_setting(self, name: str) -> str | None:
        with self._lock:
            return self._settings.get(name)

    def set_setting(self, name: str, value: str) -> None:
        with self._lock:
            self._settings[name] = value

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        return {
            "backend": "memory",
            "gone_entries": self.count_by_category(Category.GONE),
            "miss_entries": self.count_by_category(Category.MISS),
        }
