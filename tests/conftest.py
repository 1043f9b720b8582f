"""
Shared fixtures for the gone-links tests.
"""

import pytest

from gone_links import GoneEngine, InMemoryEntryRepository, Settings, StoreUnavailable
from gone_links.entities import Category
from gone_links.patterns import Matcher


class RecordingStore(InMemoryEntryRepository):
    """In-memory store that records every write."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[tuple[str, str]] = []

    def insert(self, key: str, matcher: Matcher, category: Category) -> int | None:
        self.writes.append(("insert", key))
        return super().insert(key, matcher, category)

    def delete_by_key(self, key: str) -> int:
        self.writes.append(("delete", key))
        return super().delete_by_key(key)

    def delete_oldest(self, category: Category, n: int) -> int:
        self.writes.append(("delete_oldest", category.value))
        return super().delete_oldest(category, n)

    def set_category(self, key: str, category: Category) -> bool:
        self.writes.append(("set_category", key))
        return super().set_category(key, category)

    def inserts(self) -> list[str]:
        return [key for op, key in self.writes if op == "insert"]


class UnavailableStore(InMemoryEntryRepository):
    """Store whose backend is down for every data operation."""

    def _fail(self, *args, **kwargs):
        raise StoreUnavailable("connection refused")

    count_by_category = _fail
    exists_by_key = _fail
    insert = _fail
    delete_by_key = _fail
    delete_oldest = _fail
    list_by_category = _fail
    set_category = _fail

    def health_check(self) -> bool:
        return False


@pytest.fixture
def store():
    """Create a recording in-memory store."""
    return RecordingStore()


@pytest.fixture
def site_settings():
    """Settings for a site at http://site/ with pretty permalinks."""
    return Settings(home_url="http://site/", max_miss_entries=50, pretty_permalinks=True)


@pytest.fixture
def engine(store, site_settings):
    """Create an engine over the recording store."""
    return GoneEngine.create(store=store, settings=site_settings)


@pytest.fixture
def unavailable_store():
    """Create a store whose backend is unreachable."""
    return UnavailableStore()
