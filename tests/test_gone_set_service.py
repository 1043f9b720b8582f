"""
Tests for the Gone set.
"""

from gone_links import GoneEngine, InMemoryEntryRepository, Settings
from gone_links.entities import AddResult, Category
from gone_links.patterns import compile_pattern


def keys(entries):
    return [entry.key for entry in entries]


def test_add_inserts_once(engine, store):
    """Test that a second add is a no-op."""
    assert engine.add_gone("http://site/old/") is AddResult.INSERTED
    assert engine.add_gone("http://site/old/") is AddResult.ALREADY_EXISTS

    assert keys(engine.list_gone()) == ["http://site/old/"]
    assert store.inserts() == ["http://site/old/"]


def test_add_existing_miss_is_a_no_op(engine, store):
    """Test that adding a logged miss leaves it a miss."""
    engine.classify("http://site/missing/")

    assert engine.add_gone("http://site/missing/") is AddResult.ALREADY_EXISTS
    assert keys(engine.list_miss()) == ["http://site/missing/"]
    assert engine.list_gone() == []


def test_add_stores_key_verbatim(engine):
    """Test that keys are neither decoded nor case-folded."""
    engine.add_gone("http://site/Old%20Page/")

    assert keys(engine.list_gone()) == ["http://site/Old%20Page/"]


def test_add_compiles_matcher(engine):
    engine.add_gone("http://site/*/z/")

    [entry] = engine.list_gone()
    assert entry.is_wildcard
    assert entry.matcher.matches("http://site/a/z/")
    assert entry.category is Category.GONE


def test_remove_missing_key_writes_nothing(engine, store):
    """Test that removing an unknown key changes nothing."""
    engine.add_gone("http://site/old/")

    assert engine.remove_gone("http://site/other/") == 0
    assert keys(engine.list_gone()) == ["http://site/old/"]


def test_remove_deletes_any_category(engine):
    """Test that remove clears misses as well as Gone entries."""
    engine.add_gone("http://site/old/")
    engine.classify("http://site/missing/")

    assert engine.remove_gone("http://site/old/") == 1
    assert engine.remove_gone("http://site/missing/") == 1
    assert engine.list_gone() == []
    assert engine.list_miss() == []


def test_remove_is_exact(engine):
    """Test that remove does not treat the key as a pattern."""
    engine.add_gone("http://site/a/")
    engine.add_gone("http://site/*")

    assert engine.remove_gone("http://site/*") == 1
    assert keys(engine.list_gone()) == ["http://site/a/"]


def test_list_gone_is_sorted_by_key(engine):
    for key in ("http://site/c/", "http://site/a/", "http://site/b/"):
        engine.add_gone(key)

    assert keys(engine.list_gone()) == ["http://site/a/", "http://site/b/", "http://site/c/"]


def test_promote_keeps_sequence(engine, store):
    """Test that promotion changes the category and nothing else."""
    engine.classify("http://site/missing/")
    [miss] = engine.list_miss()

    assert engine.promote("http://site/missing/")

    [gone] = engine.list_gone()
    assert gone.key == miss.key
    assert gone.sequence == miss.sequence
    assert gone.matcher == miss.matcher
    assert engine.list_miss() == []


def test_promote_requires_a_miss(engine):
    engine.add_gone("http://site/old/")

    assert not engine.promote("http://site/old/")
    assert not engine.promote("http://site/never-seen/")
    assert keys(engine.list_gone()) == ["http://site/old/"]


class LateCheckStore(InMemoryEntryRepository):
    """Store whose existence check runs before another writer's insert."""

    def exists_by_key(self, key: str) -> bool:
        return False


def test_insert_never_overwrites(store):
    """Test that the store refuses a second insert for the same key."""
    assert store.insert("http://site/a/", compile_pattern("http://site/a/"), Category.GONE) == 1
    assert store.insert("http://site/a/", compile_pattern("http://site/a/"), Category.MISS) is None

    [entry] = store.list_by_category(Category.GONE)
    assert entry.sequence == 1
    assert store.count_by_category(Category.MISS) == 0


def test_add_after_concurrent_miss_is_already_exists():
    """Test that an add losing the race to a logged miss writes nothing."""
    store = LateCheckStore()
    engine = GoneEngine.create(store=store, settings=Settings(home_url="http://site/"))
    store.insert("http://site/x/", compile_pattern("http://site/x/"), Category.MISS)

    assert engine.add_gone("http://site/x/") is AddResult.ALREADY_EXISTS
    assert keys(engine.list_miss()) == ["http://site/x/"]
    assert engine.list_gone() == []
