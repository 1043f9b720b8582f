"""Redis implementation of EntryStore.

Layout under a configurable prefix:

- ``{prefix}:entry:{id}`` hash with key, matcher, category, sequence
- ``{prefix}:category:{category}`` sorted set of entry ids scored by sequence
- ``{prefix}:sequence`` counter handing out sequence numbers
- ``{prefix}:settings`` hash of persisted engine settings

Entry ids are SHA-256 digests of the key, so URL-length keys never become
Redis key names and one key can only ever map to one record.
"""

import hashlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import redis

from gone_links.config import get_redis_client, settings
from gone_links.entities import Category, Entry
from gone_links.errors import MatchEngineFault, StoreUnavailable
from gone_links.patterns import Matcher, compile_pattern

logger = logging.getLogger(__name__)

# KEYS[1] entry hash, KEYS[2] category set, KEYS[3] sequence counter;
# ARGV: key, matcher, category value, entry id
_INSERT_LUA = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return false
end
local sequence = redis.call('INCR', KEYS[3])
redis.call('HSET', KEYS[1], 'key', ARGV[1], 'matcher', ARGV[2],
    'category', ARGV[3], 'sequence', sequence)
redis.call('ZADD', KEYS[2], sequence, ARGV[4])
return sequence
"""

# KEYS[1] category set; ARGV: n, entry key prefix, category value
_DELETE_OLDEST_LUA = """
local ids = redis.call('ZRANGE', KEYS[1], 0, tonumber(ARGV[1]) - 1)
local deleted = 0
for _, id in ipairs(ids) do
    redis.call('ZREM', KEYS[1], id)
    local entry = ARGV[2] .. id
    if redis.call('HGET', entry, 'category') == ARGV[3] then
        deleted = deleted + redis.call('DEL', entry)
    end
end
return deleted
"""

# KEYS[1] entry hash; ARGV: new category, entry id, category set prefix
_SET_CATEGORY_LUA = """
local current = redis.call('HGET', KEYS[1], 'category')
if not current or current == ARGV[1] then
    return 0
end
local sequence = redis.call('HGET', KEYS[1], 'sequence')
redis.call('ZREM', ARGV[3] .. current, ARGV[2])
redis.call('ZADD', ARGV[3] .. ARGV[1], sequence, ARGV[2])
redis.call('HSET', KEYS[1], 'category', ARGV[1])
return 1
"""


class RedisEntryRepository:
    """Redis implementation using hashes and per-category sorted sets.

    This class satisfies the EntryStore protocol through structural
    typing - no explicit inheritance needed.

    Insert runs as one Lua script that refuses to overwrite an existing
    key. Delete and promotion are single transactions; trimming runs as
    one Lua script that re-checks each entry's category before deleting it,
    so a concurrent promotion can never lose a Gone entry.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis entry repository.

        Args:
            redis_client: Redis client instance (``decode_responses=True``).
                If None, creates default.
            key_prefix: Namespace for all keys. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.key_prefix
        self._insert_script = self._client.register_script(_INSERT_LUA)
        self._delete_oldest_script = self._client.register_script(_DELETE_OLDEST_LUA)
        self._set_category_script = self._client.register_script(_SET_CATEGORY_LUA)

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisEntryRepository":
        """Factory method to create RedisEntryRepository with defaults.

        Args:
            key_prefix: Key namespace. If None, uses settings.

        Returns:
            Configured RedisEntryRepository
        """
        return cls(key_prefix=key_prefix)

    @staticmethod
    def entry_id(key: str) -> str:
        """Stable id for an entry key."""
        return hashlib.sha256(key.encode("utf-8")).hexdigest()

    def _entry_key(self, entry_id: str) -> str:
        return f"{self._prefix}:entry:{entry_id}"

    def _category_key(self, category: Category) -> str:
        return f"{self._prefix}:category:{category.value}"

    @property
    def _settings_key(self) -> str:
        return f"{self._prefix}:settings"

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except redis.RedisError as e:
            raise StoreUnavailable(f"Redis {operation} failed: {e}") from e

    def count_by_category(self, category: Category) -> int:
        with self._guard("count"):
            return int(self._client.zcard(self._category_key(category)))

    def exists_by_key(self, key: str) -> bool:
        with self._guard("exists"):
            return bool(self._client.exists(self._entry_key(self.entry_id(key))))

    def insert(self, key: str, matcher: Matcher, category: Category) -> int | None:
        entry_id = self.entry_id(key)
        with self._guard("insert"):
            sequence = self._insert_script(
                keys=[
                    self._entry_key(entry_id),
                    self._category_key(category),
                    f"{self._prefix}:sequence",
                ],
                args=[key, matcher.to_json(), category.value, entry_id],
            )
        return None if sequence is None else int(sequence)

    def delete_by_key(self, key: str) -> int:
        entry_id = self.entry_id(key)
        with self._guard("delete"):
            pipe = self._client.pipeline(transaction=True)
            pipe.delete(self._entry_key(entry_id))
            for category in Category:
                pipe.zrem(self._category_key(category), entry_id)
            results = pipe.execute()
        return int(results[0])

    def delete_oldest(self, category: Category, n: int) -> int:
        if n <= 0:
            return 0
        with self._guard("trim"):
            deleted = self._delete_oldest_script(
                keys=[self._category_key(category)],
                args=[n, f"{self._prefix}:entry:", category.value],
            )
        return int(deleted)

    def list_by_category(self, category: Category, newest_first: bool = False) -> list[Entry]:
        with self._guard("list"):
            entry_ids = self._client.zrange(self._category_key(category), 0, -1, desc=newest_first)

            pipe = self._client.pipeline(transaction=False)
            for entry_id in entry_ids:
                pipe.hgetall(self._entry_key(entry_id))
            rows = pipe.execute() if entry_ids else []

        entries = []
        for row in rows:
            # Deleted between ZRANGE and HGETALL
            if not row:
                continue
            entries.append(self._to_entry(row))
        return entries

    def _to_entry(self, row: dict) -> Entry:
        key = row["key"]
        try:
            matcher = Matcher.from_json(row.get("matcher", ""))
        except MatchEngineFault as e:
            logger.warning("Stored matcher for %s is unreadable (%s); recompiling from key", key, e)
            matcher = compile_pattern(key)

        return Entry(
            key=key,
            matcher=matcher,
            category=Category(row["category"]),
            sequence=int(row["sequence"]),
        )

    def set_category(self, key: str, category: Category) -> bool:
        entry_id = self.entry_id(key)
        with self._guard("set category"):
            changed = self._set_category_script(
                keys=[self._entry_key(entry_id)],
                args=[category.value, entry_id, f"{self._prefix}:category:"],
            )
        return bool(changed)

    def get_setting(self, name: str) -> str | None:
        with self._guard("get setting"):
            return self._client.hget(self._settings_key, name)

    def set_setting(self, name: str, value: str) -> None:
        with self._guard("set setting"):
            self._client.hset(self._settings_key, name, value)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with stats
        """
        return {
            "backend": "redis",
            "key_prefix": self._prefix,
            "gone_entries": self.count_by_category(Category.GONE),
            "miss_entries": self.count_by_category(Category.MISS),
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
