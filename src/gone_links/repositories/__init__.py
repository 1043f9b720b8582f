"""Repository layer for data access.

This layer abstracts the persistent store behind the EntryStore protocol.
This enables:
- Easy swapping of implementations (Redis → SQL, Redis → memory, etc.)
- Unit testing with the in-memory implementation
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from gone_links.protocols import EntryStore

from .memory_repository import InMemoryEntryRepository
from .redis_repository import RedisEntryRepository

__all__ = [
    "EntryStore",
    "InMemoryEntryRepository",
    "RedisEntryRepository",
]
