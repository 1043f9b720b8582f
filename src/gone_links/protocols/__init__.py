"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → SQL, Redis → memory, etc.)
- Unit testing with in-memory implementations
- Clear separation of concerns

Usage:
    ```python
    from gone_links.protocols import EntryStore

    store: EntryStore = RedisEntryRepository.create()  # works
    store: EntryStore = InMemoryEntryRepository()      # also works
    ```
"""

from .entry_store import EntryStore

__all__ = [
    "EntryStore",
]
