"""Stored entry domain entity."""

from dataclasses import dataclass
from enum import Enum

from gone_links.patterns import Matcher, is_wildcard


class Category(str, Enum):
    """Which collection an entry belongs to."""

    GONE = "gone"  # curated, answered with 410
    MISS = "miss"  # logged 404, awaiting review


class AddResult(str, Enum):
    """Outcome of adding a Gone pattern."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class Entry:
    """Domain entity for a stored URL pattern.

    Attributes:
        key: The URL string exactly as supplied (may contain ``*``)
        matcher: Matcher compiled from ``key``
        category: Gone or Miss
        sequence: Store-assigned insertion order, increasing
    """

    key: str
    matcher: Matcher
    category: Category
    sequence: int

    @property
    def is_wildcard(self) -> bool:
        """Whether the key is a wildcard pattern."""
        return is_wildcard(self.key)
