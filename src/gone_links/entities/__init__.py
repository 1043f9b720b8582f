"""Domain entities for internal representation.

These are pure dataclasses (frozen) and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .classification import Classification, Outcome
from .content import PublishedContent
from .entry import AddResult, Category, Entry

__all__ = [
    "AddResult",
    "Category",
    "Classification",
    "Entry",
    "Outcome",
    "PublishedContent",
]
