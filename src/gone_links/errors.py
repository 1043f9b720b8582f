"""Exception types shared across layers.

Duplicate keys are not an error: ``GoneSetService.add`` reports them through
``AddResult.ALREADY_EXISTS``.
"""


class GoneLinksError(Exception):
    """Base class for gone-links errors."""


class StoreUnavailable(GoneLinksError):
    """The entry store failed to complete an operation."""


class MatchEngineFault(GoneLinksError):
    """A matcher could not be decoded or evaluated."""
