"""Request classification result."""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a request that produced no content.

    Attributes:
        url: The normalized request URL that was evaluated
        outcome: Matched (answer 410) or Unmatched (answer 404)
        witness: Key of the Gone entry that matched, if any
    """

    url: str
    outcome: Outcome
    witness: str | None = None

    @property
    def is_gone(self) -> bool:
        return self.outcome is Outcome.MATCHED
