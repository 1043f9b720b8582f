"""URL pattern compiler.

A raw pattern is a URL that may contain ``*`` wildcards. It compiles into a
``Matcher``: literal segments interleaved with wildcard markers, matched
against the whole candidate (anchored at both ends) ignoring case.

Matching scans the candidate left to right with ``str.find``; there is no
regex engine involved, so a pattern cannot trigger backtracking blow-ups and
characters like ``.``, ``?`` or ``(`` only ever match themselves.

Example:
    ```python
    from gone_links.patterns import compile_pattern

    matcher = compile_pattern("http://example.com/*/music/")
    matcher.matches("HTTP://example.com/rock/music/")  # True
    matcher.matches("http://example.com/music/")       # False
    ```
"""

import json
import re
from dataclasses import dataclass
from functools import cached_property

from gone_links.errors import MatchEngineFault

WILDCARD = "*"

# Wildcard marker inside Matcher.tokens (null in the JSON form)
ANY = None

_WILDCARD_SPLIT = re.compile(r"(\*)")


@dataclass(frozen=True)
class Matcher:
    """Compiled, anchored, case-insensitive URL matcher.

    Attributes:
        tokens: Literal strings and ``ANY`` markers, in pattern order.
            Empty literals never appear and ``ANY`` markers never repeat.
    """

    tokens: tuple[str | None, ...]

    @cached_property
    def _parts(self) -> tuple[str, ...]:
        # Literal runs between wildcards, casefolded; len == wildcards + 1
        parts = []
        current = ""
        for token in self.tokens:
            if token is ANY:
                parts.append(current)
                current = ""
            else:
                current += token.casefold()
        parts.append(current)
        return tuple(parts)

    def matches(self, candidate: str) -> bool:
        """Check whether the whole candidate string matches.

        Args:
            candidate: Normalized URL to test

        Returns:
            True if the candidate matches, False otherwise

        Raises:
            MatchEngineFault: If the tokens are malformed
        """
        try:
            return self._scan(self._parts, candidate.casefold())
        except (TypeError, AttributeError) as e:
            raise MatchEngineFault(f"Malformed matcher {self.tokens!r}: {e}") from e

    @staticmethod
    def _scan(parts: tuple[str, ...], text: str) -> bool:
        if len(parts) == 1:
            return text == parts[0]

        prefix, suffix = parts[0], parts[-1]
        if len(text) < len(prefix) + len(suffix):
            return False
        if not (text.startswith(prefix) and text.endswith(suffix)):
            return False

        # Leftmost placement of each middle literal is always safe for '*'
        pos = len(prefix)
        end = len(text) - len(suffix)
        for literal in parts[1:-1]:
            if not literal:
                continue
            found = text.find(literal, pos, end)
            if found < 0:
                return False
            pos = found + len(literal)
        return True

    @property
    def has_wildcard(self) -> bool:
        """Whether the matcher contains at least one wildcard."""
        return ANY in self.tokens

    def to_json(self) -> str:
        """Serialize for storage next to the entry key."""
        return json.dumps(list(self.tokens), ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str) -> "Matcher":
        """Rebuild a matcher from its stored form.

        Args:
            data: JSON produced by ``to_json``

        Returns:
            The decoded Matcher

        Raises:
            MatchEngineFault: If the data is not a JSON array
        """
        try:
            tokens = json.loads(data)
        except (TypeError, ValueError) as e:
            raise MatchEngineFault(f"Undecodable matcher data: {e}") from e
        if not isinstance(tokens, list):
            raise MatchEngineFault(f"Matcher data must be a JSON array, got {type(tokens).__name__}")
        return cls(tuple(tokens))

    def __str__(self) -> str:
        return "".join(WILDCARD if token is ANY else str(token) for token in self.tokens)


def compile_pattern(raw: str) -> Matcher:
    """Compile a raw URL pattern into a Matcher.

    Never fails: the empty string matches only the empty string, ``*`` matches
    everything and runs of ``*`` behave like a single one.

    Args:
        raw: URL string, optionally containing ``*`` wildcards

    Returns:
        The compiled Matcher
    """
    tokens: list[str | None] = []
    for piece in _WILDCARD_SPLIT.split(raw):
        if not piece:
            continue
        if piece == WILDCARD:
            if tokens and tokens[-1] is ANY:
                continue
            tokens.append(ANY)
        else:
            tokens.append(piece)
    return Matcher(tuple(tokens))


def is_wildcard(key: str) -> bool:
    """Check if a raw pattern contains a wildcard."""
    return WILDCARD in key
