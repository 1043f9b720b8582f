"""One-time import of links saved by older releases.

Older releases kept the Gone list in a single serialized option instead of
the entry store, in one of three shapes:

- version 0: a list of percent-encoded URLs
- version 1: a mapping of percent-encoded URL to its regex
- version 2: a mapping of decoded URL to its regex

Only the URLs are kept; matchers are always recompiled.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import unquote

from gone_links.entities import AddResult
from gone_links.services import GoneEngine

logger = logging.getLogger(__name__)

LEGACY_FORMAT_VERSIONS = (0, 1, 2)


def legacy_keys(data: Iterable[str] | Mapping[str, Any], format_version: int) -> list[str]:
    """Extract entry keys from legacy link data.

    Args:
        data: The legacy list or mapping
        format_version: Version the data was written by (0, 1 or 2)

    Returns:
        Decoded URL keys, in input order

    Raises:
        ValueError: If the version is unknown or the data has the wrong shape
    """
    if format_version not in LEGACY_FORMAT_VERSIONS:
        raise ValueError(f"Unknown legacy format version {format_version}")

    if format_version == 0:
        if isinstance(data, Mapping):
            raise ValueError("Version 0 data must be a list of links")
        return [unquote(link) for link in data]

    if not isinstance(data, Mapping):
        raise ValueError(f"Version {format_version} data must be a mapping of link to regex")
    if format_version == 1:
        return [unquote(link) for link in data]
    return list(data)


def import_legacy(
    engine: GoneEngine,
    data: Iterable[str] | Mapping[str, Any],
    format_version: int,
) -> Counter[AddResult]:
    """Add legacy links to the Gone set.

    Returns:
        Count of each AddResult
    """
    results: Counter[AddResult] = Counter()
    for key in legacy_keys(data, format_version):
        results[engine.add_gone(key)] += 1

    logger.info(
        "Imported legacy links: %d added, %d already present",
        results[AddResult.INSERTED],
        results[AddResult.ALREADY_EXISTS],
    )
    return results
