"""Request classifier.

Decides whether a request that found no content should be answered as Gone
(410) or Not Found (404). Only call it once the request pipeline has
established that there is nothing to serve.
"""

import logging
from urllib.parse import unquote

from gone_links.entities import Classification, Outcome
from gone_links.errors import MatchEngineFault
from gone_links.services.gone_set_service import GoneSetService
from gone_links.services.miss_log_service import MissLogService

logger = logging.getLogger(__name__)


def normalize_request_url(scheme: str, host: str, request_uri: str) -> str:
    """Build the canonical URL used as the matching key.

    Args:
        scheme: "http" or "https"
        host: Host header value, including any port
        request_uri: Raw path plus query string

    Returns:
        Percent-decoded ``scheme://host/path?query``
    """
    return unquote(f"{scheme}://{host}{request_uri}")


class RequestClassifier:
    """Match a normalized URL against the Gone set.

    The first Gone entry whose matcher accepts the URL wins; when patterns
    overlap, which one is reported is unspecified. A match performs no writes.
    A non-match records the URL in the miss log.
    """

    def __init__(self, gone_set: GoneSetService, miss_log: MissLogService) -> None:
        self._gone_set = gone_set
        self._miss_log = miss_log

    def classify(self, url: str) -> Classification:
        """Classify a normalized request URL.

        Args:
            url: Output of ``normalize_request_url``

        Returns:
            Classification with the matching key as witness, or Unmatched
        """
        for entry in self._gone_set.list():
            try:
                hit = entry.matcher.matches(url)
            except MatchEngineFault as e:
                logger.warning("Skipping Gone pattern %s: %s", entry.key, e)
                continue

            if hit:
                logger.info("Gone: %s (matched %s)", url, entry.key)
                return Classification(url=url, outcome=Outcome.MATCHED, witness=entry.key)

        self._miss_log.record_miss(url)
        return Classification(url=url, outcome=Outcome.UNMATCHED)
