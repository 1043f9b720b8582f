"""Reconciliation of the Gone set with newly published content."""

from urllib.parse import unquote

from gone_links.entities import PublishedContent
from gone_links.patterns import WILDCARD
from gone_links.services.gone_set_service import GoneSetService


class ReconciliationService:
    """Remove Gone entries for URLs that resolve to content again."""

    def __init__(self, gone_set: GoneSetService, pretty_permalinks: bool) -> None:
        self._gone_set = gone_set
        self._pretty_permalinks = pretty_permalinks

    def urls_for(self, item: PublishedContent) -> list[str]:
        """Keys to clear when ``item`` goes live."""
        permalink = unquote(item.permalink)
        urls = [permalink]
        if item.feed_link:
            urls.append(item.feed_link)
        # Multi-segment paths can live under the permalink
        if self._pretty_permalinks:
            urls.append(permalink + WILDCARD)
        return urls

    def on_content_saved(self, item: PublishedContent) -> int:
        """Handle a content create/save notification.

        Drafts and revisions are ignored.

        Returns:
            Number of Gone entries removed
        """
        if not item.is_live:
            return 0
        return sum(self._gone_set.remove(url) for url in self.urls_for(item))
