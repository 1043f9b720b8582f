"""Published content notification entity."""

from dataclasses import dataclass

SKIPPED_STATUSES = frozenset({"draft"})
SKIPPED_KINDS = frozenset({"revision"})


@dataclass(frozen=True)
class PublishedContent:
    """A content item that was created or saved.

    Attributes:
        permalink: Primary URL of the item (may be percent-encoded)
        status: Publication status, e.g. "publish" or "draft"
        kind: Item type, e.g. "post", "page" or "revision"
        feed_link: Comment feed URL of the item, if it has one
    """

    permalink: str
    status: str = "publish"
    kind: str = "post"
    feed_link: str | None = None

    @property
    def is_live(self) -> bool:
        """Whether the item now resolves on the site."""
        return self.status not in SKIPPED_STATUSES and self.kind not in SKIPPED_KINDS
