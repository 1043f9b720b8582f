"""Check whether this site would ever serve a URL."""

from urllib.parse import urlsplit


class SiteIdentity:
    """Host and path test against the site's home URL.

    With pretty permalinks disabled the site only answers its home path
    (plus a query string), so any deeper path is rejected.
    """

    def __init__(self, home_url: str, pretty_permalinks: bool) -> None:
        home = urlsplit(home_url)
        self._host = home.netloc.lower()
        self._path = home.path or "/"
        self._pretty_permalinks = pretty_permalinks

    def is_handled(self, url: str) -> bool:
        """Check if a fully qualified URL belongs to this site.

        Args:
            url: URL or wildcard pattern

        Returns:
            True if requests for the URL would reach this site
        """
        parts = urlsplit(url)
        if parts.netloc.lower() != self._host:
            return False
        if not parts.path.startswith(self._path):
            return False

        if not self._pretty_permalinks:
            remainder = parts.path[len(self._path):].removeprefix("/")
            if remainder and not remainder.startswith("?"):
                return False

        return True
