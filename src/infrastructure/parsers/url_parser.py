"""URL building and resolution for the contest site."""

from urllib.parse import urljoin, urlparse

from loguru import logger

from infrastructure.settings import DEFAULT_BASE_URL


class URLParser:
    """Builds listing URLs and resolves relative links against the site origin."""

    LISTING_PATH = "/contests/page/{page}"

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build_listing_url(self, page: int) -> str:
        """
        Build contest listing URL for a 1-based page index.
        """
        if page < 1:
            raise ValueError(f"Listing page index must be >= 1, got {page}")

        url = self.base_url + self.LISTING_PATH.format(page=page)
        logger.debug(f"Built listing URL: {url}")
        return url

    def resolve(self, href: str) -> str:
        """Resolve a relative link into an absolute URL on the site."""
        return urljoin(self.base_url + "/", href.strip())

    @staticmethod
    def extract_problem_code(link: str) -> str:
        """
        Return the problem short code encoded in the last path segment.

        e.g. https://codeforces.com/contest/1234/problem/D2 -> "D2"
        """
        path = urlparse(link).path if "://" in link else link
        return path.rstrip("/").split("/")[-1].strip()
