"""Fetches remote pages and parses them into queryable documents."""

from bs4 import BeautifulSoup
from loguru import logger

from domain.exceptions import FetchError

from .parsers.interfaces import HTTPClientProtocol
from .parsers.url_parser import URLParser


class PageFetcher:
    """Resolves a listing page index or absolute URL and returns the parsed document."""

    def __init__(self, http_client: HTTPClientProtocol, url_parser: URLParser | None = None):
        """
        Initialize fetcher.

        Args:
            http_client: Async HTTP client instance
            url_parser: URL builder for the crawled site
        """
        self.http_client = http_client
        self.url_parser = url_parser or URLParser()

    async def fetch(self, locator: int | str) -> BeautifulSoup:
        """
        Fetch a listing page by index, or any page by absolute URL.

        Raises:
            FetchError: On network failure, bad status or unparsable markup
        """
        if isinstance(locator, int):
            url = self.url_parser.build_listing_url(locator)
        else:
            url = locator

        html = await self.http_client.get_text(url)
        if not html or not html.strip():
            raise FetchError(url, "empty response body")

        try:
            soup = BeautifulSoup(html, "lxml")
        except Exception as e:
            logger.error(f"Failed to parse markup from {url}: {e}")
            raise FetchError(url, e) from e

        if soup.find() is None:
            raise FetchError(url, "no markup elements in response")

        logger.debug(f"Fetched and parsed {url}")
        return soup
