"""Parser for contest pages listing problems."""

from bs4 import BeautifulSoup
from loguru import logger

from .url_parser import URLParser


class ContestPageParser:
    """Extracts problem links from a contest's problem table."""

    ROW_SELECTOR = "#pageContent div.datatable table tr"

    def __init__(self, url_parser: URLParser | None = None):
        self.url_parser = url_parser or URLParser()

    def extract_problem_links(self, soup: BeautifulSoup) -> list[str]:
        """Return absolute problem URLs in statement order."""
        links = []
        for row in soup.select(self.ROW_SELECTOR):
            cell = row.find("td")
            if cell is None:
                continue

            anchor = cell.find("a", href=True)
            if anchor is None:
                continue

            href = anchor["href"]
            if isinstance(href, str) and "/problem/" in href:
                links.append(self.url_parser.resolve(href))

        logger.debug(f"Extracted {len(links)} problem link(s)")
        return links
