"""Parser for the paginated contest listing."""

from typing import Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from loguru import logger

from domain.models import ContestSummary

from .url_parser import URLParser


class ContestListParser:
    """Extracts contest name/link pairs from a contest listing page."""

    ROW_SELECTOR = "div.contests-table div.datatable table tr"

    def __init__(self, url_parser: URLParser | None = None):
        self.url_parser = url_parser or URLParser()

    def extract_contests(self, soup: BeautifulSoup) -> list[ContestSummary]:
        """
        Extract contests in page order (newest first on the live site).

        Rows that do not look like a contest row are skipped.
        """
        contests = []
        for row in soup.select(self.ROW_SELECTOR):
            contest = self._parse_row(row)
            if contest is not None:
                contests.append(contest)

        logger.debug(f"Extracted {len(contests)} contest(s) from listing page")
        return contests

    def _parse_row(self, row: Tag) -> Optional[ContestSummary]:
        """Parse a single table row, or return None if it has the wrong shape."""
        cell = row.find("td")
        if cell is None:
            return None

        name = self._extract_name(cell)
        anchor = cell.find("a", href=True)
        if not name or anchor is None:
            return None

        href = anchor["href"]
        if not isinstance(href, str) or not href.strip():
            return None

        return ContestSummary(name=name, link=self.url_parser.resolve(href))

    @staticmethod
    def _extract_name(cell: Tag) -> str:
        # The contest title is the cell's leading text node, before the links
        for child in cell.children:
            if isinstance(child, NavigableString):
                text = child.strip()
                if text:
                    return text
            elif isinstance(child, Tag) and child.name != "br":
                break
        return ""
