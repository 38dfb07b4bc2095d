"""Parser for extracting problem metadata from problem pages."""

from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from domain.models import DIFFICULTY_NA, ProblemDetail


class ProblemPageParser:
    """Extracts title and difficulty from a problem page.

    Both rules tolerate missing elements: an absent difficulty marker yields
    "NA", an absent or malformed title yields empty code and name.
    """

    DIFFICULTY_SELECTOR = 'span[title="Difficulty"]'
    TITLE_SELECTOR = "div.problem-statement div.header div.title"

    def extract_detail(self, soup: BeautifulSoup, link: str) -> ProblemDetail:
        difficulty = self._extract_difficulty(soup) or DIFFICULTY_NA
        code, name = self._extract_title(soup)

        if not code:
            logger.warning(f"Problem title not found on {link}")

        return ProblemDetail(name=name, code=code, link=link, difficulty=difficulty)

    def _extract_difficulty(self, soup: BeautifulSoup) -> Optional[str]:
        """Extract the rating from a marker like "*1900"."""
        marker = soup.select_one(self.DIFFICULTY_SELECTOR)
        if marker is None:
            return None

        text = marker.get_text(strip=True)
        if "*" not in text:
            return None

        value = text.split("*", 1)[1].strip()
        return value or None

    def _extract_title(self, soup: BeautifulSoup) -> tuple[str, str]:
        """Split a title like "D2. Hard Problem" into ("D2", "Hard Problem")."""
        title = soup.select_one(self.TITLE_SELECTOR)
        if title is None:
            return "", ""

        text = title.get_text(strip=True)
        if "." not in text:
            return "", ""

        code, name = text.split(".", 1)
        return code.strip(), name.strip()
