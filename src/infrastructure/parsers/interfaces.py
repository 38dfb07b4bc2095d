"""Protocol interfaces for crawler collaborators."""

from typing import Protocol

from bs4 import BeautifulSoup

from domain.models import ContestSummary, MatchedRecord, ProblemDetail


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...


class PageFetcherProtocol(Protocol):
    """Protocol for fetching parsed documents."""

    async def fetch(self, locator: int | str) -> BeautifulSoup:
        """Fetch listing page by index or any page by absolute URL."""
        ...


class ContestListParserProtocol(Protocol):
    """Protocol for extracting contests from a listing page."""

    def extract_contests(self, soup: BeautifulSoup) -> list[ContestSummary]:
        """Extract contest rows in page order."""
        ...


class ContestPageParserProtocol(Protocol):
    """Protocol for extracting problem links from a contest page."""

    def extract_problem_links(self, soup: BeautifulSoup) -> list[str]:
        """Extract absolute problem URLs in page order."""
        ...


class ProblemPageParserProtocol(Protocol):
    """Protocol for parsing problem pages."""

    def extract_detail(self, soup: BeautifulSoup, link: str) -> ProblemDetail:
        """Extract name, code and difficulty."""
        ...


class RecordSinkProtocol(Protocol):
    """Protocol for append-only record output."""

    async def write(self, record: MatchedRecord) -> None:
        """Persist one record."""
        ...
