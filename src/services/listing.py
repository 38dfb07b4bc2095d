"""Service for reading the paginated contest listing."""

from typing import Optional

from loguru import logger

from domain.models import ContestSummary
from infrastructure.parsers import ContestListParserProtocol, PageFetcherProtocol


class ContestListingService:
    """Reads contest listing pages, newest contests first."""

    def __init__(
        self,
        *,
        fetcher: PageFetcherProtocol,
        contest_list_parser: ContestListParserProtocol,
        max_pages: Optional[int] = None,
    ):
        """Initialize service with dependencies."""
        self.fetcher = fetcher
        self.contest_list_parser = contest_list_parser
        self.max_pages = max_pages

    def page_allowed(self, page: int) -> bool:
        return self.max_pages is None or page <= self.max_pages

    async def list_contests(self, page: int) -> list[ContestSummary]:
        """Fetch one listing page and extract its contests."""
        soup = await self.fetcher.fetch(page)
        return self.contest_list_parser.extract_contests(soup)

    async def get_latest_contests(self, limit: int) -> list[ContestSummary]:
        """
        Return the newest `limit` contests from the listing, across pages.

        Stops early if the listing runs out.
        """
        contests: list[ContestSummary] = []
        seen: set[str] = set()
        page = 1

        while len(contests) < limit and self.page_allowed(page):
            page_contests = [c for c in await self.list_contests(page) if c.link not in seen]
            if not page_contests:
                break

            for contest in page_contests[: limit - len(contests)]:
                seen.add(contest.link)
                contests.append(contest)
            page += 1

        logger.info(f"Collected {len(contests)} latest contest(s)")
        return contests
