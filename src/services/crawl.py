"""Service for crawling contests and collecting matching problems."""

from typing import Optional

from loguru import logger

from domain.exceptions import ExtractionGap, FetchError
from domain.models import ContestSummary, CrawlFilters, CrawlState, MatchedRecord
from infrastructure.parsers import (
    ContestPageParserProtocol,
    PageFetcherProtocol,
    ProblemPageParserProtocol,
    RecordSinkProtocol,
    URLParser,
)
from services.listing import ContestListingService


class CrawlService:
    """Walks the contest listing page by page and streams matching problems to a sink.

    Filters run before the fetch they guard: the contest-name pattern decides
    whether a contest page is fetched, the problem-code set decides whether a
    problem page is fetched. All fetches are awaited one at a time.
    """

    def __init__(
        self,
        *,
        listing: ContestListingService,
        fetcher: PageFetcherProtocol,
        filters: CrawlFilters,
        sink: RecordSinkProtocol,
        contest_page_parser: ContestPageParserProtocol,
        problem_parser: ProblemPageParserProtocol,
    ):
        """Initialize service with dependencies."""
        self.listing = listing
        self.fetcher = fetcher
        self.filters = filters
        self.sink = sink
        self.contest_page_parser = contest_page_parser
        self.problem_parser = problem_parser

    async def crawl(self, limit: int) -> CrawlState:
        """
        Collect up to `limit` matching problems.

        Returns:
            Final crawl state (DONE)

        Raises:
            FetchError: If any page cannot be fetched; state is FAILED
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        state = CrawlState()
        seen_contests: set[str] = set()
        logger.info(
            f"Crawling with pattern={self.filters.name_pattern.pattern!r} "
            f"codes={sorted(self.filters.problem_codes)} limit={limit}"
        )

        try:
            while not state.limit_reached(limit):
                if not self.listing.page_allowed(state.current_page):
                    logger.warning(f"Stopping after max_pages={self.listing.max_pages}")
                    break

                contests = await self.listing.list_contests(state.current_page)
                new_contests = [c for c in contests if c.link not in seen_contests]
                if not new_contests:
                    logger.info(f"Contest listing exhausted at page {state.current_page}")
                    break

                for contest in new_contests:
                    if state.limit_reached(limit):
                        break
                    seen_contests.add(contest.link)
                    if not self.filters.matches_contest(contest.name):
                        continue

                    logger.info(f"Contest found: {contest.name}")
                    await self._crawl_contest(contest, state, limit)

                if state.limit_reached(limit):
                    break
                state.advance_page()

        except FetchError as e:
            state.fail()
            logger.error(f"Crawl failed on page {state.current_page}: {e}")
            raise

        state.finish()
        logger.info(
            f"Crawl finished: {state.matched_count} record(s), last page {state.current_page}"
        )
        return state

    async def _crawl_contest(self, contest: ContestSummary, state: CrawlState, limit: int) -> None:
        soup = await self.fetcher.fetch(contest.link)
        problem_links = self.contest_page_parser.extract_problem_links(soup)

        for link in problem_links:
            if state.limit_reached(limit):
                return

            code = URLParser.extract_problem_code(link)
            if not self.filters.matches_code(code):
                continue

            record = await self._build_record(contest, link)
            if record is None:
                continue

            logger.info(f"Found problem {state.matched_count + 1}: {link}")
            await self.sink.write(record)
            state.record_match()

    async def _build_record(self, contest: ContestSummary, link: str) -> Optional[MatchedRecord]:
        """Fetch a problem page and build its record, or None if the page lacks a usable title."""
        soup = await self.fetcher.fetch(link)
        detail = self.problem_parser.extract_detail(soup, link)

        if not detail.has_title:
            gap = ExtractionGap(link, "problem title")
        elif not self.filters.matches_code(detail.code):
            gap = ExtractionGap(link, f"accepted code in title (got {detail.code!r})")
        else:
            return MatchedRecord.from_parts(contest, detail)

        logger.warning(f"Skipping problem: {gap}")
        return None
