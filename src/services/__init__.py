from typing import Optional

from domain.models import CrawlFilters
from infrastructure.parsers import RecordSinkProtocol
from services.crawl import CrawlService
from services.listing import ContestListingService


def create_listing_service(
    http_client,
    base_url: Optional[str] = None,
    max_pages: Optional[int] = None,
) -> ContestListingService:
    """Factory function to create contest listing service."""
    from infrastructure.page_fetcher import PageFetcher
    from infrastructure.parsers import ContestListParser, URLParser

    url_parser = URLParser(base_url) if base_url else URLParser()

    return ContestListingService(
        fetcher=PageFetcher(http_client, url_parser),
        contest_list_parser=ContestListParser(url_parser),
        max_pages=max_pages,
    )


def create_crawl_service(
    http_client,
    filters: CrawlFilters,
    sink: RecordSinkProtocol,
    base_url: Optional[str] = None,
    max_pages: Optional[int] = None,
) -> CrawlService:
    """Factory function to create crawl service with all dependencies."""
    from infrastructure.parsers import ContestPageParser, ProblemPageParser, URLParser

    listing = create_listing_service(http_client, base_url, max_pages)
    url_parser = URLParser(base_url) if base_url else URLParser()

    return CrawlService(
        listing=listing,
        fetcher=listing.fetcher,
        filters=filters,
        sink=sink,
        contest_page_parser=ContestPageParser(url_parser),
        problem_parser=ProblemPageParser(),
    )


__all__ = [
    "ContestListingService",
    "CrawlService",
    "create_crawl_service",
    "create_listing_service",
]
