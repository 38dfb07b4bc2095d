"""Command-line interface for the contest problem crawler."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from domain.exceptions import ConfigurationError, CrawlerError, FetchError
from domain.models import CrawlFilters, Division, ProblemLetter
from infrastructure import AsyncHTTPClient, CsvRecordSink, load_settings
from infrastructure.log_setup import configure_logging
from services import create_crawl_service, create_listing_service


async def run_crawl(
    filename: Path,
    limit: int,
    filters: CrawlFilters,
    max_pages: Optional[int],
) -> int:
    settings = load_settings()
    pages = max_pages if max_pages is not None else settings.max_pages

    async with AsyncHTTPClient(
        timeout=settings.request_timeout, impersonate=settings.impersonate
    ) as http_client, CsvRecordSink(filename) as sink:
        service = create_crawl_service(
            http_client,
            filters,
            sink,
            base_url=settings.base_url,
            max_pages=pages,
        )
        state = await service.crawl(limit)

    logger.info(f"Wrote {state.matched_count} problem(s) to {filename}")
    return state.matched_count


async def run_latest(limit: int, max_pages: Optional[int]) -> None:
    settings = load_settings()
    pages = max_pages if max_pages is not None else settings.max_pages

    async with AsyncHTTPClient(
        timeout=settings.request_timeout, impersonate=settings.impersonate
    ) as http_client:
        service = create_listing_service(
            http_client, base_url=settings.base_url, max_pages=pages
        )
        contests = await service.get_latest_contests(limit)

    for contest in contests:
        click.echo(f"{contest.name}\t{contest.link}")


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (defaults to LOG_LEVEL or INFO).",
)
def cli(log_level: Optional[str]):
    """Crawl the contest listing for problems of a given division and letter."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    configure_logging(log_level or settings.log_level)


@cli.command()
@click.option("--filename", required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--limit", required=True, type=click.IntRange(min=0))
@click.option(
    "--pattern",
    required=True,
    type=click.Choice([d.value for d in Division], case_sensitive=False),
)
@click.option(
    "--code",
    required=True,
    type=click.Choice([p.value for p in ProblemLetter], case_sensitive=False),
)
@click.option("--max-pages", type=click.IntRange(min=1), default=None)
def crawl(filename: Path, limit: int, pattern: str, code: str, max_pages: Optional[int]):
    """Write up to LIMIT matching problems to a CSV file."""
    filters = CrawlFilters.from_choices(pattern, code)
    logger.info(
        f"Finding problems: pattern={pattern} codes={sorted(filters.problem_codes)} "
        f"limit={limit} filename={filename}"
    )

    try:
        asyncio.run(run_crawl(filename, limit, filters, max_pages))
    except FetchError as e:
        logger.error(f"Crawl aborted: {e}")
        sys.exit(1)
    except CrawlerError as e:
        logger.error(str(e))
        sys.exit(1)


@cli.command()
@click.option("--limit", default=10, show_default=True, type=click.IntRange(min=1))
@click.option("--max-pages", type=click.IntRange(min=1), default=None)
def latest(limit: int, max_pages: Optional[int]):
    """Print the newest LIMIT contests."""
    try:
        asyncio.run(run_latest(limit, max_pages))
    except CrawlerError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
