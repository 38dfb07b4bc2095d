"""Mutable state of a single crawl run."""

from dataclasses import dataclass
from enum import Enum


class CrawlStatus(str, Enum):
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@dataclass
class CrawlState:
    """Progress counters owned by the crawl service.

    Both counters only ever increase. Once the status leaves RUNNING it is final.
    """

    current_page: int = 1
    matched_count: int = 0
    status: CrawlStatus = CrawlStatus.RUNNING

    @property
    def is_running(self) -> bool:
        return self.status is CrawlStatus.RUNNING

    def limit_reached(self, limit: int) -> bool:
        return self.matched_count >= limit

    def advance_page(self) -> None:
        self.current_page += 1

    def record_match(self) -> None:
        self.matched_count += 1

    def finish(self) -> None:
        if self.is_running:
            self.status = CrawlStatus.DONE

    def fail(self) -> None:
        if self.is_running:
            self.status = CrawlStatus.FAILED
