"""Domain models package."""

from .contest import ContestSummary
from .crawl import CrawlState, CrawlStatus
from .filters import CrawlFilters, Division, ProblemLetter
from .problem import DIFFICULTY_NA, ProblemDetail
from .record import RECORD_HEADER, MatchedRecord

__all__ = [
    "ContestSummary",
    "CrawlFilters",
    "CrawlState",
    "CrawlStatus",
    "DIFFICULTY_NA",
    "Division",
    "MatchedRecord",
    "ProblemDetail",
    "ProblemLetter",
    "RECORD_HEADER",
]
