"""Parsers for extracting data from fetched pages."""

from .contest_list_parser import ContestListParser
from .contest_page_parser import ContestPageParser
from .problem_page_parser import ProblemPageParser
from .url_parser import URLParser
from .interfaces import (
    ContestListParserProtocol,
    ContestPageParserProtocol,
    HTTPClientProtocol,
    PageFetcherProtocol,
    ProblemPageParserProtocol,
    RecordSinkProtocol,
)

__all__ = [
    "ContestListParser",
    "ContestListParserProtocol",
    "ContestPageParser",
    "ContestPageParserProtocol",
    "HTTPClientProtocol",
    "PageFetcherProtocol",
    "ProblemPageParser",
    "ProblemPageParserProtocol",
    "RecordSinkProtocol",
    "URLParser",
]
