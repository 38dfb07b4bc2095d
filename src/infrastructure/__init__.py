from .csv_sink import CsvRecordSink
from .http_client import AsyncHTTPClient
from .page_fetcher import PageFetcher
from .settings import CrawlerSettings, load_settings

__all__ = [
    "AsyncHTTPClient",
    "CrawlerSettings",
    "CsvRecordSink",
    "PageFetcher",
    "load_settings",
]
