"""Exceptions raised by the contest crawler."""


class CrawlerError(Exception):
    """Base exception for crawler errors."""

    pass


class FetchError(CrawlerError):
    """Remote document could not be retrieved or parsed."""

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class ExtractionGap(CrawlerError):
    """Expected element is absent from an otherwise valid page."""

    def __init__(self, link: str, missing: str):
        self.link = link
        self.missing = missing
        super().__init__(f"Missing {missing} on {link}")


class ConfigurationError(CrawlerError, ValueError):
    """Invalid crawler configuration value."""

    pass
