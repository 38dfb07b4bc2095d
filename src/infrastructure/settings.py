"""Crawler settings loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://codeforces.com"


@dataclass(frozen=True)
class CrawlerSettings:
    """Runtime settings for the crawler."""

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
    max_pages: Optional[int] = None
    impersonate: str = "chrome"
    log_level: str = "INFO"


def _parse_number(name: str, raw: str, kind: type) -> float | int:
    try:
        value = kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got: {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got: {raw!r}")
    return value


def load_settings() -> CrawlerSettings:
    """Load settings from environment variables (and a .env file if present)."""
    load_dotenv()

    max_pages = os.getenv("CF_MAX_PAGES")

    return CrawlerSettings(
        base_url=os.getenv("CF_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        request_timeout=_parse_number(
            "CF_REQUEST_TIMEOUT", os.getenv("CF_REQUEST_TIMEOUT", "30"), float
        ),
        max_pages=_parse_number("CF_MAX_PAGES", max_pages, int) if max_pages else None,
        impersonate=os.getenv("CF_IMPERSONATE", "chrome"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
