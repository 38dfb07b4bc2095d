"""Async HTTP client built on curl_cffi."""

from typing import Optional

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import FetchError


class AsyncHTTPClient:
    """Thin async wrapper around a curl_cffi session.

    The session is created on first use and shared by all requests until
    close() is called.
    """

    def __init__(self, timeout: float = 30, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Per-request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate
        self._session: Optional[AsyncSession] = None

    def _get_session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(impersonate=self.impersonate, timeout=self.timeout)
        return self._session

    async def get_text(self, url: str) -> str:
        """
        Perform a GET request and return the response body.

        Raises:
            FetchError: On transport failure, timeout or non-success status
        """
        logger.debug(f"GET {url}")

        try:
            response = await self._get_session().get(url)
        except CurlError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(url, e) from e

        if response.status_code >= 400:
            logger.error(f"Request to {url} returned HTTP {response.status_code}")
            raise FetchError(url, f"HTTP {response.status_code}")

        return response.text

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
            logger.debug("HTTP session closed")

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
