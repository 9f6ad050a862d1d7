"""Async HTTP client for fetching job posting pages."""

import logging
from typing import Optional

import httpx

from jd_extractor.config import settings
from jd_extractor.constants import DEFAULT_ACCEPT
from jd_extractor.exceptions import FetchError
from jd_extractor.models import RawPage

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """Single-attempt HTTP client with browser-like headers.

    Failures are never retried here: a non-2xx status or a network error
    becomes a FetchError and the caller decides what to do next.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        headers: Optional[dict] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds; None disables it
                (defaults to settings.request_timeout)
            headers: Extra HTTP headers, merged over the defaults
            transport: Custom httpx transport (used by tests)
        """
        default_headers = {
            "User-Agent": settings.user_agent,
            "Accept": DEFAULT_ACCEPT,
            "Accept-Language": settings.accept_language,
        }
        if headers:
            default_headers.update(headers)

        self._timeout = timeout if timeout is not None else settings.request_timeout

        self.client = httpx.AsyncClient(
            headers=default_headers,
            follow_redirects=True,
            timeout=self._timeout,
            transport=transport,
        )

    async def fetch_page(self, url: str) -> RawPage:
        """
        Fetch a page with one GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            RawPage with the HTML body of a 2xx response

        Raises:
            FetchError: On non-2xx status, network failure or an unusable URL
        """
        try:
            response = await self.client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Request failed for {url}: {e}")
            raise FetchError(url, reason=str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.debug(f"HTTP error {response.status_code} for {url}")
            raise FetchError(url, status_code=response.status_code, reason=response.reason_phrase)

        logger.debug(f"Fetched {url} -> {response.status_code} ({len(response.text)} chars)")
        return RawPage(
            url=str(response.url),
            status_code=response.status_code,
            html=response.text,
            reason=response.reason_phrase,
        )

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
