"""Exceptions raised by the job description extractor."""

from typing import Optional


class ExtractionError(Exception):
    """Base error: no job description text could be produced for a page."""
    pass


class FetchError(ExtractionError):
    """Raised on network failure or a non-2xx HTTP status. Never retried."""

    def __init__(
        self,
        url: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            detail = f"{status_code} {reason}".strip() if reason else str(status_code)
        else:
            detail = reason or "unknown error"
        super().__init__(f"fetch failed: {detail}")


class NoContentFoundError(ExtractionError):
    """Raised when every strategy is exhausted, including the raw body floor."""

    def __init__(self, message: str = "no job description content found"):
        super().__init__(message)
