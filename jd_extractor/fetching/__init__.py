"""Page fetching."""

from .http_client import AsyncHttpClient

__all__ = ["AsyncHttpClient"]
