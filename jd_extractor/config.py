"""Application configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jd_extractor.constants import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_USER_AGENT,
    MIN_CONTENT_LENGTH,
)


class Settings(BaseSettings):
    """Application settings, overridable via JD_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="JD_", extra="ignore"
    )

    # HTTP
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")
    accept_language: str = Field(
        default=DEFAULT_ACCEPT_LANGUAGE, description="Accept-Language header"
    )
    # None disables the timeout: a hanging host hangs the call
    request_timeout: Optional[float] = Field(
        default=None, description="Request timeout in seconds (None = no timeout)"
    )

    # Extraction
    min_content_length: int = Field(
        default=MIN_CONTENT_LENGTH, ge=0, description="Minimum candidate length (exclusive)"
    )
    use_structured_data: bool = Field(
        default=False, description="Try schema.org JobPosting description before heuristics"
    )


settings = Settings()
