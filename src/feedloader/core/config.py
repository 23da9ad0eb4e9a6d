"""Feedloader configuration.

Application settings loaded from environment variables with FEEDLOADER_ prefix.

Example:
    >>> from feedloader.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.request_timeout
    30.0
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedloader import __version__


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FEEDLOADER_ prefix.

    Example:
        >>> from feedloader.core.config import Settings
        >>> s = Settings(feed_url="https://example.com/feed.json")
        >>> s.feed_url
        'https://example.com/feed.json'
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote feed
    feed_url: str | None = Field(default=None, description="URL of the feed to load")

    # HTTP
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default=f"feedloader/{__version__}", min_length=1)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from feedloader.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)
