"""Core configuration and exceptions."""

from feedloader.core.config import Settings, get_settings
from feedloader.core.exceptions import (
    ConfigurationError,
    FeedLoaderError,
    InvalidDataError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "FeedLoaderError",
    "InvalidDataError",
    "Settings",
    "TransportError",
    "get_settings",
]
