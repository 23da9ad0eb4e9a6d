"""Domain models."""

from feedloader.models.base import FeedLoaderModel, LoadError
from feedloader.models.feed_item import FeedItem
from feedloader.models.result import LoadFailure, LoadResult, LoadSuccess

__all__ = [
    "FeedItem",
    "FeedLoaderModel",
    "LoadError",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
]
