"""Remote feed loading API.

Example:
    >>> from feedloader.api import FeedItemsMapper, RemoteFeedLoader
    >>> hasattr(RemoteFeedLoader, "load")
    True
"""

from feedloader.api.mapper import FeedItemsMapper
from feedloader.api.remote import RemoteFeedLoader, load_async

__all__ = [
    "FeedItemsMapper",
    "RemoteFeedLoader",
    "load_async",
]
