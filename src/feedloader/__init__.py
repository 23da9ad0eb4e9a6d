"""
feedloader - Remote feed loading client.

Loads a JSON feed of image items from a fixed URL through a pluggable HTTP
transport and delivers exactly one classified result to a completion callback.

Quick Start:
    >>> from feedloader import HttpxHTTPClient, RemoteFeedLoader, load_async
    >>> async with HttpxHTTPClient() as client:
    ...     loader = RemoteFeedLoader("https://example.com/feed.json", client)
    ...     result = await load_async(loader)

Architecture:
    Models: FeedItem, LoadSuccess, LoadFailure, LoadError
    Protocols: HTTPClient, FeedLoader
    Loading: RemoteFeedLoader, FeedItemsMapper
    Transports: HttpxHTTPClient, HTTPClientSpy (testing)
"""

__version__ = "0.1.0"

# Remote loading
from feedloader.api.mapper import FeedItemsMapper
from feedloader.api.remote import RemoteFeedLoader, load_async

# Configuration and errors
from feedloader.core.config import Settings, get_settings
from feedloader.core.exceptions import (
    ConfigurationError,
    FeedLoaderError,
    InvalidDataError,
    TransportError,
)

# Transports
from feedloader.http.client import HttpxHTTPClient

# Models
from feedloader.models.base import LoadError
from feedloader.models.feed_item import FeedItem
from feedloader.models.result import LoadFailure, LoadResult, LoadSuccess

# Protocols
from feedloader.protocols.feed import FeedLoader
from feedloader.protocols.http import (
    HTTPClient,
    HTTPClientResult,
    HTTPFailure,
    HTTPResponse,
    HTTPSuccess,
)

__all__ = [
    # Models
    "FeedItem",
    "LoadError",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
    # Protocols
    "FeedLoader",
    "HTTPClient",
    "HTTPClientResult",
    "HTTPFailure",
    "HTTPResponse",
    "HTTPSuccess",
    # Loading
    "FeedItemsMapper",
    "RemoteFeedLoader",
    "load_async",
    # Transports
    "HttpxHTTPClient",
    # Configuration and errors
    "Settings",
    "get_settings",
    "ConfigurationError",
    "FeedLoaderError",
    "InvalidDataError",
    "TransportError",
    "__version__",
]
