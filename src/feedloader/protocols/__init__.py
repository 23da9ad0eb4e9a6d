"""Protocol definitions.

Example:
    >>> from feedloader.protocols import FeedLoader, HTTPClient
    >>> hasattr(HTTPClient, "get")
    True
"""

from feedloader.protocols.feed import FeedLoader
from feedloader.protocols.http import (
    HTTPClient,
    HTTPClientResult,
    HTTPFailure,
    HTTPResponse,
    HTTPSuccess,
)

__all__ = [
    "FeedLoader",
    "HTTPClient",
    "HTTPClientResult",
    "HTTPFailure",
    "HTTPResponse",
    "HTTPSuccess",
]
