"""HTTP transports.

Example:
    >>> from feedloader.http import HttpxHTTPClient
    >>> HttpxHTTPClient(timeout=5.0).timeout
    5.0
"""

from feedloader.http.client import HttpxHTTPClient

__all__ = [
    "HttpxHTTPClient",
]
