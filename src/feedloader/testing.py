"""Testing utilities.

This module provides an in-memory ``HTTPClient`` for exercising loaders
without network access.

Example:
    >>> from feedloader.testing import HTTPClientSpy
    >>> client = HTTPClientSpy()
    >>> client.get("https://example.com/feed.json", print)
    >>> client.requested_urls
    ['https://example.com/feed.json']
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from feedloader.protocols.http import (
    HTTPClientResult,
    HTTPFailure,
    HTTPResponse,
    HTTPSuccess,
)


@dataclass
class HTTPClientSpy:
    """HTTP client that records requests and completes them on demand.

    Each ``get`` call is stored as a message; tests complete a message by
    index with either a transport error or a status code and body.

    Args:
        auto_complete: Optional ``(status_code, data)`` delivered
            synchronously from ``get`` instead of recording a pending message.

    Example:
        >>> from feedloader.testing import HTTPClientSpy
        >>> client = HTTPClientSpy()
        >>> received = []
        >>> client.get("https://example.com/a", received.append)
        >>> client.complete_with_status(404, b"")
        >>> received[0].response.status_code
        404
    """

    auto_complete: tuple[int, bytes] | None = None
    messages: list[tuple[str, Callable[[HTTPClientResult], None]]] = field(
        default_factory=list, init=False
    )

    @property
    def requested_urls(self) -> list[str]:
        """URLs requested so far, in call order."""
        return [url for url, _ in self.messages]

    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        """Record the request, or complete it immediately in auto mode."""
        self.messages.append((url, completion))
        if self.auto_complete is not None:
            status_code, data = self.auto_complete
            self.complete_with_status(status_code, data, at=len(self.messages) - 1)

    def complete_with_error(self, error: Exception, at: int = 0) -> None:
        """Deliver a transport failure to the request at index ``at``."""
        _, completion = self.messages[at]
        completion(HTTPFailure(error))

    def complete_with_status(self, status_code: int, data: bytes, at: int = 0) -> None:
        """Deliver a response to the request at index ``at``."""
        url, completion = self.messages[at]
        completion(
            HTTPSuccess(
                data=data,
                response=HTTPResponse(url=url, status_code=status_code),
            )
        )
