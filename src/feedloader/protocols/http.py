"""HTTP transport protocol.

Defines the transport port the remote loader depends on: perform one GET and
deliver exactly one ``HTTPClientResult`` through a completion callback.
Concrete transports (httpx, test spies) live outside the core.

Example:
    >>> from feedloader.protocols.http import HTTPClient
    >>> hasattr(HTTPClient, "get")
    True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias, runtime_checkable


@dataclass(frozen=True)
class HTTPResponse:
    """Metadata of a completed HTTP exchange.

    Attributes:
        url: Final URL after any redirects
        status_code: HTTP status code (200, 404, etc.)
        headers: Response headers
    """

    url: str
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HTTPSuccess:
    """Transport completed; body and response metadata."""

    data: bytes
    response: HTTPResponse


@dataclass(frozen=True)
class HTTPFailure:
    """Transport failed; the error is opaque to the loader."""

    error: Exception


HTTPClientResult: TypeAlias = HTTPSuccess | HTTPFailure


@runtime_checkable
class HTTPClient(Protocol):
    """Transport port.

    Implementations must deliver exactly one result per ``get`` call and may
    do so on any thread or event-loop turn, including synchronously.
    """

    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> Any:
        """Issue a GET for ``url`` and report the outcome to ``completion``."""
        ...
