"""httpx-backed transport.

Provides ``HttpxHTTPClient``, an ``HTTPClient`` implementation that performs
each GET as an asyncio task on the running event loop and reports the outcome
through the completion callback.

Status codes are never inspected here: any response, whatever its status, is
an ``HTTPSuccess``. Only failures to obtain a response become ``HTTPFailure``.

Example:
    >>> from feedloader.api import RemoteFeedLoader, load_async
    >>> from feedloader.http import HttpxHTTPClient
    >>>
    >>> async with HttpxHTTPClient(timeout=10.0) as client:
    ...     loader = RemoteFeedLoader("https://example.com/feed.json", client)
    ...     result = await load_async(loader)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx

from feedloader import __version__
from feedloader.core.exceptions import TransportError
from feedloader.protocols.http import (
    HTTPClientResult,
    HTTPFailure,
    HTTPResponse,
    HTTPSuccess,
)

logger = logging.getLogger(__name__)


class HttpxHTTPClient:
    """Callback-style HTTP client over ``httpx.AsyncClient``.

    ``get`` must be called with an event loop running; the completion fires
    on that loop. A client passed in is used as-is and left open on
    ``aclose``; otherwise one is created on first use and owned.

    Example:
        >>> async with HttpxHTTPClient() as client:
        ...     task = client.get("https://example.com/feed.json", print)
        ...     await task

    Attributes:
        timeout: Default request timeout in seconds
        user_agent: User-Agent header value
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
        user_agent: str = f"feedloader/{__version__}",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            client: Existing ``httpx.AsyncClient`` to use (not owned)
            timeout: Request timeout for an owned client
            user_agent: User-Agent header for an owned client
            headers: Additional default headers for an owned client
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._user_agent = user_agent
        self._extra_headers = headers or {}
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def timeout(self) -> float:
        """Default request timeout in seconds."""
        return self._timeout

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
            **self._extra_headers,
        }

    @property
    def pending(self) -> int:
        """Number of requests still in flight."""
        return len(self._pending)

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the underlying client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client if owned."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxHTTPClient:
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def fetch(self, url: str) -> HTTPClientResult:
        """Perform a GET and return the outcome.

        Args:
            url: Absolute URL to fetch

        Returns:
            ``HTTPSuccess`` for any response, ``HTTPFailure`` wrapping a
            ``TransportError`` when no response was obtained
        """
        client = self._ensure_client()
        try:
            response = await client.get(url)
        except Exception as e:
            # httpx.InvalidURL and friends are not HTTPError subclasses
            logger.debug(f"GET {url} failed: {e!r}")
            error = TransportError(f"Request failed: {e}", url=url)
            error.__cause__ = e
            return HTTPFailure(error)

        logger.debug(f"GET {url} -> {response.status_code}")
        return HTTPSuccess(
            data=response.content,
            response=HTTPResponse(
                url=str(response.url),
                status_code=response.status_code,
                headers=dict(response.headers),
            ),
        )

    def get(
        self,
        url: str,
        completion: Callable[[HTTPClientResult], None],
    ) -> asyncio.Task[None]:
        """Schedule a GET and report its outcome to ``completion``.

        Args:
            url: Absolute URL to fetch
            completion: Called once with the outcome

        Returns:
            The scheduled task, for callers that want to await it

        Raises:
            RuntimeError: If no event loop is running
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._perform(url, completion))
        # Tasks are only weakly referenced by the loop
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _perform(
        self,
        url: str,
        completion: Callable[[HTTPClientResult], None],
    ) -> None:
        result = await self.fetch(url)
        try:
            completion(result)
        except Exception:
            logger.exception(f"Completion for GET {url} raised")


__all__ = [
    "HttpxHTTPClient",
]
