"""Remote feed loader.

Loads feed items from a fixed URL through an ``HTTPClient`` and reports one
``LoadResult`` per ``load`` call.

The transport completion holds the loader only weakly. A loader that has been
garbage collected by the time the transport reports back never calls its
completion, so releasing the loader is how a pending load is silenced.

Example:
    >>> from feedloader.api.remote import RemoteFeedLoader
    >>> from feedloader.testing import HTTPClientSpy
    >>> client = HTTPClientSpy()
    >>> loader = RemoteFeedLoader("https://example.com/feed.json", client)
    >>> results = []
    >>> loader.load(results.append)
    >>> client.complete_with_status(200, b'{"items": []}')
    >>> results
    [LoadSuccess(items=())]
"""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING

from feedloader.api.mapper import FeedItemsMapper
from feedloader.models.base import LoadError
from feedloader.models.result import LoadFailure, LoadResult
from feedloader.protocols.http import HTTPClientResult, HTTPFailure, HTTPSuccess

if TYPE_CHECKING:
    from feedloader.protocols.feed import FeedLoader
    from feedloader.protocols.http import HTTPClient

logger = logging.getLogger(__name__)


def _classify(result: HTTPClientResult) -> LoadResult:
    """Reduce a transport outcome to a ``LoadResult``."""
    if isinstance(result, HTTPSuccess):
        return FeedItemsMapper.map(result.data, result.response.status_code)
    if isinstance(result, HTTPFailure):
        logger.debug(f"Transport failed: {result.error!r}")
        return LoadFailure(LoadError.CONNECTIVITY)
    raise TypeError(f"Unexpected transport result: {result!r}")


class RemoteFeedLoader:
    """Feed loader backed by an HTTP transport.

    The loader does not own its client; several loaders may share one.
    Each ``load`` call is independent and issues its own GET.

    Example:
        >>> from feedloader.testing import HTTPClientSpy
        >>> client = HTTPClientSpy()
        >>> loader = RemoteFeedLoader("https://example.com/feed.json", client)
        >>> client.requested_urls
        []
        >>> loader.load(lambda result: None)
        >>> client.requested_urls
        ['https://example.com/feed.json']
    """

    def __init__(self, url: str, client: HTTPClient) -> None:
        """Initialize the loader.

        Args:
            url: Feed URL requested by every ``load`` call.
            client: Transport used to perform the GET.
        """
        self._url = url
        self._client = client

    @property
    def url(self) -> str:
        """Feed URL."""
        return self._url

    def load(self, completion: Callable[[LoadResult], None]) -> None:
        """Load the feed.

        Issues one GET and calls ``completion`` once with the classified
        result, unless this loader is released before the transport reports
        back, in which case ``completion`` is never called.

        Args:
            completion: Receives the ``LoadResult``.
        """
        # The callback below must not reference self
        loader_ref = weakref.ref(self)
        url = self._url
        delivered = False

        def on_result(result: HTTPClientResult) -> None:
            nonlocal delivered
            if delivered:
                logger.warning(f"Ignoring repeated transport result for {url}")
                return
            delivered = True

            if loader_ref() is None:
                logger.debug(f"Loader for {url} was released, dropping result")
                return

            completion(_classify(result))

        logger.debug(f"Loading feed from {url}")
        self._client.get(url, on_result)


async def load_async(loader: FeedLoader) -> LoadResult:
    """Await the result of ``loader.load``.

    The transport may complete on another thread; the result is handed back
    to the running event loop.

    Example:
        >>> import asyncio
        >>> from feedloader.testing import HTTPClientSpy
        >>> client = HTTPClientSpy(auto_complete=(200, b'{"items": []}'))
        >>> loader = RemoteFeedLoader("https://example.com/feed.json", client)
        >>> asyncio.run(load_async(loader))
        LoadSuccess(items=())
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[LoadResult] = loop.create_future()

    def resolve(result: LoadResult) -> None:
        if not future.done():
            future.set_result(result)

    loader.load(lambda result: loop.call_soon_threadsafe(resolve, result))
    return await future
