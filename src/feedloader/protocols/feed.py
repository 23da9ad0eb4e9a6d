"""Feed loader protocol.

Example:
    >>> from feedloader.protocols.feed import FeedLoader
    >>> hasattr(FeedLoader, "load")
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from feedloader.models.result import LoadResult


@runtime_checkable
class FeedLoader(Protocol):
    """Anything that can load feed items and report one ``LoadResult``."""

    def load(self, completion: Callable[[LoadResult], None]) -> None:
        """Load the feed and call ``completion`` with the result."""
        ...
