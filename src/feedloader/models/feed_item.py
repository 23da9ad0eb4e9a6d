"""Feed item domain model.

Example:
    >>> from uuid import UUID
    >>> from feedloader.models.feed_item import FeedItem
    >>> item = FeedItem(
    ...     id=UUID("3f1c8a52-9a3e-4c1f-8f57-2b3f4d5e6a7b"),
    ...     image_url="https://example.com/image.png",
    ... )
    >>> item.description is None
    True
"""

from __future__ import annotations

from uuid import UUID

from pydantic import AnyUrl, Field

from feedloader.models.base import FeedLoaderModel


class FeedItem(FeedLoaderModel):
    """One entry in the feed.

    Immutable; two items with the same field values compare equal.

    Example:
        >>> from uuid import UUID
        >>> a = FeedItem(id=UUID(int=1), image_url="https://a.example/1.png")
        >>> b = FeedItem(id=UUID(int=1), image_url="https://a.example/1.png")
        >>> a == b
        True
    """

    id: UUID = Field(..., description="Unique identifier")
    description: str | None = Field(default=None, description="Short description")
    location: str | None = Field(default=None, description="Location label")
    image_url: AnyUrl = Field(..., description="Image URL")
