"""Response mapping for remote feeds.

Turns a ``(data, status_code)`` pair into a ``LoadResult``. Only a 200
response whose body decodes as a feed payload is a success; everything else is
``LoadError.INVALID_DATA``.

Expected payload::

    {
        "items": [
            {"id": "<uuid>", "image": "<url>", "description": "...", "location": "..."}
        ]
    }

``description`` and ``location`` are omitted when unset. An explicit ``null``
is rejected rather than read as unset.

Example:
    >>> from feedloader.api.mapper import FeedItemsMapper
    >>> FeedItemsMapper.map(b'{"items": []}', 200)
    LoadSuccess(items=())
    >>> FeedItemsMapper.map(b'{"items": []}', 404)
    LoadFailure(error=<LoadError.INVALID_DATA: 'invalid_data'>)
"""

from __future__ import annotations

import logging
import re
from typing import Any
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ConfigDict, ValidationError, field_validator

from feedloader.core.exceptions import InvalidDataError
from feedloader.models.base import LoadError
from feedloader.models.feed_item import FeedItem
from feedloader.models.result import LoadFailure, LoadResult, LoadSuccess

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class _RemoteFeedItem(BaseModel):
    """Wire representation of one item."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: UUID
    image: AnyUrl
    description: str | None = None
    location: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _require_canonical_uuid(cls, value: Any) -> Any:
        if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
            raise ValueError("id must be a hyphenated 8-4-4-4-12 UUID string")
        return value

    @field_validator("description", "location", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value: Any) -> Any:
        # Defaults are not validated, so this only sees keys that were sent
        if value is None:
            raise ValueError("optional fields are omitted when unset, not null")
        return value

    def to_model(self) -> FeedItem:
        return FeedItem(
            id=self.id,
            description=self.description,
            location=self.location,
            image_url=self.image,
        )


class _RemoteFeed(BaseModel):
    """Wire representation of the whole payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    items: list[_RemoteFeedItem]


class FeedItemsMapper:
    """Pure mapping from an HTTP response to a ``LoadResult``.

    Holds no state; the same inputs always give equal results.
    """

    @staticmethod
    def decode(data: bytes) -> list[FeedItem]:
        """Decode a feed payload.

        Args:
            data: Raw response body.

        Returns:
            Feed items in payload order.

        Raises:
            InvalidDataError: If the body is not a valid feed payload.
        """
        try:
            feed = _RemoteFeed.model_validate_json(data)
        except ValidationError as e:
            raise InvalidDataError(
                f"Invalid feed payload ({e.error_count()} errors)"
            ) from e
        return [item.to_model() for item in feed.items]

    @classmethod
    def map(cls, data: bytes, status_code: int) -> LoadResult:
        """Map a response body and status code to a ``LoadResult``.

        Args:
            data: Raw response body.
            status_code: HTTP status code.

        Returns:
            ``LoadSuccess`` with the decoded items, or
            ``LoadFailure(LoadError.INVALID_DATA)``.
        """
        if status_code != 200:
            logger.debug(f"Rejecting response with status {status_code}")
            return LoadFailure(LoadError.INVALID_DATA)

        try:
            items = cls.decode(data)
        except InvalidDataError as e:
            logger.debug(f"Rejecting response body: {e}")
            return LoadFailure(LoadError.INVALID_DATA)

        return LoadSuccess(items)
