"""Base models and shared types.

Example:
    >>> from feedloader.models.base import LoadError
    >>> LoadError.CONNECTIVITY.value
    'connectivity'
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LoadError(str, Enum):
    """Failure kinds surfaced to load completions.

    Every transport or decoding problem is reduced to one of these before it
    reaches a caller.

    Example:
        >>> list(LoadError)
        [<LoadError.CONNECTIVITY: 'connectivity'>, <LoadError.INVALID_DATA: 'invalid_data'>]
    """

    CONNECTIVITY = "connectivity"  # Transport could not complete the request
    INVALID_DATA = "invalid_data"  # Non-200 status or undecodable body


class FeedLoaderModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )
