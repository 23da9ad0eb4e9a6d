"""Load result types.

A load operation ends in exactly one of two variants: ``LoadSuccess`` with the
decoded items, or ``LoadFailure`` with a ``LoadError``.

Example:
    >>> from feedloader.models.result import LoadFailure, LoadSuccess
    >>> from feedloader.models.base import LoadError
    >>> LoadSuccess(()) == LoadSuccess(())
    True
    >>> LoadFailure(LoadError.CONNECTIVITY).error.value
    'connectivity'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from feedloader.models.base import LoadError
from feedloader.models.feed_item import FeedItem


@dataclass(frozen=True)
class LoadSuccess:
    """Items delivered in server order (possibly empty)."""

    items: tuple[FeedItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class LoadFailure:
    """Classified failure."""

    error: LoadError


LoadResult: TypeAlias = LoadSuccess | LoadFailure
