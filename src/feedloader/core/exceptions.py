"""Custom exceptions.

None of these reach a load completion: the loader reduces every failure to a
``LoadError`` first. They exist for the transport and decoding seams and for
callers composing the library.

Example:
    >>> from feedloader.core.exceptions import FeedLoaderError, TransportError
    >>> isinstance(TransportError("timed out"), FeedLoaderError)
    True
"""

from __future__ import annotations


class FeedLoaderError(Exception):
    """Base exception for feedloader.

    Example:
        >>> from feedloader.core.exceptions import FeedLoaderError
        >>> str(FeedLoaderError("something went wrong"))
        'something went wrong'
    """


class TransportError(FeedLoaderError):
    """Transport could not complete a request.

    Carried opaquely inside ``HTTPFailure``.

    Example:
        >>> from feedloader.core.exceptions import TransportError
        >>> err = TransportError("connection refused", url="https://example.com")
        >>> err.url
        'https://example.com'
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InvalidDataError(FeedLoaderError):
    """Response body is not a valid feed payload.

    Example:
        >>> from feedloader.core.exceptions import InvalidDataError
        >>> raise InvalidDataError("missing items")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        InvalidDataError: missing items
    """


class ConfigurationError(FeedLoaderError):
    """Configuration is invalid.

    Example:
        >>> from feedloader.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("missing feed url")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: missing feed url
    """
