"""Error types raised while collecting and rendering a listing.

Every failure surfaces as a ``ListingError`` subclass so callers can abort the
listing with one ``except`` clause.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for lazyls failures."""


class MetadataError(ListingError):
    """An entry's name, kind, size, or modification time could not be read."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ClockError(ListingError):
    """A modification time predates the epoch or cannot be represented."""


class ListingConsumedError(ListingError):
    """A listing was rendered after it had already been consumed."""


__all__ = [
    "ListingError",
    "MetadataError",
    "ClockError",
    "ListingConsumedError",
]
