"""Collect descriptors for one directory in traversal order."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .entry import EntryDescriptor, build_descriptor
from .errors import MetadataError
from .listing import ListingState

log = logging.getLogger("lazyls.scan")


def collect_entries(directory: Path) -> list[tuple[EntryDescriptor, Path]]:
    """Return ``(descriptor, path)`` pairs for ``directory`` in ``os.scandir`` order.

    The first unreadable entry aborts the scan with its ``MetadataError`` or
    ``ClockError``; nothing is returned partially.
    """
    collected: list[tuple[EntryDescriptor, Path]] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                collected.append((build_descriptor(entry), Path(entry.path)))
    except OSError as exc:
        raise MetadataError(f"cannot list {directory}: {exc}", directory) from exc
    log.debug("scanned %s: %d entries", directory, len(collected))
    return collected


def collect_descriptors(directory: Path) -> list[EntryDescriptor]:
    """Return descriptors for ``directory`` in traversal order."""
    return [descriptor for descriptor, _path in collect_entries(directory)]


def build_listing(
    directory: Path,
    show_all: bool = False,
    long_format: bool = False,
    tree_root: str | None = None,
) -> ListingState:
    """Scan ``directory`` and return a listing configured with parsed flags."""
    state = ListingState(entries=collect_descriptors(directory))
    state.setup_args((show_all, long_format, tree_root))
    return state


__all__ = ["collect_entries", "collect_descriptors", "build_listing"]
