"""Build display-ready descriptors from raw directory entries.

Each descriptor carries the entry name and kind plus size and timestamp labels
that are formatted once, at construction. Sizes use decimal (1000-based) units
with truncating division; timestamps are rendered in UTC.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import ClockError, MetadataError

log = logging.getLogger("lazyls.entry")

KILOBYTE = 1000
MEGABYTE = 1000 * KILOBYTE
GIGABYTE = 1000 * MEGABYTE
TERABYTE = 1000 * GIGABYTE

EMPTY_SIZE_LABEL = "-"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NS_PER_MS = 1_000_000
# Fixed English abbreviations; ``%b`` would follow the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class EntryDescriptor:
    """One listed entry, normalized for display.

    ``name`` is the only field that changes after construction: the listing
    formatter extends it with trailing padding once.
    """

    name: str
    kind: EntryKind
    size_display: str
    time_display: str

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_hidden(self) -> bool:
        # Padding only appends, so the leading character is stable.
        return self.name.startswith(".")


def format_size(size: int) -> str:
    """Return a compact size label such as ``"495B"`` or ``"299MB"``.

    Zero-length entries get ``"-"``. Units step at powers of 1000 and values
    are floor-divided, so ``1999`` renders as ``"1KB"``.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if size == 0:
        return EMPTY_SIZE_LABEL
    if size < KILOBYTE:
        return f"{size}B"
    if size < MEGABYTE:
        return f"{size // KILOBYTE}KB"
    if size < GIGABYTE:
        return f"{size // MEGABYTE}MB"
    if size < TERABYTE:
        return f"{size // GIGABYTE}GB"
    return f"{size // TERABYTE}TB"


def format_time(mtime_ns: int) -> str:
    """Render nanoseconds since the epoch as ``"30 Jan 20:37"`` in UTC.

    The day is space-padded to two columns. Raises ``ClockError`` when the
    timestamp predates the epoch or falls outside the representable range.
    """
    if mtime_ns < 0:
        raise ClockError(f"modification time predates the epoch: {mtime_ns}ns")
    try:
        moment = _EPOCH + timedelta(milliseconds=mtime_ns // _NS_PER_MS)
    except OverflowError as exc:
        raise ClockError(f"modification time out of range: {mtime_ns}ns") from exc
    month = _MONTH_ABBREVIATIONS[moment.month - 1]
    return f"{moment.day:>2} {month} {moment.hour:02d}:{moment.minute:02d}"


def describe(name: str, is_dir: bool, size_bytes: int, mtime_ns: int) -> EntryDescriptor:
    """Build a descriptor from already-collected metadata."""
    return EntryDescriptor(
        name=name,
        kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
        size_display=format_size(size_bytes),
        time_display=format_time(mtime_ns),
    )


def _decoded_name(entry: os.DirEntry) -> str:
    name = entry.name
    if isinstance(name, bytes):
        try:
            return name.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MetadataError(f"entry name is not valid text: {name!r}", entry.path) from exc
    try:
        # Undecodable bytes survive os.scandir as lone surrogates.
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MetadataError(f"entry name is not valid text: {name!r}", entry.path) from exc
    return name


def build_descriptor(entry: os.DirEntry) -> EntryDescriptor:
    """Convert one ``os.scandir`` entry into an ``EntryDescriptor``.

    Metadata is read without following symlinks. Unreadable metadata raises
    ``MetadataError``; an unrepresentable mtime raises ``ClockError``.
    """
    name = _decoded_name(entry)
    try:
        stat_result = entry.stat(follow_symlinks=False)
        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise MetadataError(f"cannot read metadata for {name}: {exc}", entry.path) from exc
    log.debug("entry %s: dir=%s size=%d", name, is_dir, stat_result.st_size)
    return describe(name, is_dir, int(stat_result.st_size), int(stat_result.st_mtime_ns))


__all__ = [
    "EntryKind",
    "EntryDescriptor",
    "format_size",
    "format_time",
    "describe",
    "build_descriptor",
]
