"""Align descriptors into columns and emit styled listing rows.

A ``ListingState`` is built once per invocation and consumed by ``render``:
names and sizes are padded over the whole entry set, hidden entries are then
dropped from the output, and the state is cleared so it cannot be rendered
again. Column widths never depend on which rows end up hidden.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .entry import EntryDescriptor
from .errors import ListingConsumedError
from .ui_theme import DEFAULT_THEME, ListingTheme

log = logging.getLogger("lazyls.listing")


@dataclass
class ListingState:
    entries: list[EntryDescriptor] = field(default_factory=list)
    show_hidden: bool = False
    long_format: bool = False
    tree: tuple[bool, str] = (False, "")
    padded: bool = False
    consumed: bool = False

    def setup_args(self, args: tuple[bool, bool, str | None]) -> None:
        """Apply parsed ``(show_all, long_format, tree_root)`` flags."""
        show_all, long_format, tree_root = args
        self.show_hidden = show_all
        self.long_format = long_format
        if tree_root is not None:
            self.tree = (True, tree_root)

    def column_widths(self) -> tuple[int, int]:
        """Return ``(max_name_len, max_size_len)`` over every entry."""
        name_width = 0
        size_width = 0
        for entry in self.entries:
            name_width = max(name_width, len(entry.name))
            size_width = max(size_width, len(entry.size_display))
        return name_width, size_width

    def pad(self) -> None:
        """Right-pad names and sizes to one column past the widest value.

        Padding happens once; calling again on a padded state does nothing.
        """
        self._ensure_live()
        if self.padded:
            return
        name_width, size_width = self.column_widths()
        for entry in self.entries:
            entry.name = entry.name.ljust(name_width + 1)
            entry.size_display = entry.size_display.ljust(size_width + 1)
        self.padded = True

    def render(self, theme: ListingTheme = DEFAULT_THEME) -> list[str]:
        """Consume the listing and return one styled row per visible entry."""
        self.pad()
        lines: list[str] = []
        skipped = 0
        for entry in self.entries:
            if not self.show_hidden and entry.is_hidden:
                skipped += 1
                continue
            lines.append(format_row(entry, theme))
        log.debug("rendered %d rows, %d hidden", len(lines), skipped)
        self.entries = []
        self.consumed = True
        return lines

    def print(self, stream: TextIO | None = None, theme: ListingTheme = DEFAULT_THEME) -> None:
        """Render and write rows to ``stream`` (stdout by default)."""
        out = sys.stdout if stream is None else stream
        for line in self.render(theme):
            out.write(line)
            out.write("\n")

    def _ensure_live(self) -> None:
        if self.consumed:
            raise ListingConsumedError("listing has already been rendered")


def format_row(entry: EntryDescriptor, theme: ListingTheme = DEFAULT_THEME) -> str:
    """Format one descriptor as ``"{name} {size} {time}"`` with kind styling."""
    if entry.is_dir:
        name = theme.paint("dir_name", entry.name)
        size = theme.paint("dir_size", entry.size_display)
    else:
        name = theme.paint("file_name", entry.name)
        size = theme.paint("file_size", entry.size_display)
    return f"{name} {size} {theme.paint('timestamp', entry.time_display)}"


__all__ = ["ListingState", "format_row"]
