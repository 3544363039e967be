"""Recursive listing with branch markers.

Each directory's children are laid out as one listing, so padding is shared
between siblings only. Rows are prefixed with ``├─``/``└─`` branches and
directories are descended depth-first. Symlinked directories are listed but
never followed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .listing import ListingState
from .scan import collect_entries
from .ui_theme import DEFAULT_THEME, ListingTheme

log = logging.getLogger("lazyls.tree")

TREE_DEFAULT_MAX_DEPTH = 32


def render_tree(
    root: Path,
    show_hidden: bool = False,
    theme: ListingTheme = DEFAULT_THEME,
    max_depth: int = TREE_DEFAULT_MAX_DEPTH,
) -> list[str]:
    """Return tree rows for ``root``, starting with its root label."""
    try:
        root_label = f"{root.resolve()}/"
    except OSError:
        root_label = f"{root}/"
    lines_out: list[str] = [theme.paint("dir_name", root_label)]

    def walk(directory: Path, prefix: str, depth: int) -> None:
        if depth > max_depth:
            return
        children = collect_entries(directory)
        visible = [(desc, path) for desc, path in children if show_hidden or not desc.is_hidden]
        state = ListingState(entries=[desc for desc, _path in children], show_hidden=show_hidden)
        rows = state.render(theme)

        for idx, ((descriptor, child_path), row) in enumerate(zip(visible, rows)):
            last = idx == len(rows) - 1
            branch = "└─ " if last else "├─ "
            lines_out.append(f"{theme.paint('branch', prefix + branch)}{row}")
            if descriptor.is_dir:
                walk(child_path, prefix + ("   " if last else "│  "), depth + 1)

    walk(root, "", 1)
    log.debug("tree %s: %d rows", root, len(lines_out) - 1)
    return lines_out


__all__ = ["TREE_DEFAULT_MAX_DEPTH", "render_tree"]
