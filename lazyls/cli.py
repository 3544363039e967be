"""Command-line front door for lazyls.

Parses CLI options, merges them with persisted defaults, and resolves the
target directory. Then prints either the flat listing or the tree view.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .errors import ListingError
from .scan import build_listing
from .tree import render_tree
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

log = logging.getLogger("lazyls.cli")

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def _colors_disabled(no_color_flag: bool) -> bool:
    """Return whether output should be written without ANSI styles."""
    if no_color_flag or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (callable(isatty) and isatty())


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _require_directory(path: Path) -> None:
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory entries with aligned sizes and modification times.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Include entries whose names start with '.'.")
    parser.add_argument("-l", "--long", action="store_true", help="Use the long listing format.")
    parser.add_argument("-t", "--tree", metavar="ROOT", default=None, help="Print ROOT recursively as a tree.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the --all and --theme choices for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan details to stderr.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing for a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Listing failures exit with a message instead of a
    traceback.
    """
    args = build_parser().parse_args()
    _configure_logging(args.verbose)

    if args.save_defaults:
        config.save_show_hidden(args.all)
        if args.theme is not None:
            config.save_theme_name(normalize_theme_name(args.theme))
        log.debug("saved defaults to %s", config.CONFIG_PATH)

    show_all = args.all or config.load_show_hidden()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=_colors_disabled(args.no_color))

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)

    try:
        if args.tree is not None:
            tree_root = Path(args.tree)
            _require_directory(tree_root)
            for line in render_tree(tree_root, show_hidden=show_all, theme=theme):
                sys.stdout.write(line + "\n")
            return

        _require_directory(path)
        state = build_listing(path, show_all=show_all, long_format=args.long, tree_root=args.tree)
        state.print(sys.stdout, theme)
    except ListingError as exc:
        log.debug("listing aborted", exc_info=True)
        raise SystemExit(f"lazyls: {exc}") from exc


if __name__ == "__main__":
    main()
