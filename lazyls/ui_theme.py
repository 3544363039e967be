"""Listing palettes and selection helpers.

A theme maps the named style slots used by the listing formatter to ANSI
fragments. The ``plain`` theme carries no escapes and is used for uncolored
output.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by listing renderers."""

    name: str
    dir_name: str
    dir_size: str
    file_name: str
    file_size: str
    timestamp: str
    branch: str
    reset: str

    def paint(self, slot: str, text: str) -> str:
        """Wrap ``text`` in the style of ``slot``; unstyled slots return text as-is."""
        style = getattr(self, slot)
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    dir_name="\033[34m",
    dir_size="\033[37m",
    file_name="\033[37m",
    file_size="\033[33m",
    timestamp="\033[96m",
    branch="\033[2;38;5;245m",
    reset="\033[0m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    dir_name="\033[1;38;5;45m",
    dir_size="\033[38;5;252m",
    file_name="\033[38;5;252m",
    file_size="\033[38;5;73m",
    timestamp="\033[38;5;153m",
    branch="\033[2;38;5;31m",
    reset="\033[0m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    dir_name="",
    dir_size="",
    file_name="",
    file_size="",
    timestamp="",
    branch="",
    reset="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
