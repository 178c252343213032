"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the size list and its chrome. Syntax highlighting
style for file previews remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    divider: str
    header: str
    header_total: str
    row_dir: str
    row_file: str
    row_size: str
    selected: str
    preview_title: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    divider="\033[2m",
    header="\033[1;38;5;81m",
    header_total="\033[38;5;229m",
    row_dir="\033[1;34m",
    row_file="\033[38;5;252m",
    row_size="\033[38;5;109m",
    selected="\033[1;30;43m",
    preview_title="\033[1;38;5;45m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    divider="\033[2;38;5;31m",
    header="\033[1;38;5;45m",
    header_total="\033[38;5;153m",
    row_dir="\033[1;38;5;45m",
    row_file="\033[38;5;252m",
    row_size="\033[38;5;73m",
    selected="\033[1;30;48;5;45m",
    preview_title="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    divider="",
    header="",
    header_total="",
    row_dir="",
    row_file="",
    row_size="",
    selected="",
    preview_title="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
