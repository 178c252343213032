"""Screen rendering for the size browser and file previews."""

from __future__ import annotations

from pathlib import Path

from ..highlight import colorize_source, display_name, read_preview, sanitize_terminal_text
from ..sizes import format_size
from ..ui_theme import UITheme
from .state import BrowserState

HEADER_ROWS = 2
SIZE_COLUMN_WIDTH = 10
PREVIEW_TAB_SIZE = 4


def list_view_rows(height: int) -> int:
    """Return how many list rows fit below the header and divider."""
    return max(1, height - HEADER_ROWS)


def _clip(text: str, width: int) -> str:
    return text[: max(0, width)]


def _header_parts(state: BrowserState) -> tuple[str, str]:
    if state.preview_path is not None:
        return f"Preview - {display_name(state.preview_path.name)}", ""
    name = display_name(state.current.name) or "/"
    return f"Files - {name} {len(state.rows)}", f" ({format_size(state.total_size)})"


def header_text(state: BrowserState) -> str:
    title, total = _header_parts(state)
    return title + total


def _render_header(state: BrowserState, width: int, theme: UITheme) -> str:
    title, total = _header_parts(state)
    title_color = theme.preview_title if state.preview_path is not None else theme.header
    text = _clip(title + total, width)
    if len(text) <= len(title):
        return f"{title_color}{text}{theme.reset}"
    return f"{title_color}{title}{theme.reset}{theme.header_total}{text[len(title):]}{theme.reset}"


def _render_row(state: BrowserState, row_idx: int, width: int, theme: UITheme) -> str:
    row = state.rows[row_idx]
    marker = "> " if row_idx == state.selected else "  "
    size_label = format_size(row.size).rjust(SIZE_COLUMN_WIDTH)
    name = display_name(row.name) + ("/" if row.is_dir else "")
    plain = _clip(f"{marker}{size_label} {name}", width)
    if row_idx == state.selected:
        return f"{theme.selected}{plain}{theme.reset}"

    prefix_len = len(marker) + len(size_label) + 1
    name_color = theme.row_dir if row.is_dir else theme.row_file
    return (
        f"{plain[: len(marker)]}{theme.row_size}{plain[len(marker) : prefix_len]}{theme.reset}"
        f"{name_color}{plain[prefix_len:]}{theme.reset}"
    )


def render_lines(state: BrowserState, width: int, height: int, theme: UITheme) -> list[str]:
    """Return exactly ``height`` screen lines for the current state."""
    width = max(1, width)
    lines = [
        _render_header(state, width, theme),
        f"{theme.divider}{'─' * width}{theme.reset}",
    ]
    view_rows = list_view_rows(height)
    if state.preview_path is not None:
        visible = state.preview_lines[state.preview_start : state.preview_start + view_rows]
        lines.extend(f"{line}{theme.reset}" for line in visible)
    else:
        for row_idx in range(state.start, min(len(state.rows), state.start + view_rows)):
            lines.append(_render_row(state, row_idx, width, theme))
    lines.extend("" for _ in range(max(0, height - len(lines))))
    return lines[: max(1, height)]


def render_browser(state: BrowserState, width: int, height: int, theme: UITheme) -> str:
    """Return one full-screen frame, repainting from the top-left corner."""
    lines = render_lines(state, width, height, theme)
    return "\x1b[H" + "\r\n".join(f"{line}\x1b[K" for line in lines)


def build_preview_lines(path: Path, style: str, width: int, colorize: bool = True) -> list[str]:
    """Load ``path`` and return preview lines clipped to ``width`` columns."""
    source = sanitize_terminal_text(read_preview(path)).expandtabs(PREVIEW_TAB_SIZE)
    clipped = [_clip(line, width) for line in source.splitlines()]
    if not colorize:
        return clipped
    rendered = colorize_source("\n".join(clipped) + "\n", path, style)
    return rendered.rstrip("\n").split("\n")


__all__ = [
    "HEADER_ROWS",
    "list_view_rows",
    "header_text",
    "render_lines",
    "render_browser",
    "build_preview_lines",
]
