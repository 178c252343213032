"""Key dispatch for the interactive size browser.

Handlers only mutate ``BrowserState`` so they can be driven without a
terminal. Mouse rows are 1-based terminal rows; list rows start below the
header and divider.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..scan_model import ScanIndex
from .state import (
    BrowserState,
    close_preview,
    enter_directory,
    leave_directory,
    move_selection,
    open_preview,
)

LIST_FIRST_ROW = 3

QUIT_KEYS = {"q", "ESC", "CTRL_C"}
UP_KEYS = {"k", "UP"}
DOWN_KEYS = {"j", "DOWN"}
ACTIVATE_KEYS = {"ENTER", "l", "RIGHT"}
BACK_KEYS = {"-", "BACKSPACE", "h", "LEFT"}


def _parse_mouse(key: str) -> tuple[str, int, int] | None:
    kind, _, coords = key.partition(":")
    col_s, _, row_s = coords.partition(":")
    try:
        return kind, int(col_s), int(row_s)
    except ValueError:
        return None


def activate_selection(
    state: BrowserState,
    index: ScanIndex,
    load_preview: Callable[[Path], list[str]],
) -> None:
    """Descend into the selected directory or preview the selected file."""
    row = state.selected_row
    if row is None:
        return
    if row.is_dir:
        enter_directory(state, index, row.path)
    else:
        open_preview(state, row.path, load_preview(row.path))


def _handle_preview_key(state: BrowserState, key: str, view_rows: int) -> None:
    max_start = max(0, len(state.preview_lines) - max(1, view_rows))
    if key in DOWN_KEYS or key.startswith("MOUSE_WHEEL_DOWN"):
        state.preview_start = min(max_start, state.preview_start + 1)
    elif key in UP_KEYS or key.startswith("MOUSE_WHEEL_UP"):
        state.preview_start = max(0, state.preview_start - 1)
    elif key == " ":
        state.preview_start = min(max_start, state.preview_start + max(1, view_rows))
    else:
        close_preview(state)


def handle_key(
    state: BrowserState,
    index: ScanIndex,
    key: str,
    view_rows: int,
    load_preview: Callable[[Path], list[str]],
) -> bool:
    """Apply one key token; return ``False`` when the browser should quit."""
    if state.preview_path is not None:
        if key == "CTRL_C":
            return False
        _handle_preview_key(state, key, view_rows)
        return True

    if key in QUIT_KEYS:
        return False
    if key in UP_KEYS or key.startswith("MOUSE_WHEEL_UP"):
        move_selection(state, -1)
    elif key in DOWN_KEYS or key.startswith("MOUSE_WHEEL_DOWN"):
        move_selection(state, 1)
    elif key in {"g", "HOME"}:
        move_selection(state, -len(state.rows))
    elif key in {"G", "END"}:
        move_selection(state, len(state.rows))
    elif key in ACTIVATE_KEYS:
        activate_selection(state, index, load_preview)
    elif key in BACK_KEYS:
        leave_directory(state, index)
    elif key.startswith("MOUSE_LEFT_DOWN"):
        parsed = _parse_mouse(key)
        if parsed is None:
            return True
        _kind, _col, row = parsed
        clicked = state.start + (row - LIST_FIRST_ROW)
        if row < LIST_FIRST_ROW or row - LIST_FIRST_ROW >= view_rows or clicked >= len(state.rows):
            return True
        if clicked == state.selected:
            activate_selection(state, index, load_preview)
        else:
            state.selected = clicked
    return True


__all__ = ["LIST_FIRST_ROW", "activate_selection", "handle_key"]
