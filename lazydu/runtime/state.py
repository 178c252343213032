"""Mutable navigation state for the interactive size browser."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..scan_model import ChildRow, ScanIndex


@dataclass
class BrowserState:
    """Current directory listing, selection, and back-navigation stack.

    ``history`` keeps the selected row of every directory left by descending,
    so going back restores the previous selection.
    """

    root: Path
    current: Path
    rows: list[ChildRow]
    total_size: int
    selected: int = 0
    start: int = 0
    history: list[int] = field(default_factory=list)
    preview_path: Path | None = None
    preview_lines: list[str] = field(default_factory=list)
    preview_start: int = 0

    @property
    def selected_row(self) -> ChildRow | None:
        if 0 <= self.selected < len(self.rows):
            return self.rows[self.selected]
        return None


def open_browser_state(index: ScanIndex, root: Path) -> BrowserState:
    """Create browser state showing the children of ``root``."""
    return BrowserState(
        root=root,
        current=root,
        rows=index.list_children(root),
        total_size=index.total_size(root),
    )


def show_directory(state: BrowserState, index: ScanIndex, directory: Path, selected: int = 0) -> None:
    state.current = directory
    state.rows = index.list_children(directory)
    state.total_size = index.total_size(directory)
    state.selected = max(0, min(selected, len(state.rows) - 1))
    state.start = 0


def enter_directory(state: BrowserState, index: ScanIndex, directory: Path) -> None:
    state.history.append(state.selected)
    show_directory(state, index, directory)


def leave_directory(state: BrowserState, index: ScanIndex) -> bool:
    """Go back to the parent directory; ``False`` when already at the root."""
    if not state.history or state.current == state.root:
        return False
    show_directory(state, index, state.current.parent, selected=state.history.pop())
    return True


def move_selection(state: BrowserState, delta: int) -> None:
    if not state.rows:
        state.selected = 0
        return
    state.selected = max(0, min(len(state.rows) - 1, state.selected + delta))


def ensure_visible(state: BrowserState, view_rows: int) -> None:
    """Scroll so the selected row lies inside a window of ``view_rows`` rows."""
    view_rows = max(1, view_rows)
    if state.selected < state.start:
        state.start = state.selected
    elif state.selected >= state.start + view_rows:
        state.start = state.selected - view_rows + 1
    max_start = max(0, len(state.rows) - view_rows)
    state.start = max(0, min(state.start, max_start))


def open_preview(state: BrowserState, path: Path, lines: list[str]) -> None:
    state.preview_path = path
    state.preview_lines = lines
    state.preview_start = 0


def close_preview(state: BrowserState) -> None:
    state.preview_path = None
    state.preview_lines = []
    state.preview_start = 0


__all__ = [
    "BrowserState",
    "open_browser_state",
    "show_directory",
    "enter_directory",
    "leave_directory",
    "move_selection",
    "ensure_visible",
    "open_preview",
    "close_preview",
]
