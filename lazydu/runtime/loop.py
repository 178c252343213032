"""Interactive event loop for the size browser.

Wires terminal setup, rendering, and key dispatch. Navigation logic lives in
``keys`` and ``state``; this module only owns the terminal session.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from ..input import read_key
from ..scan_model import ScanIndex
from ..ui_theme import UITheme
from .keys import handle_key
from .render import build_preview_lines, list_view_rows, render_browser
from .state import ensure_visible, open_browser_state
from .terminal import TerminalController


def run_browser(
    index: ScanIndex,
    root: Path,
    theme: UITheme,
    style: str,
    *,
    colorize_previews: bool = True,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Browse ``index`` starting at ``root`` until the user quits."""
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    terminal = TerminalController(stdin_fd, stdout_fd)
    state = open_browser_state(index, root)

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            view_rows = list_view_rows(term.lines)
            ensure_visible(state, view_rows)
            terminal.write(render_browser(state, term.columns, term.lines, theme))

            key = read_key(stdin_fd)
            if not key:
                break

            def load_preview(path: Path) -> list[str]:
                return build_preview_lines(path, style, term.columns, colorize=colorize_previews)

            if not handle_key(state, index, key, view_rows, load_preview):
                break


__all__ = ["run_browser"]
