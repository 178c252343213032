"""File preview loading, sanitization, and syntax highlighting.

Tries Pygments first and falls back to plain text.
Also neutralizes terminal control bytes to avoid unsafe preview side effects.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight_text
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

PREVIEW_MAX_BYTES = 64 * 1024
FALLBACK_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def read_preview(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> str:
    """Return up to ``max_bytes`` of ``path`` as text.

    Binary files (any NUL byte in the sample) and unreadable files yield a
    one-line placeholder instead of their contents.
    """
    try:
        with path.open("rb") as handle:
            data = handle.read(max_bytes)
    except OSError as exc:
        return f"<cannot read {path.name}: {exc.strerror or exc}>\n"
    if b"\x00" in data:
        return f"<binary file {path.name}>\n"
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def display_name(name: str) -> str:
    """Return a filesystem name that any UTF-8 stream can print.

    Undecodable filename bytes arrive as lone surrogates; they become U+FFFD.
    Control characters are escaped as in ``sanitize_terminal_text``.
    """
    printable = name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return sanitize_terminal_text(printable)


def _normalize_style(style: str) -> str:
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return FALLBACK_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return FALLBACK_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def pygments_highlight(source: str, path: Path, style: str = FALLBACK_STYLE) -> str | None:
    formatter = _formatter_for_style(_normalize_style(style))
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()

    try:
        return pygments_highlight_text(source, lexer, formatter)
    except Exception:
        return None


def colorize_source(source: str, path: Path, style: str = FALLBACK_STYLE) -> str:
    """Highlight ``source`` for the terminal, returning it unchanged on failure."""
    rendered = pygments_highlight(source, path, style)
    return rendered or source


__all__ = [
    "PREVIEW_MAX_BYTES",
    "read_preview",
    "sanitize_terminal_text",
    "display_name",
    "pygments_highlight",
    "colorize_source",
]
