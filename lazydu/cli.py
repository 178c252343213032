"""Command-line front door for lazydu.

Parses CLI options, resolves the root directory, and scans it.
Then either reports totals, prints a listing, or starts the browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import run_browser
from .runtime.config import load_style_name, load_theme_name, load_worker_count, save_preferences
from .scan_model import ScanRootError, resolve_scan_root
from .session import build_index, measure, render_listing
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Measure disk usage under a directory and browse it largest-first."
    )
    parser.add_argument("directory", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "-b",
        "--benchmark",
        action="store_true",
        help="Scan and aggregate, print the total, and exit without browsing.",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=_positive_int,
        default=None,
        help="Number of scanner threads (default: config value or 16).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--nopager",
        action="store_true",
        help="Print the size-ranked children of the directory and exit.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember --workers, --theme and --style for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments, scan the directory, and present the result.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. An unusable root aborts with a diagnostic before any
    scanning starts.
    """
    args = build_parser().parse_args()
    configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.directory or default_path)
    try:
        root = resolve_scan_root(path)
    except ScanRootError as exc:
        raise SystemExit(f"Cannot scan {path}: {exc}") from exc

    if args.save_defaults:
        save_preferences(workers=args.workers, theme=args.theme, style=args.style)

    workers = args.workers if args.workers is not None else load_worker_count()
    if args.benchmark:
        measure(root, workers, sys.stdout)
        return

    interactive = not args.nopager and sys.stdin.isatty() and sys.stdout.isatty()
    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    index = build_index(root, workers=workers, progress_stream=sys.stderr)

    if not interactive:
        sys.stdout.write(render_listing(index, root, theme))
        return

    style = args.style or load_style_name()
    run_browser(index, root, theme, style, colorize_previews=not no_color)


if __name__ == "__main__":
    main()
