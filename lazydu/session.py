"""Scan sessions: scan, sort, and aggregate with progress output.

These are the operations the command line drives. ``measure`` is the
measurement-only mode used for throughput benchmarking; ``render_listing``
prints a directory's size-ranked children without the interactive browser.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TextIO

from .highlight import display_name
from .progress import ScanProgressPrinter, timed
from .scan_model import DEFAULT_WORKER_COUNT, ScanIndex, resolve_scan_root, scan
from .sizes import format_size
from .ui_theme import UITheme


def build_index(
    root: Path | str,
    workers: int = DEFAULT_WORKER_COUNT,
    progress_stream: TextIO | None = None,
) -> ScanIndex:
    """Scan ``root`` and return a sorted, aggregated ``ScanIndex``.

    When ``progress_stream`` is given, a running counter and per-phase timings
    are written to it.
    """
    resolved_root = resolve_scan_root(root)
    printer = ScanProgressPrinter(progress_stream) if progress_stream is not None else None

    started = time.perf_counter()
    records = scan(resolved_root, workers=workers, on_progress=printer)
    if printer is None:
        index = ScanIndex.from_records(records)
        index.aggregate()
        return index

    printer.finish(len(records), time.perf_counter() - started)
    with timed("data sorted", progress_stream):
        index = ScanIndex.from_records(records)
    with timed("data accumulated", progress_stream):
        index.aggregate()
    return index


def measure(root: Path | str, workers: int, stream: TextIO) -> ScanIndex:
    """Measurement-only mode: scan and aggregate, then report the root total."""
    index = build_index(root, workers=workers, progress_stream=stream)
    stream.write(f"total {format_size(index.total_size())} ({index.total_size()} bytes)\n")
    stream.flush()
    return index


def render_listing(index: ScanIndex, path: Path | str, theme: UITheme) -> str:
    """Render the size-ranked children of ``path`` as plain terminal lines."""
    directory = Path(path)
    rows = index.list_children(directory)
    total = format_size(index.total_size(directory))
    out = [
        f"{theme.header}{display_name(str(directory))} {len(rows)}{theme.reset} "
        f"{theme.header_total}({total}){theme.reset}\n"
    ]
    for row in rows:
        name_color = theme.row_dir if row.is_dir else theme.row_file
        suffix = "/" if row.is_dir else ""
        out.append(
            f"{theme.row_size}{format_size(row.size):>10}{theme.reset} "
            f"{name_color}{display_name(row.name)}{suffix}{theme.reset}\n"
        )
    return "".join(out)


__all__ = ["build_index", "measure", "render_listing"]
