"""Scan progress and phase timing output for the command line."""

from __future__ import annotations

import contextlib
import threading
import time
from typing import TextIO

from .sizes import commaify

PROGRESS_REPORT_EVERY = 10_000


class ScanProgressPrinter:
    """Print a running ``indexed N`` counter that rewrites its own line.

    Used as the scanner's ``on_progress`` callback, so it is called from worker
    threads and serializes its writes.
    """

    def __init__(self, stream: TextIO, report_every: int = PROGRESS_REPORT_EVERY) -> None:
        self._stream = stream
        self._report_every = max(1, report_every)
        self._lock = threading.Lock()
        self._last_reported = 0

    def __call__(self, count: int) -> None:
        with self._lock:
            if count - self._last_reported < self._report_every:
                return
            self._last_reported = count - (count % self._report_every)
            # Cursor back to the previous line so the counter updates in place.
            self._stream.write(f" indexed {commaify(self._last_reported)}\x1b[F\n")
            self._stream.flush()

    def finish(self, count: int, elapsed_seconds: float) -> None:
        with self._lock:
            self._stream.write(f"{commaify(count)} items indexed in {elapsed_seconds:.2f}s\n")
            self._stream.flush()


@contextlib.contextmanager
def timed(label: str, stream: TextIO):
    """Print ``label in X.XXs`` once the wrapped block finishes."""
    started = time.perf_counter()
    yield
    stream.write(f"{label} in {time.perf_counter() - started:.2f}s\n")
    stream.flush()


__all__ = ["PROGRESS_REPORT_EVERY", "ScanProgressPrinter", "timed"]
