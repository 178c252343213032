"""Concurrent filesystem scanner producing unordered entry records.

A fixed pool of worker threads walks the tree. Each worker owns a
``WorkStealingDeque`` of directories still to expand and steals from its peers
when its own deque runs dry. Symlinks and entries on another device are never
recorded or traversed, and listing or stat failures only skip the affected
directory or entry.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
import time
from collections.abc import Callable
from pathlib import Path

from .deque import WorkStealingDeque
from .paths import path_depth
from .types import EntryRecord, StealOutcome

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = 16
PROGRESS_EVERY = 100
IDLE_BACKOFF_SECONDS = 0.0005


def _device_id(st: os.stat_result) -> int:
    return st.st_dev


class ScanRootError(Exception):
    """Raised when the scan root is missing, unresolvable, or not a directory."""


def resolve_scan_root(root: Path | str) -> Path:
    """Return ``root`` as an absolute, symlink-free directory path."""
    try:
        resolved = Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ScanRootError(f"cannot resolve {root}: {exc}") from exc
    if not resolved.is_dir():
        raise ScanRootError(f"not a directory: {resolved}")
    return resolved


class _ProgressCounter:
    """Thread-safe running total reported to an optional callback."""

    def __init__(self, callback: Callable[[int], None] | None) -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._count = 0

    def add(self, amount: int) -> None:
        if self._callback is None:
            return
        with self._lock:
            self._count += amount
            count = self._count
        self._callback(count)


class _ScanWorker:
    """One scanning thread with a private deque and private result buffer."""

    def __init__(
        self,
        index: int,
        root_device: int,
        progress: _ProgressCounter,
        progress_every: int,
        dir_inode_sizes: bool,
    ) -> None:
        self.index = index
        self.queue = WorkStealingDeque()
        self.peers: list[_ScanWorker] = []
        self.records: list[EntryRecord] = []
        self.busy = False
        self.error: BaseException | None = None
        self._root_device = root_device
        self._progress = progress
        self._progress_every = max(1, progress_every)
        self._dir_inode_sizes = dir_inode_sizes

    def run(self) -> None:
        try:
            while True:
                path = self._next_path()
                if path is None:
                    return
                self._expand(path)
        except BaseException as exc:
            self.error = exc
        finally:
            self.busy = False

    def _next_path(self) -> str | None:
        """Pop local work, else steal; ``None`` once every peer is quiescent."""
        while True:
            self.busy = True
            path = self.queue.pop()
            if path is not None:
                return path

            self.busy = False
            peer_busy = False
            for peer in self.peers:
                attempt = peer.queue.steal_settled()
                if attempt.outcome is StealOutcome.SUCCESS:
                    self.busy = True
                    return attempt.value
                peer_busy = peer_busy or peer.busy
            if not peer_busy:
                return None
            time.sleep(IDLE_BACKOFF_SECONDS)

    def _expand(self, directory: str) -> None:
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    self._visit(entry)
        except OSError as exc:
            logger.debug("cannot list %s: %s", directory, exc)

    def _visit(self, entry: os.DirEntry) -> None:
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as exc:
            logger.debug("skipping %s: %s", entry.path, exc)
            return
        if stat.S_ISLNK(st.st_mode) or _device_id(st) != self._root_device:
            return

        is_dir = stat.S_ISDIR(st.st_mode)
        if is_dir:
            size = int(st.st_size) if self._dir_inode_sizes else 0
        else:
            size = int(st.st_size)
        self.records.append(EntryRecord(entry.path, path_depth(entry.path), size, is_dir))
        if len(self.records) % self._progress_every == 0:
            self._progress.add(self._progress_every)
        if is_dir:
            self.queue.push(entry.path)


def scan(
    root: Path | str,
    *,
    workers: int = DEFAULT_WORKER_COUNT,
    on_progress: Callable[[int], None] | None = None,
    progress_every: int = PROGRESS_EVERY,
    dir_inode_sizes: bool = False,
) -> list[EntryRecord]:
    """Scan ``root`` and return unordered records for it and every reachable descendant.

    ``on_progress`` receives the running record count from worker threads every
    ``progress_every`` records. Directory records carry size 0 unless
    ``dir_inode_sizes`` is set, in which case they start at the directory
    inode's own ``st_size``.

    Raises ``ScanRootError`` before any worker starts when ``root`` is unusable.
    """
    if workers < 1:
        raise ValueError("workers must be >= 1")
    resolved_root = resolve_scan_root(root)
    root_path = os.fspath(resolved_root)
    try:
        root_stat = os.stat(root_path)
    except OSError as exc:
        raise ScanRootError(f"cannot stat {root_path}: {exc}") from exc

    progress = _ProgressCounter(on_progress)
    pool = [
        _ScanWorker(
            index,
            root_device=_device_id(root_stat),
            progress=progress,
            progress_every=progress_every,
            dir_inode_sizes=dir_inode_sizes,
        )
        for index in range(workers)
    ]
    for worker in pool:
        # Start each rotation just after the worker itself so steals spread out.
        worker.peers = pool[worker.index + 1 :] + pool[: worker.index]
    pool[0].queue.push(root_path)

    threads = [
        threading.Thread(target=worker.run, name=f"lazydu-scan-{worker.index}", daemon=True)
        for worker in pool
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for worker in pool:
        if worker.error is not None:
            raise worker.error

    root_size = int(root_stat.st_size) if dir_inode_sizes else 0
    records = [EntryRecord(root_path, path_depth(root_path), root_size, True)]
    for worker in pool:
        records.extend(worker.records)
    logger.debug("scanned %d entries under %s with %d workers", len(records), root_path, workers)
    return records


__all__ = [
    "DEFAULT_WORKER_COUNT",
    "PROGRESS_EVERY",
    "ScanRootError",
    "resolve_scan_root",
    "scan",
]
