"""Scanning and size-aggregation core.

This package contains the non-UI disk usage model:
- entry records and the tri-state steal result
- component-wise path keys that keep subtrees contiguous
- the work-stealing deque and the concurrent scanner built on it
- the sorted scan index with aggregation and child queries
"""

from __future__ import annotations

from .types import ChildRow, EntryRecord, Steal, StealOutcome
from .paths import is_descendant, path_depth, path_sort_key
from .deque import WorkStealingDeque
from .scanner import DEFAULT_WORKER_COUNT, ScanRootError, resolve_scan_root, scan
from .index import ScanIndex, aggregate, list_children

__all__ = [
    "ChildRow",
    "EntryRecord",
    "Steal",
    "StealOutcome",
    "is_descendant",
    "path_depth",
    "path_sort_key",
    "WorkStealingDeque",
    "DEFAULT_WORKER_COUNT",
    "ScanRootError",
    "resolve_scan_root",
    "scan",
    "ScanIndex",
    "aggregate",
    "list_children",
]
