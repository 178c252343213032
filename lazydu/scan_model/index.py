"""Flattened, path-sorted scan index with in-place size aggregation.

Records are sorted by component key so that every directory is followed by one
contiguous run holding exactly its descendants. That layout lets aggregation
run as a single reverse pass, and lets subtree and child lookups use binary
search instead of walking a tree.
"""

from __future__ import annotations

import logging
import os
from bisect import bisect_left
from collections.abc import Iterable
from operator import itemgetter
from pathlib import Path

from .paths import PathKey, key_is_descendant, path_sort_key
from .types import ChildRow, EntryRecord

logger = logging.getLogger(__name__)


class ScanIndex:
    """Sorted scan result plus lookup, aggregation, and child-listing queries."""

    def __init__(self, records: list[EntryRecord], keys: list[PathKey]) -> None:
        """Wrap already sorted ``records`` with their matching ``keys``.

        Use ``from_records`` to build an index from unordered scan output.
        """
        if not records:
            raise ValueError("scan index needs at least the root record")
        self.records = records
        self.keys = keys
        self.aggregated = False

    @classmethod
    def from_records(cls, records: Iterable[EntryRecord]) -> "ScanIndex":
        """Sort unordered records by path component key."""
        pairs = [(path_sort_key(record.path), record) for record in records]
        pairs.sort(key=itemgetter(0))
        keys = [key for key, _record in pairs]
        sorted_records = [record for _key, record in pairs]
        return cls(sorted_records, keys)

    @property
    def root(self) -> EntryRecord:
        return self.records[0]

    def __len__(self) -> int:
        return len(self.records)

    def locate(self, path: str | Path) -> int:
        """Return the index of the record whose path is exactly ``path``.

        Asking for a path that was never scanned is a caller bug and raises
        ``LookupError``.
        """
        key = path_sort_key(os.fspath(path))
        position = bisect_left(self.keys, key)
        if position >= len(self.keys) or self.keys[position] != key:
            raise LookupError(f"path was not scanned: {path}")
        return position

    def _subtree_end(self, position: int) -> int:
        """Return one past the last descendant of the record at ``position``."""
        ancestor = self.keys[position]
        # Descendants are contiguous, so "is outside the subtree" flips exactly once.
        return bisect_left(
            self.keys,
            True,
            lo=position + 1,
            key=lambda key: not key_is_descendant(key, ancestor),
        )

    def subtree_range(self, path: str | Path) -> range:
        """Return the index range covering ``path`` and all of its descendants."""
        start = self.locate(path)
        return range(start, self._subtree_end(start))

    def aggregate(self) -> None:
        """Fold every directory's descendant sizes into its own ``size`` in place.

        Walks records in reverse path order keeping one running sum per depth.
        When the depth drops, the current record is the directory that closes
        the deeper run, so that run's sum is added to it and cleared. The
        per-depth sums grow on demand, so there is no maximum depth. Calling
        this a second time is a no-op.
        """
        if self.aggregated:
            return
        sums: list[int] = []
        previous_depth = 0
        for record in reversed(self.records):
            depth = record.depth
            if depth >= len(sums):
                sums.extend([0] * (depth + 1 - len(sums)))
            if depth < previous_depth:
                record.size += sums[previous_depth]
                sums[previous_depth] = 0
            sums[depth] += record.size
            previous_depth = depth
        self.aggregated = True
        logger.debug("aggregated %d records, root total %d", len(self.records), self.root.size)

    def child_positions(self, path: str | Path) -> list[int]:
        """Return record positions of the immediate children of ``path``.

        Whole descendant runs of child directories are skipped with a binary
        search, so the cost follows the fan-out rather than the subtree size.
        """
        start = self.locate(path)
        end = self._subtree_end(start)
        positions: list[int] = []
        position = start + 1
        while position < end:
            positions.append(position)
            if self.records[position].is_dir:
                position = self._subtree_end(position)
            else:
                position += 1
        return positions

    def list_children(self, path: str | Path) -> list[ChildRow]:
        """Return immediate children of ``path`` ordered largest first.

        Ties are broken by name so repeated calls give the same order.
        """
        rows: list[ChildRow] = []
        for position in self.child_positions(path):
            record = self.records[position]
            rows.append(
                ChildRow(
                    name=self.keys[position][-1],
                    path=Path(record.path),
                    size=record.size,
                    is_dir=record.is_dir,
                )
            )
        rows.sort(key=lambda row: (-row.size, row.name))
        return rows

    def total_size(self, path: str | Path | None = None) -> int:
        """Return the aggregated size of ``path``, defaulting to the scan root."""
        if path is None:
            return self.root.size
        return self.records[self.locate(path)].size


def aggregate(index: ScanIndex) -> ScanIndex:
    """Aggregate ``index`` in place and return it."""
    index.aggregate()
    return index


def list_children(index: ScanIndex, path: str | Path) -> list[ChildRow]:
    """Return the size-ranked immediate children of ``path`` in ``index``."""
    return index.list_children(path)


__all__ = [
    "ScanIndex",
    "aggregate",
    "list_children",
]
