"""Performance budget tests for sorting, aggregation, and child queries.

These tests use synthetic large inputs with conservative time budgets so
regressions are caught without depending on machine-specific microbenchmarks.
"""

from __future__ import annotations

import random
import time
import unittest

from lazydu.scan_model import EntryRecord, ScanIndex, path_depth


def _wide_records(dir_count: int, files_per_dir: int) -> list[EntryRecord]:
    records = [EntryRecord("/vol", path_depth("/vol"), 0, True)]
    for d_idx in range(dir_count):
        directory = f"/vol/pkg_{d_idx:04d}"
        records.append(EntryRecord(directory, 3, 0, True))
        for f_idx in range(files_per_dir):
            records.append(EntryRecord(f"{directory}/file_{f_idx:04d}.dat", 4, f_idx + 1, False))
    return records


class PerformanceBudgetTests(unittest.TestCase):
    def test_sort_and_aggregate_budget_for_large_scan(self) -> None:
        records = _wide_records(dir_count=500, files_per_dir=400)
        random.Random(7).shuffle(records)

        start = time.perf_counter()
        index = ScanIndex.from_records(records)
        index.aggregate()
        elapsed = time.perf_counter() - start

        per_dir_total = sum(range(1, 401))
        self.assertEqual(index.total_size(), 500 * per_dir_total)
        self.assertLess(elapsed, 10.0)

    def test_child_query_cost_follows_fan_out_not_subtree_size(self) -> None:
        index = ScanIndex.from_records(_wide_records(dir_count=500, files_per_dir=400))
        index.aggregate()

        start = time.perf_counter()
        for _ in range(20):
            rows = index.list_children("/vol")
        elapsed = time.perf_counter() - start

        self.assertEqual(len(rows), 500)
        self.assertLess(elapsed / 20, 0.05)


if __name__ == "__main__":
    unittest.main()
