"""Tests for scan progress output and the session helpers built on it."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from lazydu.progress import ScanProgressPrinter, timed
from lazydu.session import build_index, render_listing
from lazydu.ui_theme import DEFAULT_THEME, PLAIN_THEME


class ProgressOutputTests(unittest.TestCase):
    def test_printer_reports_each_threshold_once(self) -> None:
        stream = io.StringIO()
        printer = ScanProgressPrinter(stream, report_every=100)
        for count in (50, 100, 150, 200, 260):
            printer(count)

        self.assertEqual(stream.getvalue(), " indexed 100\x1b[F\n indexed 200\x1b[F\n")

    def test_finish_and_timed_lines(self) -> None:
        stream = io.StringIO()
        printer = ScanProgressPrinter(stream)
        printer.finish(12345, 1.5)
        with timed("data sorted", stream):
            pass

        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "12,345 items indexed in 1.50s")
        self.assertTrue(lines[1].startswith("data sorted in "))


class SessionTests(unittest.TestCase):
    def test_build_index_without_progress_stream_is_silent_and_aggregated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "d").mkdir()
            (root / "d" / "f").write_bytes(b"x" * 64)

            index = build_index(root, workers=2)

            self.assertTrue(index.aggregated)
            self.assertEqual(index.total_size(), 64)
            self.assertEqual(index.total_size(root / "d"), 64)

    def test_render_listing_orders_children_largest_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").write_bytes(b"x" * 10)
            (root / "b").write_bytes(b"x" * 20)
            index = build_index(root, workers=1)

            lines = render_listing(index, root, PLAIN_THEME).splitlines()

            self.assertEqual(lines[0], f"{root} 2 (30 B)")
            self.assertEqual(lines[1], "      20 B b")
            self.assertEqual(lines[2], "      10 B a")

    def test_render_listing_colors_total_with_header_total(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").write_bytes(b"x" * 10)
            index = build_index(root, workers=1)

            header = render_listing(index, root, DEFAULT_THEME).splitlines()[0]

            self.assertEqual(
                header,
                f"{DEFAULT_THEME.header}{root} 1{DEFAULT_THEME.reset} "
                f"{DEFAULT_THEME.header_total}(10 B){DEFAULT_THEME.reset}",
            )


if __name__ == "__main__":
    unittest.main()
