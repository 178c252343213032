"""Tests for component-wise path keys and descendant checks."""

from __future__ import annotations

import unittest

from lazydu.scan_model import is_descendant, path_depth, path_sort_key


class PathKeyTests(unittest.TestCase):
    def test_depth_counts_components_from_filesystem_root(self) -> None:
        self.assertEqual(path_depth("/"), 1)
        self.assertEqual(path_depth("/a"), 2)
        self.assertEqual(path_depth("/a/b/c.txt"), 4)

    def test_directory_sorts_before_siblings_whose_names_sort_below_separator(self) -> None:
        # "-" (0x2d), "." (0x2e) and " " (0x20) sort below "/" (0x2f) as raw strings.
        paths = ["/a-b", "/a/b", "/a", "/a.txt", "/a b", "/a/b/c"]
        ordered = sorted(paths, key=path_sort_key)
        self.assertEqual(ordered[:3], ["/a", "/a/b", "/a/b/c"])
        self.assertLess(sorted(paths).index("/a-b"), sorted(paths).index("/a/b"))

    def test_is_descendant_uses_whole_components(self) -> None:
        self.assertTrue(is_descendant("/a/b", "/a"))
        self.assertTrue(is_descendant("/a/b/c", "/a"))
        self.assertFalse(is_descendant("/ab", "/a"))
        self.assertFalse(is_descendant("/a", "/a"))
        self.assertTrue(is_descendant("/a", "/"))


if __name__ == "__main__":
    unittest.main()
