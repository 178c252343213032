"""Path keys shared by the scanner and the flattened index.

Paths are compared component by component rather than as raw strings. With
tuple ordering a shorter key sorts before any key it prefixes, so a directory
is immediately followed by all of its descendants regardless of which
characters appear in file names (``/a/b`` and ``/a-b`` cannot interleave).
"""

from __future__ import annotations

import os

PathKey = tuple[str, ...]


def path_sort_key(path: str) -> PathKey:
    """Return the component tuple used to order scanned paths."""
    return tuple(part for part in path.split(os.sep) if part)


def depth_for_key(key: PathKey) -> int:
    """Return component count from the filesystem root, counting the root itself."""
    return len(key) + 1


def path_depth(path: str) -> int:
    """Return the depth of an absolute path (``/`` is 1, ``/a`` is 2)."""
    return depth_for_key(path_sort_key(path))


def key_is_descendant(key: PathKey, ancestor: PathKey) -> bool:
    """Return whether ``key`` lies strictly below ``ancestor``."""
    return len(key) > len(ancestor) and key[: len(ancestor)] == ancestor


def is_descendant(path: str, ancestor: str) -> bool:
    """Component-wise descendant test, so ``/a`` is not an ancestor of ``/ab``."""
    return key_is_descendant(path_sort_key(path), path_sort_key(ancestor))


__all__ = [
    "PathKey",
    "path_sort_key",
    "depth_for_key",
    "path_depth",
    "key_is_descendant",
    "is_descendant",
]
