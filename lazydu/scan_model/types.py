"""Domain datatypes for scanned filesystem entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(slots=True)
class EntryRecord:
    """One scanned filesystem object.

    ``size`` is the byte length for files. For directories it starts as the
    directory's own size and is replaced in place by the aggregation pass with
    the total of its whole subtree.
    """

    path: str
    depth: int
    size: int
    is_dir: bool


@dataclass(frozen=True)
class ChildRow:
    """One immediate child of a browsed directory with its aggregated size."""

    name: str
    path: Path
    size: int
    is_dir: bool


class StealOutcome(Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    RETRY = "retry"


@dataclass(frozen=True)
class Steal:
    """Result of a steal attempt; ``value`` is set only on ``SUCCESS``."""

    outcome: StealOutcome
    value: str | None = None


__all__ = [
    "EntryRecord",
    "ChildRow",
    "StealOutcome",
    "Steal",
]
