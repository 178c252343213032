"""Per-worker double-ended queue with owner and thief ends."""

from __future__ import annotations

import threading
import time
from collections import deque

from .types import Steal, StealOutcome


class WorkStealingDeque:
    """Owner pushes and pops at the bottom (LIFO); peers steal from the top.

    A thief never blocks on the internal lock: when the owner or another thief
    holds it, ``steal`` reports ``RETRY`` instead of ``EMPTY``.
    """

    def __init__(self) -> None:
        self._items: deque[str] = deque()
        self._lock = threading.Lock()

    def push(self, item: str) -> None:
        with self._lock:
            self._items.append(item)

    def pop(self) -> str | None:
        """Take the most recently pushed item, or ``None`` when empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.pop()

    def steal(self) -> Steal:
        """Try once to take the oldest item without waiting on contention."""
        if not self._lock.acquire(blocking=False):
            return Steal(StealOutcome.RETRY)
        try:
            if not self._items:
                return Steal(StealOutcome.EMPTY)
            return Steal(StealOutcome.SUCCESS, self._items.popleft())
        finally:
            self._lock.release()

    def steal_settled(self) -> Steal:
        """Repeat ``steal`` until it yields an item or reports empty."""
        while True:
            attempt = self.steal()
            if attempt.outcome is not StealOutcome.RETRY:
                return attempt
            # Let the lock holder run before trying again.
            time.sleep(0)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["WorkStealingDeque"]
