"""Thread-safe FIFO of player update snapshots."""

from __future__ import annotations

import threading
from collections import deque

from homerun.protocol import UpdateData


class PlayerQueue:
    """Holds recent updates of the other player, oldest first."""

    def __init__(self) -> None:
        self._items: deque[UpdateData] = deque()
        self._lock = threading.Lock()

    def enqueue(self, data: UpdateData) -> None:
        """Append a snapshot of data."""
        snapshot = data.copy()
        with self._lock:
            self._items.append(snapshot)

    def dequeue(self) -> UpdateData:
        """Remove and return the oldest entry."""
        with self._lock:
            if not self._items:
                raise IndexError("dequeue from an empty PlayerQueue")
            return self._items.popleft()

    def front(self) -> UpdateData:
        """Return a copy of the oldest entry."""
        with self._lock:
            if not self._items:
                raise IndexError("front of an empty PlayerQueue")
            item = self._items[0]
        return item.copy()

    def second(self) -> UpdateData:
        """Return a copy of the entry after the oldest one."""
        with self._lock:
            if len(self._items) < 2:
                raise IndexError("PlayerQueue holds fewer than two entries")
            item = self._items[1]
        return item.copy()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)