"""Frame timer measuring the time between updates."""

from __future__ import annotations

import time
from typing import Callable


class FrameTimer:
    """Tracks the elapsed seconds between successive calls to update()."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.delta_time = 0.0
        self._last = clock()

    def start(self) -> None:
        """Restart measuring from now."""
        self._last = self._clock()

    def update(self) -> float:
        """Record and return the seconds since the previous update."""
        now = self._clock()
        self.delta_time = now - self._last
        self._last = now
        return self.delta_time