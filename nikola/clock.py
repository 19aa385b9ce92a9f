"""Frame clock: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable, Optional

__all__ = ["Clock"]


class Clock:
    """Tracks the time between frames and the frame rate over each second."""

    def __init__(self, time_func: Optional[Callable[[], float]] = None) -> None:
        if time_func is None:
            start = time.perf_counter()
            time_func = lambda: time.perf_counter() - start  # noqa: E731
        self._time_func = time_func
        self._frame_count = 0
        self._last_frame_time = 0.0
        self._delta_time = 0.0
        self._fps = 0.0
        self._previous_time = 0.0
        self._current_time = 0.0

    def update(self) -> None:
        """Advance one frame."""
        now = self.time()
        self._delta_time = now - self._last_frame_time
        self._last_frame_time = now

        self._frame_count += 1
        self._current_time = now
        if self._current_time - self._previous_time >= 1.0:
            self._fps = float(self._frame_count)
            self._previous_time = self._current_time
            self._frame_count = 0

    def time(self) -> float:
        """Seconds since the clock started."""
        return self._time_func()

    def fps(self) -> float:
        return self._fps

    def delta_time(self) -> float:
        return self._delta_time