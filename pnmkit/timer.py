"""Stopwatch with microsecond resolution."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures the time between ``start()`` and ``stop()``.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start = 0
        self._end = 0
        self._running = False

    def start(self) -> None:
        self._start = self._clock()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._end = self._clock()
            self._running = False

    def reset(self) -> None:
        """Mark the timer as stopped; the recorded time points are kept."""
        self._running = False

    def is_running(self) -> bool:
        return self._running

    def _micros_until(self, until: int) -> int:
        nanos = until - self._start
        micros = abs(nanos) // 1000
        return micros if nanos >= 0 else -micros

    def elapsed_microseconds(self) -> int:
        """Whole microseconds up to now if running, else up to the last stop."""
        until = self._clock() if self._running else self._end
        return self._micros_until(until)

    def elapsed_milliseconds(self) -> float:
        return self.elapsed_microseconds() / 1000.0

    def elapsed_seconds(self) -> float:
        return self.elapsed_milliseconds() / 1000.0

    def current_elapsed_milliseconds(self) -> float:
        """Time since start while running; 0.0 when stopped."""
        if not self._running:
            return 0.0
        return self._micros_until(self._clock()) / 1000.0

    def current_elapsed_seconds(self) -> float:
        return self.current_elapsed_milliseconds() / 1000.0

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()