"""Millisecond stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Stopwatch measuring elapsed milliseconds; ``clock`` returns seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._stop = now
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def milliseconds_elapsed(self) -> float:
        end = self._clock() if self._running else self._stop
        return (end - self._start) * 1000.0

    def restart(self) -> None:
        """Start timing again from now, whether running or not."""
        self._running = True
        self._start = self._clock()

    def stop(self) -> bool:
        """Freeze the elapsed time; False if the timer was not running."""
        if not self._running:
            return False
        self._stop = self._clock()
        self._running = False
        return True

    def start(self) -> bool:
        """Begin timing from now; False if already running."""
        if self._running:
            return False
        self._start = self._clock()
        self._running = True
        return True