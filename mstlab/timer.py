"""A simple millisecond stopwatch."""

import time
from typing import Callable


class Timer:
    """Measures elapsed wall time in whole milliseconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self._duration = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        """True between start() and stop()."""
        return self._running

    def start(self) -> None:
        """Start measuring; does nothing if already running."""
        if not self._running:
            self._start = self._clock()
            self._running = True

    def stop(self) -> None:
        """Stop measuring and record the elapsed time."""
        if not self._running:
            raise RuntimeError("timer is not running")
        self._duration = self._clock() - self._start
        self._running = False

    def reset(self) -> None:
        """Stop the timer and clear the recorded time."""
        self._running = False
        self._duration = 0.0

    def result(self) -> int:
        """Recorded time in whole milliseconds."""
        return int(self._duration * 1000)

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._running:
            self.stop()