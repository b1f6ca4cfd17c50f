"""Simple wall-clock timer for reporting how long operations take."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures the time between start() and end() in milliseconds."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start: int | None = None
        self.last_result = 0.0

    def start(self) -> None:
        """Begin a measurement."""
        self._start = self._clock()

    def end(self, op_name: str = "X", output: bool = True) -> float:
        """Finish the measurement and return milliseconds elapsed.

        Without a running measurement the previous result is returned.
        """
        if self._start is None:
            return self.last_result
        elapsed_us = (self._clock() - self._start) // 1000
        ms = elapsed_us * 0.001
        self.last_result = ms
        if output:
            print(f"{op_name} took {ms:g} ms")
        self._start = None
        return ms