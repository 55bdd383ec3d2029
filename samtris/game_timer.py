"""Measures the time that passes between frames."""

from __future__ import annotations

import time
from datetime import timedelta


class GameTimer:
    """Reports the time elapsed since the previous call to :meth:`delta`."""

    def __init__(self) -> None:
        self._last_time = time.perf_counter_ns()

    def delta(self) -> timedelta:
        """Return the time since the last call (or since creation)."""
        current_time = time.perf_counter_ns()
        elapsed_ns = current_time - self._last_time
        self._last_time = current_time
        return timedelta(microseconds=elapsed_ns / 1000)