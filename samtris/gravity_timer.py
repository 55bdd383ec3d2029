"""Timer that decides when the falling tetromino drops one line."""

from __future__ import annotations

from datetime import timedelta

GRAVITY_FRAMES = (53, 49, 45, 41, 37, 33, 28, 22, 17, 11, 10, 9, 8, 7, 6, 6, 5, 5, 4, 4, 3)
FRAME_DURATION_MS = 16  # ~60 FPS


def _cap_level(level: int) -> int:
    return min(level, len(GRAVITY_FRAMES) - 1)


class GravityTimer:
    """Accumulates elapsed time and fires once per level-dependent interval."""

    def __init__(self, level: int) -> None:
        self.time_since_last_drop = timedelta(0)
        self._level = _cap_level(level)

    @property
    def level(self) -> int:
        """Current level, capped at the highest defined level."""
        return self._level

    @level.setter
    def level(self, level: int) -> None:
        self._level = _cap_level(level)

    @property
    def interval(self) -> timedelta:
        """Time between drops at the current level."""
        return timedelta(milliseconds=GRAVITY_FRAMES[self._level] * FRAME_DURATION_MS)

    def update(self, delta_time: timedelta) -> bool:
        """Add ``delta_time``; return True if the tetromino should drop a line."""
        self.time_since_last_drop += delta_time
        if self.time_since_last_drop >= self.interval:
            self.time_since_last_drop = timedelta(0)
            return True
        return False

    def reset(self) -> None:
        """Discard accumulated time."""
        self.time_since_last_drop = timedelta(0)