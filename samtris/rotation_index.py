"""Cyclic rotation counter for a tetromino."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RotationIndex:
    """Index of the current rotation, wrapping around ``nr_rotations``."""

    index: int
    nr_rotations: int

    def rotate_clockwise(self) -> None:
        """Advance to the next rotation, wrapping to zero."""
        self.index = (self.index + 1) % self.nr_rotations

    def rotate_counterclockwise(self) -> None:
        """Go back to the previous rotation, wrapping to the last."""
        self.index = (self.index + self.nr_rotations - 1) % self.nr_rotations

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index