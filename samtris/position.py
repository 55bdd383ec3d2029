"""Two-dimensional grid positions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A position in the game's coordinate system (x: left to right, y: top to bottom)."""

    x: int
    y: int

    @classmethod
    def origin(cls) -> Position:
        """Return the position (0, 0)."""
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Position:
        """Build a position from an ``(x, y)`` pair."""
        x, y = value
        return cls(x, y)

    def as_tuple(self) -> tuple[int, int]:
        """Return the position as an ``(x, y)`` pair."""
        return (self.x, self.y)

    def manhattan_distance(self, other: Position) -> int:
        """Return the sum of the absolute coordinate differences."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def translate(self, dx: int, dy: int) -> Position:
        """Return this position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)

    def scale(self, factor: int) -> Position:
        """Return this position with both coordinates multiplied by ``factor``."""
        return Position(self.x * factor, self.y * factor)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)