"""Width and height of a rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass

from samtris.position import Position


@dataclass(frozen=True)
class Dimensions:
    """Size of a grid in blocks."""

    width: int
    height: int

    def contains(self, position: Position) -> bool:
        """Return whether ``position`` lies inside the grid."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height