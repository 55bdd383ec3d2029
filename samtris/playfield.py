"""The grid of locked blocks that tetrominoes fall into."""

from __future__ import annotations

from samtris.dimensions import Dimensions
from samtris.position import Position
from samtris.tetromino_instance import TetrominoInstance
from samtris.tetromino_type import TetrominoType

Cell = TetrominoType | None


class Playfield:
    """A rectangular grid where each cell is empty or holds a locked block."""

    def __init__(self, dimensions: Dimensions) -> None:
        self.dimensions = dimensions
        self._grid: list[list[Cell]] = self._empty_grid()

    def _empty_grid(self) -> list[list[Cell]]:
        return [[None] * self.dimensions.width for _ in range(self.dimensions.height)]

    def tetromino_type_at(self, position: Position) -> TetrominoType | None:
        """Return the type of the block at ``position``, or None if empty or outside."""
        if not self.dimensions.contains(position):
            return None
        return self._grid[position.y][position.x]

    def is_position_occupied(self, position: Position) -> bool:
        """Return whether a block is locked at ``position``; outside is never occupied."""
        return self.tetromino_type_at(position) is not None

    def lock_tetromino(self, tetromino: TetrominoInstance) -> None:
        """Store the tetromino's blocks in the grid, ignoring blocks outside it."""
        for position in tetromino.world_blocks():
            if self.dimensions.contains(position):
                self._grid[position.y][position.x] = tetromino.tetromino_type

    def can_place_tetromino(self, tetromino: TetrominoInstance) -> bool:
        """Return whether every block of the tetromino is inside and on an empty cell."""
        return all(
            self.dimensions.contains(position) and not self.is_position_occupied(position)
            for position in tetromino.world_blocks()
        )

    def find_full_lines(self) -> list[int]:
        """Return the row indices, top to bottom, of rows with no empty cell."""
        return [
            y for y, row in enumerate(self._grid) if all(cell is not None for cell in row)
        ]

    def clear(self) -> None:
        """Remove every locked block."""
        self._grid = self._empty_grid()