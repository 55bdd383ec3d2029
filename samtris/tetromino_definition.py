"""Shapes of the tetrominoes in each of their rotations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from samtris.position import Position
from samtris.rotation_index import RotationIndex
from samtris.tetromino_type import TetrominoType

Matrix = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class TetrominoDefinition:
    """A tetromino type and one block matrix per rotation."""

    tetromino_type: TetrominoType
    rotations: tuple[Matrix, ...]

    def __init__(
        self,
        tetromino_type: TetrominoType,
        rotations: Sequence[Sequence[Sequence[int]]],
    ) -> None:
        object.__setattr__(self, "tetromino_type", tetromino_type)
        object.__setattr__(
            self,
            "rotations",
            tuple(tuple(tuple(row) for row in matrix) for matrix in rotations),
        )

    @property
    def nr_rotations(self) -> int:
        """Number of distinct rotations."""
        return len(self.rotations)

    @classmethod
    def create_o(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.O,
            [
                [[0, 0, 0, 0], [0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]],
            ],
        )

    @classmethod
    def create_i(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.I,
            [
                [[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
                [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
            ],
        )

    @classmethod
    def create_z(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.Z,
            [
                [[0, 0, 0, 0], [1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]],
                [[0, 1, 0, 0], [1, 1, 0, 0], [1, 0, 0, 0], [0, 0, 0, 0]],
            ],
        )

    @classmethod
    def create_s(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.S,
            [
                [[0, 0, 0, 0], [0, 1, 1, 0], [1, 1, 0, 0], [0, 0, 0, 0]],
                [[1, 0, 0, 0], [1, 1, 0, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
            ],
        )

    @classmethod
    def create_t(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.T,
            [
                [[0, 0, 0, 0], [0, 1, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0]],
                [[0, 0, 0, 0], [0, 1, 0, 0], [0, 1, 1, 0], [0, 1, 0, 0]],
                [[0, 0, 0, 0], [0, 0, 0, 0], [1, 1, 1, 0], [0, 1, 0, 0]],
                [[0, 0, 0, 0], [0, 1, 0, 0], [1, 1, 0, 0], [0, 1, 0, 0]],
            ],
        )

    @classmethod
    def create_j(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.J,
            [
                [[0, 0, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [1, 1, 0, 0]],
                [[0, 0, 0, 0], [1, 0, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0]],
                [[0, 0, 0, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
                [[0, 0, 0, 0], [0, 0, 0, 0], [1, 1, 1, 0], [0, 0, 1, 0]],
            ],
        )

    @classmethod
    def create_l(cls) -> TetrominoDefinition:
        return cls(
            TetrominoType.L,
            [
                [[0, 0, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 1, 0]],
                [[0, 0, 0, 0], [0, 0, 0, 0], [1, 1, 1, 0], [1, 0, 0, 0]],
                [[0, 0, 0, 0], [1, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
                [[0, 0, 0, 0], [0, 0, 1, 0], [1, 1, 1, 0], [0, 0, 0, 0]],
            ],
        )

    def has_block_at(self, position: Position, rotation_index: RotationIndex) -> bool:
        """Return whether the given rotation has a block at the local ``position``.

        Out-of-range rotations and positions simply have no block.
        """
        index = int(rotation_index)
        if index >= len(self.rotations):
            return False
        if position.x < 0 or position.y < 0:
            return False
        matrix = self.rotations[index]
        if position.y >= len(matrix) or position.x >= len(matrix[position.y]):
            return False
        return matrix[position.y][position.x] != 0

    def block_positions(self, rotation: RotationIndex) -> list[Position]:
        """Return the local positions of all blocks, row by row.

        Raises IndexError if the rotation does not exist for this shape.
        """
        index = int(rotation)
        if index >= len(self.rotations):
            raise IndexError(
                f"Rotation index out of bounds: got {index}, "
                f"expected [0..{len(self.rotations)})"
            )
        return [
            Position(x, y)
            for y, row in enumerate(self.rotations[index])
            for x, cell in enumerate(row)
            if cell != 0
        ]