"""A tetromino placed in the playfield with a position and a rotation."""

from __future__ import annotations

from samtris.position import Position
from samtris.rotation_index import RotationIndex
from samtris.tetromino_definition import TetrominoDefinition
from samtris.tetromino_definitions import TetrominoDefinitions
from samtris.tetromino_type import TetrominoType


class TetrominoInstance:
    """A tetromino of a given type at a position, in one of its rotations."""

    def __init__(
        self,
        tetromino_type: TetrominoType,
        position: Position,
        definitions: TetrominoDefinitions | None = None,
    ) -> None:
        if definitions is None:
            definitions = TetrominoDefinitions()
        self.tetromino_type = tetromino_type
        self.definition: TetrominoDefinition = definitions[tetromino_type]
        self.position = position
        self.rotation_index = RotationIndex(0, self.definition.nr_rotations)

    def world_blocks(self) -> list[Position]:
        """Return the playfield positions of the tetromino's blocks."""
        return [
            self.position + block
            for block in self.definition.block_positions(self.rotation_index)
        ]

    def copy(self) -> TetrominoInstance:
        """Return an independent copy of this instance."""
        clone = TetrominoInstance.__new__(TetrominoInstance)
        clone.tetromino_type = self.tetromino_type
        clone.definition = self.definition
        clone.position = self.position
        clone.rotation_index = RotationIndex(
            self.rotation_index.index, self.rotation_index.nr_rotations
        )
        return clone

    def move_down(self) -> None:
        self.position = self.position.translate(0, 1)

    def move_left(self) -> None:
        self.position = self.position.translate(-1, 0)

    def move_right(self) -> None:
        self.position = self.position.translate(1, 0)

    def rotate_clockwise(self) -> None:
        self.rotation_index.rotate_clockwise()

    def rotate_counterclockwise(self) -> None:
        self.rotation_index.rotate_counterclockwise()

    def __repr__(self) -> str:
        return (
            f"TetrominoInstance({self.tetromino_type.name}, {self.position!r}, "
            f"rotation={self.rotation_index.index})"
        )