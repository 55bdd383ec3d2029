"""Lookup table of the shape definitions of every tetromino type."""

from __future__ import annotations

from samtris.tetromino_definition import TetrominoDefinition
from samtris.tetromino_type import TetrominoType


class TetrominoDefinitions:
    """Holds one definition for each tetromino type."""

    def __init__(self) -> None:
        self._definitions: dict[TetrominoType, TetrominoDefinition] = {
            TetrominoType.I: TetrominoDefinition.create_i(),
            TetrominoType.O: TetrominoDefinition.create_o(),
            TetrominoType.T: TetrominoDefinition.create_t(),
            TetrominoType.Z: TetrominoDefinition.create_z(),
            TetrominoType.S: TetrominoDefinition.create_s(),
            TetrominoType.J: TetrominoDefinition.create_j(),
            TetrominoType.L: TetrominoDefinition.create_l(),
        }

    def get(self, tetromino_type: TetrominoType) -> TetrominoDefinition:
        """Return the definition of ``tetromino_type``."""
        return self._definitions[tetromino_type]

    def __getitem__(self, tetromino_type: TetrominoType) -> TetrominoDefinition:
        return self.get(tetromino_type)