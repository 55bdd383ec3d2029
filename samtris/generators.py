"""Sources of new tetrominoes."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from samtris.position import Position
from samtris.tetromino_definitions import TetrominoDefinitions
from samtris.tetromino_instance import TetrominoInstance
from samtris.tetromino_type import TetrominoType


class TetrominoGenerator(ABC):
    """Produces the next tetromino to enter the playfield."""

    @abstractmethod
    def generate(self, position: Position) -> TetrominoInstance:
        """Return a new tetromino at ``position``."""


class FixedTetrominoGenerator(TetrominoGenerator):
    """Always produces the same tetromino type."""

    def __init__(self, tetromino_type: TetrominoType) -> None:
        self.tetromino_type = tetromino_type
        self._definitions = TetrominoDefinitions()

    def generate(self, position: Position) -> TetrominoInstance:
        return TetrominoInstance(self.tetromino_type, position, self._definitions)


class RandomTetrominoGenerator(TetrominoGenerator):
    """Produces tetromino types chosen uniformly at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._definitions = TetrominoDefinitions()
        self._types = list(TetrominoType)

    def generate(self, position: Position) -> TetrominoInstance:
        tetromino_type = self._rng.choice(self._types)
        return TetrominoInstance(tetromino_type, position, self._definitions)