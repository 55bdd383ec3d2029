"""The seven tetromino shapes."""

from enum import Enum


class TetrominoType(Enum):
    """Kind of tetromino; the value is its column in the block texture."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    Z = 3
    S = 4
    J = 5
    L = 6