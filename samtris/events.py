"""Game states, player inputs and the events the main loop handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class GameState(Enum):
    """Whether a game is running or has ended."""

    PLAYING = auto()
    GAME_OVER = auto()


class GameInput(Enum):
    """An action requested by the player."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_DOWN = auto()
    ROTATE_CLOCKWISE = auto()
    ROTATE_COUNTERCLOCKWISE = auto()
    DROP = auto()
    START_GAME = auto()


@dataclass(frozen=True)
class QuitEvent:
    """Request to leave the game."""


Event = Union[QuitEvent, GameInput]