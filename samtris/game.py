"""Game rules: spawning, moving, gravity, locking and drawing."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

from samtris.color import Color
from samtris.constants import (
    BLOCK_SIZE,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_OFFSET_X,
    PLAYFIELD_OFFSET_Y,
    PLAYFIELD_WIDTH,
    TETRIS_SPAWN_X,
    TETRIS_SPAWN_Y,
)
from samtris.display import Display
from samtris.events import GameInput, GameState
from samtris.generators import TetrominoGenerator
from samtris.gravity_timer import GravityTimer
from samtris.playfield import Playfield
from samtris.position import Position
from samtris.renderer import PlayfieldRenderer
from samtris.tetromino_instance import TetrominoInstance

_GAME_OVER_WIDTH = 100
_GAME_OVER_HEIGHT = 50

_MOVES: dict[GameInput, Callable[[TetrominoInstance], None]] = {
    GameInput.MOVE_LEFT: TetrominoInstance.move_left,
    GameInput.MOVE_RIGHT: TetrominoInstance.move_right,
    GameInput.ROTATE_CLOCKWISE: TetrominoInstance.rotate_clockwise,
    GameInput.ROTATE_COUNTERCLOCKWISE: TetrominoInstance.rotate_counterclockwise,
}


class Game:
    """A single game of falling tetrominoes on a playfield."""

    def __init__(self, playfield: Playfield, tetromino_generator: TetrominoGenerator) -> None:
        self._playfield = playfield
        self._current_tetromino: TetrominoInstance | None = None
        self._gravity_timer = GravityTimer(0)
        self._renderer = PlayfieldRenderer()
        self._tetromino_generator = tetromino_generator
        self._game_state = GameState.PLAYING

    @property
    def game_state(self) -> GameState:
        """Whether the game is running or over."""
        return self._game_state

    @property
    def current_tetromino(self) -> TetrominoInstance | None:
        """The falling tetromino, if one has been spawned."""
        return self._current_tetromino

    @property
    def playfield(self) -> Playfield:
        """The grid of locked blocks."""
        return self._playfield

    def spawn_tetromino(self) -> bool:
        """Spawn a new tetromino at the spawn position.

        Returns False and ends the game if it does not fit.
        """
        position = Position(TETRIS_SPAWN_X, TETRIS_SPAWN_Y)
        tetromino = self._tetromino_generator.generate(position)
        if not self._playfield.can_place_tetromino(tetromino):
            self._game_state = GameState.GAME_OVER
            return False
        self._current_tetromino = tetromino
        return True

    def handle_input(self, game_input: GameInput) -> bool:
        """Apply a player input; return True if the tetromino moved."""
        if game_input is GameInput.START_GAME:
            self._start_game()
            return True
        if game_input is GameInput.MOVE_DOWN:
            has_moved = self._try_move_piece(TetrominoInstance.move_down)
            if has_moved:
                self._gravity_timer.reset()
            else:
                self._lock_tetromino()
            return has_moved
        if game_input is GameInput.DROP:
            self._hard_drop_tetromino()
            return True
        return self._try_move_piece(_MOVES[game_input])

    def draw(self, display: Display) -> None:
        """Draw the whole frame and present it."""
        display.clear()
        self._renderer.draw(self._playfield, self._current_tetromino, display)
        if self._game_state is GameState.GAME_OVER:
            self.draw_game_over(display)
        display.present()

    def draw_game_over(self, display: Display) -> None:
        """Draw the game-over marker centred on the playfield."""
        x = PLAYFIELD_OFFSET_X + (PLAYFIELD_WIDTH * BLOCK_SIZE - _GAME_OVER_WIDTH) // 2
        y = PLAYFIELD_OFFSET_Y + (PLAYFIELD_HEIGHT * BLOCK_SIZE - _GAME_OVER_HEIGHT) // 2
        display.draw_rectangle(x, y, _GAME_OVER_WIDTH, _GAME_OVER_HEIGHT, Color.RED)

    def update(self, delta_time: timedelta) -> None:
        """Advance time; apply gravity when the gravity timer fires."""
        if (
            self._game_state is GameState.PLAYING
            and self._current_tetromino is not None
            and self._gravity_timer.update(delta_time)
        ):
            self._apply_gravity()

    def _hard_drop_tetromino(self) -> None:
        while self._try_move_piece(TetrominoInstance.move_down):
            pass
        self._lock_tetromino()

    def _try_move_piece(self, move: Callable[[TetrominoInstance], None]) -> bool:
        if self._current_tetromino is None:
            return False
        moved = self._current_tetromino.copy()
        move(moved)
        if self._playfield.can_place_tetromino(moved):
            self._current_tetromino = moved
            return True
        return False

    def _apply_gravity(self) -> None:
        if not self._try_move_piece(TetrominoInstance.move_down):
            self._lock_tetromino()

    def _lock_tetromino(self) -> None:
        if self._current_tetromino is None:
            raise RuntimeError("there is no current tetromino to lock")
        self._playfield.lock_tetromino(self._current_tetromino)
        self.spawn_tetromino()
        self._gravity_timer.reset()

    def _start_game(self) -> None:
        self._playfield.clear()
        self.spawn_tetromino()
        self._game_state = GameState.PLAYING