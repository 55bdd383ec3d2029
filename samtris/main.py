"""Window, event loop and keyboard handling for the game."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from samtris.constants import (
    BLOCK_SIZE,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
    WINDOW_HEIGHT_IN_BLOCKS,
    WINDOW_WIDTH_IN_BLOCKS,
)
from samtris.dimensions import Dimensions
from samtris.events import Event, GameInput, GameState, QuitEvent
from samtris.game import Game
from samtris.game_timer import GameTimer
from samtris.generators import RandomTetrominoGenerator
from samtris.playfield import Playfield
from samtris.pygame_display import PygameDisplay

DEFAULT_TEXTURE_PATH = "assets/blocks.png"
FRAME_TIME_SECONDS = 1 / 60

_PLAYING_KEYS: dict[int, Event] = {
    pygame.K_LEFT: GameInput.MOVE_LEFT,
    pygame.K_RIGHT: GameInput.MOVE_RIGHT,
    pygame.K_UP: GameInput.ROTATE_CLOCKWISE,
    pygame.K_x: GameInput.ROTATE_CLOCKWISE,
    pygame.K_DOWN: GameInput.MOVE_DOWN,
    pygame.K_z: GameInput.ROTATE_COUNTERCLOCKWISE,
    pygame.K_SPACE: GameInput.DROP,
    pygame.K_ESCAPE: QuitEvent(),
}

_RESTART_KEYS = frozenset({pygame.K_SPACE, pygame.K_RETURN, pygame.K_ESCAPE})


def translate_playing_event(event: pygame.event.Event) -> Event | None:
    """Map a pygame event received while playing to a game event, if any."""
    if event.type == pygame.QUIT:
        return QuitEvent()
    if event.type == pygame.KEYDOWN:
        return _PLAYING_KEYS.get(getattr(event, "key", None))
    return None


def translate_game_over_event(event: pygame.event.Event) -> Event | None:
    """Map a pygame event received after the game ended to a game event, if any."""
    if event.type == pygame.QUIT:
        return QuitEvent()
    if event.type == pygame.KEYDOWN and getattr(event, "key", None) in _RESTART_KEYS:
        return GameInput.START_GAME
    return None


def poll_events(game_state: GameState) -> list[Event]:
    """Drain pending pygame events and translate them for ``game_state``."""
    translate = (
        translate_playing_event
        if game_state is GameState.PLAYING
        else translate_game_over_event
    )
    translated = (translate(event) for event in pygame.event.get())
    return [event for event in translated if event is not None]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="samtris", description="Falling-blocks puzzle game.")
    parser.add_argument(
        "--texture",
        default=DEFAULT_TEXTURE_PATH,
        help="image holding one 16x16 block per tetromino type, side by side",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)

    pygame.init()
    try:
        window_size = (
            WINDOW_WIDTH_IN_BLOCKS * BLOCK_SIZE,
            WINDOW_HEIGHT_IN_BLOCKS * BLOCK_SIZE,
        )
        canvas = pygame.display.set_mode(window_size)
        pygame.display.set_caption("SAMTris")
        texture = pygame.image.load(args.texture).convert_alpha()

        display = PygameDisplay(canvas, BLOCK_SIZE, texture)
        playfield = Playfield(Dimensions(PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT))
        game = Game(playfield, RandomTetrominoGenerator())
        game.spawn_tetromino()

        game_timer = GameTimer()
        while True:
            game.update(game_timer.delta())

            for event in poll_events(game.game_state):
                if isinstance(event, QuitEvent):
                    return 0
                game.handle_input(event)

            game.draw(display)
            time.sleep(FRAME_TIME_SECONDS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())