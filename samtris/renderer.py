"""Draws the playfield, its border and the falling tetromino onto a display."""

from __future__ import annotations

from samtris.color import Color
from samtris.constants import (
    BLOCK_SIZE,
    PLAYFIELD_BORDER_WIDTH,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_OFFSET_X,
    PLAYFIELD_OFFSET_Y,
    PLAYFIELD_WIDTH,
)
from samtris.display import Display
from samtris.playfield import Playfield
from samtris.position import Position
from samtris.tetromino_instance import TetrominoInstance

_PLAYFIELD_ORIGIN = Position(PLAYFIELD_OFFSET_X, PLAYFIELD_OFFSET_Y)


def _to_window(position: Position) -> Position:
    """Convert a playfield block position to a window pixel position."""
    return _PLAYFIELD_ORIGIN + position.scale(BLOCK_SIZE)


class PlayfieldRenderer:
    """Renders a playfield and the current tetromino in window coordinates."""

    def draw(
        self,
        playfield: Playfield,
        current_tetromino: TetrominoInstance | None,
        display: Display,
    ) -> None:
        """Draw the border, the locked blocks and the current tetromino, if any."""
        self.draw_border(display)
        self._draw_playfield_blocks(playfield, display)
        self._draw_current_tetromino(current_tetromino, display)

    def draw_border(self, display: Display) -> None:
        """Draw the left, bottom and right borders of the playfield."""
        border_color = Color.WHITE
        field_width = PLAYFIELD_WIDTH * BLOCK_SIZE
        field_height = PLAYFIELD_HEIGHT * BLOCK_SIZE

        # Left border
        display.draw_rectangle(
            PLAYFIELD_OFFSET_X - PLAYFIELD_BORDER_WIDTH,
            PLAYFIELD_OFFSET_Y,
            PLAYFIELD_BORDER_WIDTH,
            field_height,
            border_color,
        )
        # Bottom border
        display.draw_rectangle(
            PLAYFIELD_OFFSET_X - PLAYFIELD_BORDER_WIDTH,
            PLAYFIELD_OFFSET_Y + field_height,
            PLAYFIELD_BORDER_WIDTH + field_width + PLAYFIELD_BORDER_WIDTH,
            PLAYFIELD_BORDER_WIDTH,
            border_color,
        )
        # Right border
        display.draw_rectangle(
            PLAYFIELD_OFFSET_X + field_width,
            PLAYFIELD_OFFSET_Y,
            PLAYFIELD_BORDER_WIDTH,
            field_height,
            border_color,
        )

    def _draw_playfield_blocks(self, playfield: Playfield, display: Display) -> None:
        dimensions = playfield.dimensions
        for y in range(dimensions.height):
            for x in range(dimensions.width):
                position = Position(x, y)
                tetromino_type = playfield.tetromino_type_at(position)
                if tetromino_type is not None:
                    display.draw_block(_to_window(position), tetromino_type)

    def _draw_current_tetromino(
        self, current_tetromino: TetrominoInstance | None, display: Display
    ) -> None:
        if current_tetromino is None:
            return
        for position in current_tetromino.world_blocks():
            display.draw_block(_to_window(position), current_tetromino.tetromino_type)