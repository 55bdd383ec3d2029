"""A display that draws onto a pygame surface."""

from __future__ import annotations

import pygame

from samtris.color import Color
from samtris.display import Display
from samtris.position import Position
from samtris.tetromino_type import TetrominoType

TEXTURE_BLOCK_SIZE = 16


class PygameDisplay(Display):
    """Draws blocks from a texture strip and filled rectangles onto a surface.

    The texture holds one block image per tetromino type, side by side, in the
    order of the types' values.
    """

    def __init__(
        self,
        canvas: pygame.Surface,
        block_size_in_pixels: int,
        tetrominos_texture: pygame.Surface,
    ) -> None:
        self.canvas = canvas
        self.block_size_in_pixels = block_size_in_pixels
        self.tetrominos_texture = tetrominos_texture

    @staticmethod
    def _texture_rect(tetromino_type: TetrominoType) -> pygame.Rect:
        return pygame.Rect(
            tetromino_type.value * TEXTURE_BLOCK_SIZE,
            0,
            TEXTURE_BLOCK_SIZE,
            TEXTURE_BLOCK_SIZE,
        )

    def clear(self) -> None:
        self.canvas.fill(Color.BLACK.as_tuple())

    def draw_block(self, position: Position, tetromino_type: TetrominoType) -> None:
        image = self.tetrominos_texture.subsurface(self._texture_rect(tetromino_type))
        size = self.block_size_in_pixels
        if image.get_size() != (size, size):
            image = pygame.transform.scale(image, (size, size))
        self.canvas.blit(image, (position.x, position.y))

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.canvas.fill(color.as_tuple(), pygame.Rect(x, y, width, height))

    def present(self) -> None:
        pygame.display.flip()