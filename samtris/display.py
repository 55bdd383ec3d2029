"""Drawing surfaces the game renders to."""

from __future__ import annotations

from abc import ABC, abstractmethod

from samtris.color import Color
from samtris.position import Position
from samtris.tetromino_type import TetrominoType


class Display(ABC):
    """Abstract drawing surface; implementations raise on drawing failures."""

    @abstractmethod
    def clear(self) -> None:
        """Erase everything drawn so far."""

    @abstractmethod
    def draw_block(self, position: Position, tetromino_type: TetrominoType) -> None:
        """Draw one block of ``tetromino_type`` with its top-left corner at ``position``."""

    @abstractmethod
    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill a rectangle in pixel coordinates."""

    @abstractmethod
    def present(self) -> None:
        """Show what has been drawn."""


class RecordingDisplay(Display):
    """A display that records the drawing calls made on it."""

    def __init__(self) -> None:
        self.cleared = False
        self.presented = False
        self.drawn_blocks: list[tuple[Position, TetrominoType]] = []
        self.drawn_rectangles: list[tuple[int, int, int, int, Color]] = []

    def clear(self) -> None:
        self.cleared = True
        self.drawn_blocks.clear()
        self.drawn_rectangles.clear()

    def draw_block(self, position: Position, tetromino_type: TetrominoType) -> None:
        self.drawn_blocks.append((position, tetromino_type))

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.drawn_rectangles.append((x, y, width, height, color))

    def present(self) -> None:
        self.presented = True

    def reset(self) -> None:
        """Forget all recorded calls."""
        self.cleared = False
        self.presented = False
        self.drawn_blocks.clear()
        self.drawn_rectangles.clear()