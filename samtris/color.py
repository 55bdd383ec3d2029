"""RGB colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An opaque colour with 8-bit red, green and blue channels."""

    r: int
    g: int
    b: int

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    GRAY: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    CYAN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    PURPLE: ClassVar[Color]
    ORANGE: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} out of range 0..255: {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the colour as an ``(r, g, b)`` triple."""
        return (self.r, self.g, self.b)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.GRAY = Color(128, 128, 128)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.YELLOW = Color(255, 255, 0)
Color.PURPLE = Color(128, 0, 128)
Color.ORANGE = Color(255, 165, 0)