"""Error taxonomy for the board engine."""

from __future__ import annotations

from typing import Any


class ReversiError(ValueError):
    """Base class for recoverable engine errors."""


class OutOfBounds(ReversiError):
    """Coordinate lies outside ``[0, size)``."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"Cell ({x}, {y}) is outside a {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class InvalidColor(ReversiError):
    """A non-piece value was given where Black or White is required."""

    def __init__(self, color: Any) -> None:
        super().__init__(f"Expected a piece color (BLACK or WHITE), got {color!r}")
        self.color = color


class IllegalCell(ReversiError):
    """Placement targets a cell that already holds a piece."""

    def __init__(self, x: int, y: int, state: Any) -> None:
        super().__init__(f"Cell ({x}, {y}) is occupied by {getattr(state, 'name', state)}")
        self.x = x
        self.y = y
        self.state = state
