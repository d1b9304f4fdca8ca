"""Core interfaces between board controllers and their presentation layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple

if TYPE_CHECKING:
    from .reversi.state import Cell, CellState


@dataclass(slots=True)
class PlacementResult:
    """Outcome of a single placement request."""

    x: int
    y: int
    color: CellState
    next_color: CellState
    hints: Tuple[Cell, ...]
    changed: Tuple[Tuple[int, int, CellState], ...]
    flipped: Tuple[Cell, ...] = ()

    def __iter__(self) -> Iterator[Tuple[int, int, CellState]]:
        """Iterate over changed cells, the ones a renderer must redraw."""
        return iter(self.changed)


class BoardController(ABC):
    """Abstract synchronous, single-writer board controller."""

    @abstractmethod
    def initialize(self, size: int) -> None:
        """Build a fresh seeded board of the given size."""

    @abstractmethod
    def request_placement(self, x: int, y: int) -> PlacementResult:
        """Place the current color at ``(x, y)`` and advance the turn."""

    @abstractmethod
    def current_color(self) -> CellState:
        """Color whose turn it is."""

    @abstractmethod
    def board_size(self) -> int:
        """Board edge length."""

    @abstractmethod
    def cell_at(self, x: int, y: int) -> CellState:
        """State of a single cell."""

    @abstractmethod
    def all_cells(self) -> List[Tuple[int, int, CellState]]:
        """Every cell with its state, row-major."""
