"""Reversi board state: cell values and the bounds-checked grid store."""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Iterator, List, Tuple

import numpy as np

from ...errors import OutOfBounds


class CellState(IntEnum):
    """Contents of a single cell.

    Piece colors keep the +1/-1 token convention so that the opponent of a
    color is its negation. ``HINT`` is a transient legal-move marker.
    """

    EMPTY = 0
    BLACK = 1
    WHITE = -1
    HINT = 2


PIECE_COLORS = (CellState.BLACK, CellState.WHITE)

Cell = Tuple[int, int]


class BoardState:
    """
    N x N grid of cell states addressed by ``(x, y)``.

    No game rules live here: it only stores values and checks bounds.
    Iteration is row-major (``y`` outer, ``x`` inner).
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = int(size)
        self._grid = np.zeros((self._size, self._size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the raw ``[x, y]`` grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        """True for integer coordinates inside the grid."""
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            return False
        return 0 <= x < self._size and 0 <= y < self._size

    def _check(self, x: int, y: int) -> Tuple[int, int]:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._size)
        return operator.index(x), operator.index(y)

    def get(self, x: int, y: int) -> CellState:
        x, y = self._check(x, y)
        return CellState(int(self._grid[x, y]))

    def set(self, x: int, y: int, state: CellState) -> None:
        x, y = self._check(x, y)
        self._grid[x, y] = CellState(state)

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        self._grid.fill(CellState.EMPTY)

    def all_cells(self) -> List[Tuple[int, int, CellState]]:
        return list(self._iter_cells())

    def cells_of_type(self, state: CellState) -> List[Cell]:
        state = CellState(state)
        return [(x, y) for x, y, value in self._iter_cells() if value == state]

    def _iter_cells(self) -> Iterator[Tuple[int, int, CellState]]:
        for y in range(self._size):
            for x in range(self._size):
                yield x, y, CellState(int(self._grid[x, y]))

    def copy(self) -> "BoardState":
        other = BoardState(self._size)
        other._grid = self._grid.copy()
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._grid, other._grid)

    def __repr__(self) -> str:
        return f"BoardState(size={self._size})"
