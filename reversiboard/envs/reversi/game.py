"""Reversi move legality (hint computation)."""

from __future__ import annotations

import logging
from typing import List

from .state import BoardState, Cell, CellState
from .utils import DIRECTIONS, ensure_color, walk_ray

logger = logging.getLogger(__name__)


class MoveLegalityEngine:
    """
    Derives legal placements for a color by ray casting from its own pieces.

    Every piece of ``color`` casts a ray in each of the eight directions; a
    ray that crosses one or more opponent pieces and lands on a free cell
    makes that cell a legal move. Hints are never patched: ``recompute``
    clears all of them and rebuilds the whole set.
    """

    def legal_moves(self, board: BoardState, color: CellState) -> List[Cell]:
        """Legal placements for ``color`` in row-major order. Does not mutate."""
        color = ensure_color(color)
        found = set()
        for x, y in board.cells_of_type(color):
            for dx, dy in DIRECTIONS:
                target = walk_ray(board, x, y, dx, dy, color)
                if target is not None:
                    found.add(target)
        return sorted(found, key=lambda cell: (cell[1], cell[0]))

    def recompute(self, board: BoardState, color: CellState) -> List[Cell]:
        """
        Replace the board's HINT cells with the legal moves for ``color``.

        Args:
            board: Board to update in place.
            color: Piece color to compute hints for.

        Returns:
            The new hint cells, row-major.
        """
        color = ensure_color(color)
        clear_hints(board)
        hints = self.legal_moves(board, color)
        for x, y in hints:
            board.set(x, y, CellState.HINT)
        logger.debug("%d hint(s) for %s", len(hints), color.name)
        return hints


def clear_hints(board: BoardState) -> None:
    for x, y in board.cells_of_type(CellState.HINT):
        board.set(x, y, CellState.EMPTY)


def recompute_hints(board: BoardState, color: CellState) -> List[Cell]:
    """Module-level shortcut for ``MoveLegalityEngine().recompute``."""
    return MoveLegalityEngine().recompute(board, color)
