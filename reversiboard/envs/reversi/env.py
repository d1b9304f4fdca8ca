"""Reversi turn controller: the single writer of board state."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ...errors import IllegalCell
from ..base import BoardController, PlacementResult
from .game import MoveLegalityEngine, clear_hints
from .render import render_board
from .state import BoardState, Cell, CellState
from .utils import REVERSI_SIZE, center_seed, ensure_color, get_captures, opponent_of

logger = logging.getLogger(__name__)

_FREE = (CellState.EMPTY, CellState.HINT)


class TurnController(BoardController):
    """
    Reversi placement state machine (Black to move / White to move).

    Every placement clears the hints, places the mover's color, flips the
    turn and recomputes hints for the new mover. Calls are synchronous and
    validate before mutating, so a failed call leaves board and turn intact.

    With ``capture=False`` (default) opponent pieces are never flipped and
    any free cell may be played; hints are advisory. ``capture=True`` also
    flips the opponent spans closed by the new piece.
    """

    def __init__(
        self,
        size: int = REVERSI_SIZE,
        capture: bool = False,
        engine: Optional[MoveLegalityEngine] = None,
    ) -> None:
        self.capture = bool(capture)
        self._engine = engine if engine is not None else MoveLegalityEngine()
        self._board: Optional[BoardState] = None
        self._color = CellState.BLACK
        self.initialize(size)

    def initialize(self, size: int) -> None:
        seed = center_seed(size)
        board = BoardState(size)
        for x, y, color in seed:
            board.set(x, y, color)
        self._engine.recompute(board, CellState.BLACK)
        self._board = board
        self._color = CellState.BLACK
        logger.debug("Initialized %dx%d board", size, size)

    def place_piece(self, x: int, y: int, color: Any, recompute: bool = True) -> None:
        """
        Put ``color`` on a free cell without passing the turn.

        Args:
            x: Column.
            y: Row.
            color: BLACK or WHITE.
            recompute: Rebuild hints for the color to move afterwards.
        """
        board = self.board
        color = ensure_color(color)
        self._check_free(x, y)
        board.set(x, y, color)
        if recompute:
            self._engine.recompute(board, self._color)

    def request_placement(self, x: int, y: int) -> PlacementResult:
        board = self.board
        self._check_free(x, y)
        before = board.copy()
        mover = self._color

        clear_hints(board)
        board.set(x, y, mover)

        flipped: List[Cell] = []
        if self.capture:
            flipped = get_captures(board, x, y, mover)
            for fx, fy in flipped:
                board.set(fx, fy, mover)

        self._color = opponent_of(mover)
        hints = self._engine.recompute(board, self._color)
        logger.debug(
            "%s placed at (%d, %d); %s to move, %d hint(s)",
            mover.name, x, y, self._color.name, len(hints),
        )

        changed = tuple(
            (cx, cy, state)
            for (cx, cy, state), (_, _, old) in zip(board.all_cells(), before.all_cells())
            if state != old
        )
        return PlacementResult(
            x=x,
            y=y,
            color=mover,
            next_color=self._color,
            hints=tuple(hints),
            changed=changed,
            flipped=tuple(flipped),
        )

    def _check_free(self, x: int, y: int) -> None:
        state = self.board.get(x, y)
        if state not in _FREE:
            raise IllegalCell(x, y, state)

    @property
    def board(self) -> BoardState:
        assert self._board is not None
        return self._board

    def current_color(self) -> CellState:
        return self._color

    def board_size(self) -> int:
        return self.board.size

    def cell_at(self, x: int, y: int) -> CellState:
        return self.board.get(x, y)

    def all_cells(self) -> List[Tuple[int, int, CellState]]:
        return self.board.all_cells()

    def hints(self) -> List[Cell]:
        return self.board.cells_of_type(CellState.HINT)

    def render(self, hint_marker: str = "*") -> str:
        return render_board(self.board, hint_marker=hint_marker)

    def __repr__(self) -> str:
        return (
            f"TurnController(size={self.board_size()}, "
            f"to_move={self._color.name}, capture={self.capture})"
        )
