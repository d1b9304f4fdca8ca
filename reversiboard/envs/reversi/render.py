"""Plain-text rendering of a Reversi board."""

from __future__ import annotations

from .state import BoardState, CellState

PIECE_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.BLACK: "X",
    CellState.WHITE: "O",
}


def render_board(board: BoardState, hint_marker: str = "*") -> str:
    """
    Draw the board as text, one line per row.

    The header lists x indices; each row starts with its y index. Black is
    ``X``, White is ``O``, empty cells are ``.`` and hints use
    ``hint_marker``.
    """
    width = len(str(board.size - 1))
    lines = [" " * (width + 1) + " ".join(str(x).rjust(width) for x in range(board.size))]

    for y in range(board.size):
        row = []
        for x in range(board.size):
            state = board.get(x, y)
            symbol = hint_marker if state == CellState.HINT else PIECE_SYMBOLS[state]
            row.append(symbol.rjust(width))
        lines.append(f"{str(y).rjust(width)} " + " ".join(row))

    return "\n".join(lines)
