"""Shared ray-walking helpers for Reversi rules."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as np

from ...errors import InvalidColor
from .state import PIECE_COLORS, BoardState, Cell, CellState

REVERSI_SIZE = 8

# Unit offsets for W, NW, N, NE, E, SE, S, SW.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
)


def ensure_color(color: Any) -> CellState:
    """Return ``color`` as a piece color or raise InvalidColor."""
    if isinstance(color, bool) or not isinstance(color, (int, np.integer)):
        raise InvalidColor(color)
    try:
        state = CellState(color)
    except (ValueError, TypeError):
        raise InvalidColor(color) from None
    if state not in PIECE_COLORS:
        raise InvalidColor(color)
    return state


def opponent_of(color: CellState) -> CellState:
    return CellState(-ensure_color(color))


def walk_ray(
    board: BoardState,
    x: int,
    y: int,
    dx: int,
    dy: int,
    color: CellState,
) -> Optional[Cell]:
    """
    Walk from ``(x, y)`` in direction ``(dx, dy)`` looking for a landing cell.

    The walk crosses opponent pieces and stops at the first cell that is not
    an opponent piece. That cell is a legal placement for ``color`` only if
    at least one opponent piece was crossed and the cell holds no piece.

    Returns:
        The landing ``(x, y)`` or None when the ray yields nothing.
    """
    color = ensure_color(color)
    opponent = opponent_of(color)
    crossed = False
    cx, cy = x + dx, y + dy

    while board.in_bounds(cx, cy):
        value = board.get(cx, cy)
        if value == opponent:
            crossed = True
            cx += dx
            cy += dy
            continue
        if crossed and value in (CellState.EMPTY, CellState.HINT):
            return cx, cy
        return None

    return None


def get_captures(board: BoardState, x: int, y: int, color: CellState) -> List[Cell]:
    """
    Opponent pieces bounded by ``(x, y)`` and a ``color`` anchor.

    Scans every direction from the placed cell and keeps a span only when it
    is one or more contiguous opponent pieces closed by ``color``.
    """
    color = ensure_color(color)
    opponent = opponent_of(color)
    captures: List[Cell] = []

    for dx, dy in DIRECTIONS:
        span: List[Cell] = []
        cx, cy = x + dx, y + dy

        while board.in_bounds(cx, cy) and board.get(cx, cy) == opponent:
            span.append((cx, cy))
            cx += dx
            cy += dy

        if span and board.in_bounds(cx, cy) and board.get(cx, cy) == color:
            captures.extend(span)

    return captures


def center_seed(size: int) -> List[Tuple[int, int, CellState]]:
    """Opening placements for a ``size`` board, in the order they are made."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    if size < 4 or size % 2:
        raise ValueError(f"Board size must be even and at least 4, got {size}")
    mid = size // 2
    return [
        (mid - 1, mid - 1, CellState.BLACK),
        (mid, mid - 1, CellState.WHITE),
        (mid, mid, CellState.BLACK),
        (mid - 1, mid, CellState.WHITE),
    ]
