"""Reversi board package."""

from .state import PIECE_COLORS, BoardState, CellState
from .game import MoveLegalityEngine, clear_hints, recompute_hints
from .env import TurnController
from .render import render_board
from .utils import DIRECTIONS, REVERSI_SIZE, center_seed, get_captures, opponent_of, walk_ray

__all__ = [
    "BoardState",
    "CellState",
    "DIRECTIONS",
    "MoveLegalityEngine",
    "PIECE_COLORS",
    "REVERSI_SIZE",
    "TurnController",
    "center_seed",
    "clear_hints",
    "get_captures",
    "opponent_of",
    "recompute_hints",
    "render_board",
    "walk_ray",
]
