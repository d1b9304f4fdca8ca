"""Board controller modules."""

from .base import BoardController, PlacementResult
from .reversi import BoardState, CellState, MoveLegalityEngine, TurnController
from ..registry import list_games, register_game

if "reversi" not in list_games():
    register_game("reversi", TurnController)

__all__ = [
    "BoardController",
    "BoardState",
    "CellState",
    "MoveLegalityEngine",
    "PlacementResult",
    "TurnController",
]
