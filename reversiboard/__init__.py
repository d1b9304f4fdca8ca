"""Rules and turn engine for an N x N Reversi board."""

from .envs import BoardController, PlacementResult
from .envs.reversi import BoardState, CellState, MoveLegalityEngine, TurnController
from .errors import IllegalCell, InvalidColor, OutOfBounds, ReversiError

__all__ = [
    "BoardController",
    "BoardState",
    "CellState",
    "IllegalCell",
    "InvalidColor",
    "MoveLegalityEngine",
    "OutOfBounds",
    "PlacementResult",
    "ReversiError",
    "TurnController",
]
