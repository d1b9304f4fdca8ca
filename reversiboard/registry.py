"""Central registry of board controllers."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple

from .envs.base import BoardController

GameFactory = Callable[..., BoardController]

_GAME_REGISTRY: Dict[str, Tuple[GameFactory, Dict[str, Any]]] = {}


def register_game(game_id: str, entry_point: GameFactory, **default_kwargs: Any) -> None:
    """Register a board controller constructor."""
    if game_id in _GAME_REGISTRY:
        raise ValueError(f"Game id '{game_id}' is already registered.")
    _GAME_REGISTRY[game_id] = (entry_point, dict(default_kwargs))


def make_game(game_id: str, **overrides: Any) -> BoardController:
    """Instantiate a registered controller using optional parameter overrides."""
    if game_id not in _GAME_REGISTRY:
        raise KeyError(f"Game id '{game_id}' is not registered.")

    entry_point, defaults = _GAME_REGISTRY[game_id]
    params = {**defaults, **overrides}
    controller = entry_point(**params)
    if not isinstance(controller, BoardController):
        raise TypeError(
            f"Game id '{game_id}' built {type(controller).__name__}, not a BoardController."
        )
    return controller


def list_games() -> Iterable[str]:
    """Return iterable of registered game identifiers."""
    return tuple(_GAME_REGISTRY.keys())


def get_game_entry(game_id: str) -> Tuple[GameFactory, Dict[str, Any]]:
    """Retrieve the raw entry point and defaults for a game."""
    if game_id not in _GAME_REGISTRY:
        raise KeyError(f"Game id '{game_id}' is not registered.")
    entry_point, defaults = _GAME_REGISTRY[game_id]
    return entry_point, dict(defaults)
