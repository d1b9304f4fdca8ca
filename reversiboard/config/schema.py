"""Configuration schema for board sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .. import envs  # noqa: F401 - registers built-in games
from ..envs.base import BoardController
from ..registry import make_game

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class GameConfig:
    id: str = "reversi"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game_data = data.get("game", {})
        game = GameConfig(
            id=str(game_data.get("id", "reversi")),
            params=dict(game_data.get("params", {})),
        )

        logging_data = data.get("logging", {})
        logging_cfg = LoggingConfig(level=str(logging_data.get("level", "INFO")).upper())
        if not isinstance(logging.getLevelName(logging_cfg.level), int):
            raise ValueError(f"Unknown log level: {logging_cfg.level}")

        return cls(game=game, logging=logging_cfg)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)


def make_controller(config: AppConfig) -> BoardController:
    """Build the configured controller through the registry."""
    return make_game(config.game.id, **config.game.params)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once."""
    if getattr(setup_logging, "_configured", False):
        return
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    setup_logging._configured = True  # type: ignore[attr-defined]
