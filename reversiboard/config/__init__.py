"""Config package exports."""

from .schema import (
    AppConfig,
    GameConfig,
    LoggingConfig,
    load_config,
    make_controller,
    setup_logging,
)

__all__ = [
    "AppConfig",
    "GameConfig",
    "LoggingConfig",
    "load_config",
    "make_controller",
    "setup_logging",
]
