"""CLI for playing Reversi in the terminal."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import tyro

from ..config import AppConfig, GameConfig, load_config, make_controller, setup_logging
from ..envs.reversi import CellState, TurnController
from ..errors import ReversiError

logger = logging.getLogger(__name__)

SYMBOLS = {CellState.BLACK: "Black (X)", CellState.WHITE: "White (O)"}


def run_session(
    controller: TurnController,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """
    Drive a controller from text input until the user quits or input ends.

    Each line is ``x y``; ``q`` quits. Rejected placements are reported and
    the prompt is shown again.

    Returns:
        Number of placements made.
    """
    placements = 0

    while True:
        write(controller.render())
        hints = controller.hints()
        color = SYMBOLS[controller.current_color()]
        if hints:
            write(f"{color} to move. Hints: {hints}")
        else:
            write(f"{color} to move. No legal moves.")

        try:
            line = read("Enter x y (q to quit): ").strip()
        except EOFError:
            break
        if line.lower() in ("q", "quit", "exit"):
            break

        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            write("Please enter two integers: x y")
            continue
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            write("Please enter two integers: x y")
            continue

        try:
            result = controller.request_placement(x, y)
        except ReversiError as exc:
            write(f"Rejected: {exc}")
            continue

        placements += 1
        logger.info("Move %d: %s at (%d, %d)", placements, result.color.name, x, y)
        write("")

    return placements


def play(
    size: int = 8,
    capture: bool = False,
    config: Optional[str] = None,
) -> None:
    """
    Play a local two-player game.

    Args:
        size: Board edge length (even, at least 4)
        capture: Flip outflanked opponent pieces after each placement
        config: Optional YAML config; overrides size/capture when given
    """
    if config is not None:
        app_config = load_config(config)
    else:
        app_config = AppConfig(game=GameConfig(params={"size": size, "capture": capture}))

    setup_logging(app_config.logging.level)
    controller = make_controller(app_config)

    print("=" * 40)
    print(f"Reversi {controller.board_size()}x{controller.board_size()}")
    print("=" * 40)
    run_session(controller, read=input)


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
