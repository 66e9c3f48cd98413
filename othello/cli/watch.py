"""CLI for watching two agents play each other."""

from typing import Callable, Optional

import tyro

from ..board import Board, Color
from ..game import TurnCoordinator, TurnEvent
from ..registry import make_agent
from ..utils import MoveLogger, pass_notice, render_board
from ..utils.render import score_line


def watch_game(
    black: str = "greedy",
    white: str = "greedy",
    render: bool = True,
    log_dir: Optional[str] = None,
    output_fn: Callable[[str], None] = print,
    board: Optional[Board] = None,
) -> TurnCoordinator:
    """Play one game between two registered agents and return the finished coordinator."""
    if board is None:
        board = Board.initial()
    agents = {
        Color.BLACK: make_agent(black, color=Color.BLACK),
        Color.WHITE: make_agent(white, color=Color.WHITE),
    }
    coordinator = TurnCoordinator(board, agents)

    def show(event: TurnEvent) -> None:
        output_fn(f"{event.ply}. {event.color.symbol} {event.cell.to_notation()} (+{len(event.flips)})")
        if render:
            output_fn(render_board(board))
        if event.passed:
            output_fn(pass_notice(event.color))

    coordinator.add_callback(show)

    logger = MoveLogger(board, log_dir=log_dir) if log_dir is not None else None
    if logger is not None:
        coordinator.add_callback(logger)
    try:
        coordinator.play()
    finally:
        if logger is not None:
            logger.close()

    output_fn(score_line(board.get_scores()))
    output_fn(f"Result: {coordinator.result()}")
    return coordinator


def watch(
    black: str = "greedy",
    white: str = "greedy",
    render: bool = True,
    log_dir: Optional[str] = None,
):
    """
    Watch agent vs agent.

    Args:
        black: Registered agent id playing black
        white: Registered agent id playing white
        render: Print the board after every move
        log_dir: Write a CSV move log into this directory
    """
    watch_game(black=black, white=white, render=render, log_dir=log_dir)


def main() -> None:
    tyro.cli(watch)


if __name__ == "__main__":
    main()
