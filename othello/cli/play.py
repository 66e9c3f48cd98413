"""CLI for playing Othello against the computer."""

import sys
from dataclasses import replace
from typing import Callable, Dict, Literal, Optional

import tyro

from ..agents import HumanAgent
from ..board import Board, Color
from ..config import AppConfig, load_config
from ..game import TurnCoordinator, TurnEvent
from ..registry import make_agent
from ..utils import MoveLogger, game_over_summary, pass_notice, render_state

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_COLOR_OPTIONS = {"w": Color.WHITE, "white": Color.WHITE, "b": Color.BLACK, "black": Color.BLACK}


def ask_color(input_fn: InputFn = input) -> Color:
    """Ask which color the human plays until a valid answer is given."""
    answer = input_fn("White or black? [w/b] ")
    while answer.strip().lower() not in _COLOR_OPTIONS:
        answer = input_fn("Invalid option. White or black? [w/b] ")
    return _COLOR_OPTIONS[answer.strip().lower()]


def ask_play_again(input_fn: InputFn = input) -> bool:
    answer = input_fn("Do you want play again [y/n]? ").strip().lower()
    while answer not in ("y", "n"):
        answer = input_fn("Invalid option. Yes or no [y/n]? ").strip().lower()
    return answer == "y"


def play_game(
    cfg: AppConfig,
    human: Color,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    board: Optional[Board] = None,
) -> Dict[Color, int]:
    """
    Play one game of human vs configured agent.

    Args:
        cfg: Application config (agent id/params, display, logging)
        human: Color played by the human; Black always opens
        input_fn: Source of console input
        output_fn: Sink for console output
        board: Starting position (standard opening when None)

    Returns:
        Final scores.

    Raises:
        ValueError: If the configured agent does not accept its params.
    """
    computer = human.opposite()
    if board is None:
        board = Board.initial()

    human_agent = HumanAgent(color=human, input_fn=input_fn, output_fn=output_fn)
    computer_agent = make_agent(
        cfg.agent.id,
        color=computer,
        input_fn=input_fn,
        output_fn=output_fn,
        **cfg.agent.params,
    )
    coordinator = TurnCoordinator(board, {human: human_agent, computer: computer_agent})

    def show(event: TurnEvent) -> None:
        if cfg.game.show_board:
            output_fn(render_state(board, human, computer))
        if event.passed:
            output_fn(pass_notice(event.color))

    coordinator.add_callback(show)

    logger: Optional[MoveLogger] = None
    if cfg.log.enabled:
        logger = MoveLogger(board, log_dir=cfg.log.log_dir)
        coordinator.add_callback(logger)

    if cfg.game.show_board:
        output_fn(render_state(board, human, computer))

    try:
        scores = coordinator.play()
    finally:
        if logger is not None:
            logger.close()

    output_fn(game_over_summary(scores, human))
    output_fn("")
    return scores


def run_session(
    cfg: AppConfig,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Play games until the user declines another one. Returns games played."""
    games = 0
    while True:
        human = cfg.game.human
        if human is None:
            human = ask_color(input_fn)
        play_game(cfg, human, input_fn=input_fn, output_fn=output_fn)
        games += 1
        if not ask_play_again(input_fn):
            return games


def resolve_config(
    config: Optional[str] = None,
    human_color: Optional[str] = None,
    show_board: Optional[bool] = None,
    pause: Optional[bool] = None,
    log_dir: Optional[str] = None,
) -> AppConfig:
    """Load the YAML config (if any) and apply explicit command-line overrides on top."""
    cfg = load_config(config) if config is not None else AppConfig()

    if human_color is not None:
        cfg.game = replace(cfg.game, human_color=human_color)
    if show_board is not None:
        cfg.game.show_board = show_board
    if pause is not None:
        cfg.agent.params["pause"] = pause
    if log_dir is not None:
        cfg.log.enabled = True
        cfg.log.log_dir = log_dir
    return cfg


def play(
    config: Optional[str] = None,
    human_color: Optional[Literal["white", "black"]] = None,
    show_board: Optional[bool] = None,
    pause: Optional[bool] = None,
    log_dir: Optional[str] = None,
):
    """
    Play Othello against the computer.

    Args:
        config: Path to a YAML config (defaults are used when omitted)
        human_color: Color you play; asked interactively when omitted
        show_board: Print the board after every move
        pause: Computer waits for Enter ("Press enter to continue") before each
            move. Off unless set here or in the config.
        log_dir: Write a CSV move log into this directory
    """
    cfg = resolve_config(config, human_color, show_board, pause, log_dir)

    try:
        run_session(cfg)
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
        sys.exit(0)


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
