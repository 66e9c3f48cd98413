"""Tests for the CSV move log."""

import csv

from othello.board import Board, Cell, Color
from othello.game import TurnCoordinator
from othello.utils import MoveLogger

from .helpers import PASS_POSITION, ScriptedAgent


def test_move_logger_records_moves(tmp_path):
    board = Board.from_rows(PASS_POSITION)
    coordinator = TurnCoordinator(
        board,
        {
            Color.BLACK: ScriptedAgent(Color.BLACK, [Cell(0, 2), Cell(7, 2)]),
            Color.WHITE: ScriptedAgent(Color.WHITE, []),
        },
    )

    with MoveLogger(board, log_dir=str(tmp_path), filename="game.csv") as logger:
        coordinator.add_callback(logger)
        coordinator.play()

    with open(tmp_path / "game.csv", newline="") as f:
        rows = list(csv.DictReader(f))

    assert [row["cell"] for row in rows] == ["1c", "8c"]
    assert [row["event"] for row in rows] == ["pass", "over"]
    assert rows[0]["color"] == "black"
    assert rows[0]["flips"] == "1"
    assert (rows[0]["black"], rows[0]["white"]) == ("4", "1")
    assert (rows[1]["black"], rows[1]["white"]) == ("6", "0")


def test_move_logger_default_filename(tmp_path):
    log_dir = tmp_path / "logs"
    logger = MoveLogger(Board.initial(), log_dir=str(log_dir))
    logger.close()

    files = list(log_dir.glob("game_*.csv"))
    assert len(files) == 1
    assert files[0].read_text().strip() == "move,color,cell,flips,black,white,event"
