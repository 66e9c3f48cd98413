"""Shared test helpers."""

from __future__ import annotations

from typing import Iterable, List

from othello.agents.base_agent import BaseAgent
from othello.board import Board, Cell, Color


class ScriptedAgent(BaseAgent):
    """Plays a fixed list of cells in order."""

    def __init__(self, color: Color, moves: Iterable[Cell]) -> None:
        super().__init__(color)
        self.moves: List[Cell] = list(moves)

    def select_move(self, board: Board) -> Cell:
        return self.moves.pop(0)


def assert_board_invariants(board: Board) -> None:
    scores = board.get_scores()
    assert scores[Color.BLACK] + scores[Color.WHITE] + board.empty_count() == 64
    cells = list(board.cells())
    assert scores[Color.BLACK] == sum(1 for c in cells if board[c] is Color.BLACK)
    assert scores[Color.WHITE] == sum(1 for c in cells if board[c] is Color.WHITE)


EMPTY_ROW = "........"

# Black plays 1c (leaving White without a move), then 8c which ends the game.
PASS_POSITION = ["xo......"] + [EMPTY_ROW] * 6 + ["xo......"]
