"""Console human agent."""

from __future__ import annotations

from typing import Callable, Optional

from ..board import Board, Cell, Color
from .base_agent import BaseAgent

PROMPT = "Your turn [1h, 5a, etc]: "
WRONG_FORMAT = "Wrong turn format."
ILLEGAL_CELL = "You can't place a piece on this cell."


class MoveFormatError(ValueError):
    """Raised for move tokens that are not '<row 1-8><column a-h>'."""


def parse_move(token: str) -> Cell:
    """Parse a human move token like '3d' into a Cell."""
    try:
        return Cell.from_notation(token)
    except ValueError as exc:
        raise MoveFormatError(WRONG_FORMAT) from exc


class HumanAgent(BaseAgent):
    """Asks for moves on the console until a legal one is entered."""

    def __init__(
        self,
        color: Optional[Color] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        super().__init__(color)
        self._input = input_fn
        self._output = output_fn

    def select_move(self, board: Board) -> Cell:
        while True:
            token = self._input(PROMPT)
            try:
                cell = parse_move(token)
            except MoveFormatError as exc:
                self._output(str(exc))
                continue
            if board.valid_move(cell, self.color):
                return cell
            self._output(ILLEGAL_CELL)
