"""Greedy agent: most flips, with a bonus for corners."""

from typing import Callable, Optional

from ..board import Board, Cell, Color
from .base_agent import BaseAgent

CORNER_BONUS = 10


class GreedyAgent(BaseAgent):
    """
    Greedy agent for Othello.

    Strategy:
    1. Score every legal cell by the number of pieces it flips
    2. Corners get a fixed bonus (stable positions)
    3. Highest score wins; ties go to the first cell in row-major order
    """

    def __init__(
        self,
        color: Optional[Color] = None,
        corner_bonus: int = CORNER_BONUS,
        pause: bool = False,
        input_fn: Callable[[str], str] = input,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize greedy agent.

        Args:
            color: Bound player color (may be set later with set_color)
            corner_bonus: Priority added for corner cells
            pause: Wait for Enter before moving so a human can read the board
            input_fn: Used for the pause prompt
            output_fn: Receives the move announcement; silent when None
        """
        super().__init__(color)
        self.corner_bonus = corner_bonus
        self.pause = pause
        self._input = input_fn
        self._output = output_fn

    def priority(self, board: Board, cell: Cell) -> int:
        score = board.count_flips(cell, self.color)
        if cell.is_corner():
            score += self.corner_bonus
        return score

    def select_move(self, board: Board) -> Cell:
        """Select the cell with maximal priority."""
        candidates = board.legal_moves(self.color)
        if not candidates:
            raise ValueError("No legal moves available")

        if self.pause:
            self._input("Press enter to continue")

        best = candidates[0]
        best_score = self.priority(board, best)
        for cell in candidates[1:]:
            score = self.priority(board, cell)
            if score > best_score:
                best, best_score = cell, score

        if self._output is not None:
            self._output(f"Computer place a piece on {best.to_notation()}")
        return best
