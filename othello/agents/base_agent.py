"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..board import Board, Cell, Color


class BaseAgent(ABC):
    """Move source bound to one player color."""

    def __init__(self, color: Optional[Color] = None) -> None:
        self._color: Optional[Color] = None
        if color is not None:
            self.set_color(color)

    @property
    def color(self) -> Color:
        if self._color is None:
            raise ValueError(f"{type(self).__name__} has no color assigned")
        return self._color

    def set_color(self, color: Color) -> None:
        if color is Color.NONE:
            raise ValueError("An agent cannot play Color.NONE")
        self._color = color

    @abstractmethod
    def select_move(self, board: Board) -> Cell:
        """Return a cell for which ``board.valid_move(cell, self.color)`` holds."""
