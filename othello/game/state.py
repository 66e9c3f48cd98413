"""Game state dataclasses for the turn coordinator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..board.types import Cell, Color


@dataclass(frozen=True)
class GameState:
    """Which color moves next, or whether the game is over."""

    to_move: Color = Color.BLACK
    over: bool = False


@dataclass(frozen=True)
class TurnEvent:
    """One applied move and the state it led to."""

    ply: int
    color: Color
    cell: Cell
    flips: List[Cell] = field(default_factory=list)
    passed: bool = False
    state: GameState = field(default_factory=GameState)

    @property
    def passed_color(self) -> Color:
        """Color that was forced to pass after this move (NONE if nobody)."""
        return self.color.opposite() if self.passed else Color.NONE
