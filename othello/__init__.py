"""Othello (Reversi) engine with a console game loop."""

from .board import Board, Cell, Color, IllegalMoveError
from .game import GameState, TurnCoordinator, TurnEvent
from .agents import BaseAgent, GreedyAgent, HumanAgent

__all__ = [
    "BaseAgent",
    "Board",
    "Cell",
    "Color",
    "GameState",
    "GreedyAgent",
    "HumanAgent",
    "IllegalMoveError",
    "TurnCoordinator",
    "TurnEvent",
]
